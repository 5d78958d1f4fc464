from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # First-run setup
    path('setup/status/', views.setup_status, name='setup-status'),
    path('setup/init/', views.setup_init, name='setup-init'),

    # Authentication
    path('auth/register/', views.register, name='register'),
    path('auth/login/', views.login, name='login'),
    path('auth/logout/', views.logout, name='logout'),
    path('auth/me/', views.get_current_user, name='current-user'),

    # User profile
    path('users/<uuid:pk>/', views.user_profile, name='user-detail'),

    # Back-office
    path('admin/users/', views.admin_users, name='admin-users'),
    path('admin/users/<uuid:pk>/role/', views.admin_update_role, name='admin-user-role'),
    path('admin/credentials/', views.admin_credentials, name='admin-credentials'),
]
