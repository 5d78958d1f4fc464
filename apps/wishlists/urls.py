from django.urls import path
from . import views

app_name = 'wishlists'

# Mounted under /api/users/{user_id}/wishlists/
urlpatterns = [
    path('', views.wishlist_list, name='wishlist-list'),
    path('<uuid:pk>/', views.wishlist_detail, name='wishlist-detail'),
    path('<uuid:pk>/items/', views.wishlist_add_item, name='wishlist-item-add'),
    path('<uuid:pk>/items/<uuid:item_id>/', views.wishlist_remove_item, name='wishlist-item-remove'),
]
