from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'recipes'

router = SimpleRouter()
router.register(r'recipes', views.RecipeViewSet, basename='recipe')
router.register(r'admin/recipes', views.AdminRecipeViewSet, basename='admin-recipe')

urlpatterns = [
    # GET    /api/recipes/                - List recipes
    # GET    /api/recipes/{id}/           - Recipe detail
    # GET    /api/admin/recipes/          - Back-office listing
    # POST   /api/admin/recipes/          - Create recipe
    # PATCH  /api/admin/recipes/{id}/     - Update recipe
    # DELETE /api/admin/recipes/{id}/     - Delete recipe
    path('', include(router.urls)),
]
