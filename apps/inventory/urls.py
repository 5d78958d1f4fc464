from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'inventory'

router = SimpleRouter()
router.register(r'items', views.ItemViewSet, basename='item')
router.register(r'admin/items', views.AdminItemViewSet, basename='admin-item')

urlpatterns = [
    # Catalogue
    # GET    /api/items/                     - List items (search, category, promo)
    # GET    /api/items/promos/              - Items on promotion
    # GET    /api/items/barcode/{barcode}/   - Scan lookup with reviews and price history
    # GET    /api/items/categories/          - Distinct categories
    # GET    /api/items/{id}/                - Item detail
    # GET    /api/items/{id}/reviews/        - Item reviews
    # POST   /api/items/{id}/reviews/        - Review an item

    # Back-office
    # GET    /api/admin/items/               - Inventory listing
    # POST   /api/admin/items/               - Create item
    # PATCH  /api/admin/items/{id}/          - Update item
    # DELETE /api/admin/items/{id}/          - Delete item
    # PATCH  /api/admin/items/{id}/promo/    - Set promo flag
    # GET    /api/admin/items/duplicates/    - Fuzzy duplicate report

    path('', include(router.urls)),
]
