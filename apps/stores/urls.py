from django.urls import path
from . import views

app_name = 'stores'

urlpatterns = [
    # Public
    # GET  /api/stores/{store_id}/map/        - Map with aisles and walls
    # GET  /api/stores/{store_id}/map/grid/   - Rendered grid
    path('stores/<slug:store_id>/map/', views.map_detail, name='map-detail'),
    path('stores/<slug:store_id>/map/grid/', views.map_grid, name='map-grid'),

    # Back-office editor
    # PUT  /api/admin/map/                    - Save the whole map
    # POST /api/admin/map/cells/              - Toggle one cell
    path('admin/map/', views.admin_save_map, name='admin-map'),
    path('admin/map/cells/', views.admin_toggle_cell, name='admin-map-cell'),
]
