from django.urls import path
from . import views

app_name = 'carts'

# Mounted under /api/users/{user_id}/
urlpatterns = [
    # GET    cart/                        - Cart with totals
    # POST   cart/                        - Add item (item_id or barcode)
    # DELETE cart/                        - Clear cart
    path('cart/', views.cart, name='cart'),

    # POST   cart/checkout/               - Check out into a receipt
    path('cart/checkout/', views.cart_checkout, name='cart-checkout'),

    # POST   cart/recipes/{recipe_id}/    - Add recipe ingredients
    path('cart/recipes/<uuid:recipe_id>/', views.cart_add_recipe, name='cart-recipe'),

    # PATCH  cart/{item_id}/              - Set quantity
    # DELETE cart/{item_id}/              - Remove line
    path('cart/<uuid:item_id>/', views.cart_line, name='cart-line'),

    # GET    receipts/                    - Receipt history
    # GET    receipts/{id}/               - Receipt detail
    path('receipts/', views.receipt_list, name='receipt-list'),
    path('receipts/<uuid:pk>/', views.receipt_detail, name='receipt-detail'),
]
