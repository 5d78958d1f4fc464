"""
Domain exceptions for carts app.

Errors a shopper can trigger from the app are APIException subclasses so
they reach the client with the right status code.
"""
from rest_framework.exceptions import APIException


class CartItemNotFoundError(APIException):
    """Scanned or selected item is not in the catalogue."""
    status_code = 404
    default_detail = 'Item not found.'
    default_code = 'item_not_found'


class RecipeNotFoundError(APIException):
    status_code = 404
    default_detail = 'Recipe not found.'
    default_code = 'recipe_not_found'


class ReceiptNotFoundError(APIException):
    status_code = 404
    default_detail = 'Receipt not found.'
    default_code = 'receipt_not_found'


class EmptyCartError(APIException):
    """Checkout attempted with nothing in the cart."""
    status_code = 400
    default_detail = 'Cart is empty.'
    default_code = 'empty_cart'


class AmbiguousCartItemError(APIException):
    """Neither or both of item_id and barcode were given."""
    status_code = 400
    default_detail = 'Provide exactly one of item_id or barcode.'
    default_code = 'ambiguous_cart_item'
