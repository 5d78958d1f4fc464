import uuid
import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.carts.models import CartItem, Receipt
from apps.recipes.services import create_recipe


def cart_url(user):
    return reverse('carts:cart', kwargs={'user_id': user.id})


@pytest.mark.django_db
class TestCart:
    """Tests for /api/users/{user_id}/cart/"""

    def test_get_cart(self, authenticated_client, filled_cart):
        response = authenticated_client.get(cart_url(filled_cart))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['item_count'] == 3
        assert response.data['subtotal'] == '23.33'
        assert response.data['tax'] == '1.92'
        assert response.data['total'] == '25.25'
        assert response.data['items'][0]['item']['name'] == 'Apples'

    def test_add_by_barcode(self, authenticated_client, user, apples):
        response = authenticated_client.post(cart_url(user), {'barcode': '4011'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['item_count'] == 1

    def test_add_unknown_item(self, authenticated_client, user):
        response = authenticated_client.post(cart_url(user), {'item_id': str(uuid.uuid4())}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_add_without_identifier(self, authenticated_client, user):
        response = authenticated_client.post(cart_url(user), {'quantity': 2}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_clear(self, authenticated_client, filled_cart):
        response = authenticated_client.delete(cart_url(filled_cart))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not CartItem.objects.filter(user=filled_cart).exists()

    def test_other_users_cart_forbidden(self, other_client, filled_cart):
        response = other_client.get(cart_url(filled_cart))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_can_view_any_cart(self, admin_client, filled_cart):
        response = admin_client.get(cart_url(filled_cart))

        assert response.status_code == status.HTTP_200_OK

    def test_unauthenticated(self, api_client, user):
        response = api_client.get(cart_url(user))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCartLine:
    """Tests for /api/users/{user_id}/cart/{item_id}/"""

    def test_set_quantity(self, authenticated_client, filled_cart, apples):
        url = reverse('carts:cart-line', kwargs={'user_id': filled_cart.id, 'item_id': apples.id})
        response = authenticated_client.patch(url, {'quantity': 5}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['item_count'] == 6

    def test_negative_quantity_removes(self, authenticated_client, filled_cart, apples):
        url = reverse('carts:cart-line', kwargs={'user_id': filled_cart.id, 'item_id': apples.id})
        response = authenticated_client.patch(url, {'quantity': -1}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['item_count'] == 1

    def test_remove(self, authenticated_client, filled_cart, soap):
        url = reverse('carts:cart-line', kwargs={'user_id': filled_cart.id, 'item_id': soap.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert CartItem.objects.filter(user=filled_cart).count() == 1


@pytest.mark.django_db
class TestCartRecipe:

    def test_add_recipe(self, authenticated_client, user, apples, soap):
        recipe = create_recipe(name='Clean Apples', ingredient_ids=[apples.id, soap.id])
        url = reverse('carts:cart-recipe', kwargs={'user_id': user.id, 'recipe_id': recipe.id})

        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['item_count'] == 2

    def test_unknown_recipe(self, authenticated_client, user):
        url = reverse('carts:cart-recipe', kwargs={'user_id': user.id, 'recipe_id': uuid.uuid4()})

        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestCheckoutAndReceipts:

    def test_checkout(self, authenticated_client, filled_cart, apples):
        url = reverse('carts:cart-checkout', kwargs={'user_id': filled_cart.id})
        response = authenticated_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '25.25'
        assert response.data['paid_full_amount'] is True
        assert str(apples.id) in [str(i) for i in response.data['items']]
        assert len(response.data['lines']) == 2

        apples.refresh_from_db()
        assert apples.stock == 3

    def test_checkout_empty(self, authenticated_client, user):
        url = reverse('carts:cart-checkout', kwargs={'user_id': user.id})
        response = authenticated_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_receipts(self, authenticated_client, filled_cart):
        authenticated_client.post(
            reverse('carts:cart-checkout', kwargs={'user_id': filled_cart.id}), {}, format='json'
        )
        receipt = Receipt.objects.get(user=filled_cart)

        response = authenticated_client.get(
            reverse('carts:receipt-list', kwargs={'user_id': filled_cart.id})
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

        response = authenticated_client.get(
            reverse('carts:receipt-detail', kwargs={'user_id': filled_cart.id, 'pk': receipt.id})
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data['subtotal'] == '23.33'

    def test_receipt_of_other_user_not_found(self, admin_client, admin_user, filled_cart):
        url = reverse('carts:receipt-detail', kwargs={'user_id': admin_user.id, 'pk': uuid.uuid4()})

        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
