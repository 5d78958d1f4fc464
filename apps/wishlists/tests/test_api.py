import uuid
import pytest
from django.urls import reverse
from rest_framework import status
from apps.wishlists.models import Wishlist


@pytest.mark.django_db
class TestWishlistApi:
    """Tests for /api/users/{user_id}/wishlists/"""

    def test_list(self, authenticated_client, user, wishlist):
        url = reverse('wishlists:wishlist-list', kwargs={'user_id': user.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [w['name'] for w in response.data] == ['Party']

    def test_create(self, authenticated_client, user):
        url = reverse('wishlists:wishlist-list', kwargs={'user_id': user.id})
        response = authenticated_client.post(url, {'name': 'Groceries'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Wishlist.objects.filter(user=user, name='Groceries').exists()

    def test_create_duplicate(self, authenticated_client, user, wishlist):
        url = reverse('wishlists:wishlist-list', kwargs={'user_id': user.id})
        response = authenticated_client.post(url, {'name': 'Party'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_other_user_forbidden(self, other_client, user, wishlist):
        url = reverse('wishlists:wishlist-list', kwargs={'user_id': user.id})
        response = other_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_detail_and_delete(self, authenticated_client, user, wishlist):
        url = reverse('wishlists:wishlist-detail', kwargs={'user_id': user.id, 'pk': wishlist.id})

        assert authenticated_client.get(url).status_code == status.HTTP_200_OK
        assert authenticated_client.delete(url).status_code == status.HTTP_204_NO_CONTENT
        assert authenticated_client.get(url).status_code == status.HTTP_404_NOT_FOUND

    def test_add_item_twice(self, authenticated_client, user, wishlist, coffee):
        url = reverse('wishlists:wishlist-item-add', kwargs={'user_id': user.id, 'pk': wishlist.id})

        first = authenticated_client.post(url, {'item_id': str(coffee.id)}, format='json')
        second = authenticated_client.post(url, {'item_id': str(coffee.id)}, format='json')

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_200_OK
        assert len(second.data['items']) == 1

    def test_add_unknown_item(self, authenticated_client, user, wishlist):
        url = reverse('wishlists:wishlist-item-add', kwargs={'user_id': user.id, 'pk': wishlist.id})
        response = authenticated_client.post(url, {'item_id': str(uuid.uuid4())}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remove_item(self, authenticated_client, user, wishlist, coffee):
        wishlist.items.add(coffee)
        url = reverse('wishlists:wishlist-item-remove', kwargs={
            'user_id': user.id, 'pk': wishlist.id, 'item_id': coffee.id,
        })

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['items'] == []
