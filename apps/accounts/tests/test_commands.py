import pytest
from io import StringIO
from django.core.management import call_command
from apps.accounts.models import User, Role
from apps.carts.models import CartItem
from apps.inventory.models import Item, ItemReview
from apps.recipes.models import Recipe
from apps.stores.models import StoreMap
from apps.wishlists.models import Wishlist


def run_sample_data(*args):
    out = StringIO()
    call_command('create_sample_data', *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestCreateSampleData:

    def test_seeds_every_app(self):
        output = run_sample_data()

        assert 'Sample data created successfully!' in output
        assert User.objects.get(username='admin').role == Role.ADMIN
        assert User.objects.get(username='manager').role == Role.MANAGER
        assert Item.objects.count() == 12
        assert Item.objects.filter(location__isnull=True).count() == 0
        assert StoreMap.objects.get(store_id='default').aisles.count() == 6
        assert ItemReview.objects.count() == 4
        assert Recipe.objects.count() == 2

        alice = User.objects.get(username='alice')
        assert alice.check_password('password123')
        assert CartItem.objects.filter(user=alice).count() == 4
        assert CartItem.objects.get(user=alice, item__barcode='4131').quantity == 6
        assert Wishlist.objects.get(user=alice, name='Weekend').items.count() == 2

    def test_rerun_is_idempotent(self):
        run_sample_data()
        aisle_ids = set(StoreMap.objects.get(store_id='default').aisles.values_list('id', flat=True))

        run_sample_data()

        assert Item.objects.count() == 12
        assert ItemReview.objects.count() == 4
        assert Recipe.objects.count() == 2
        assert Wishlist.objects.count() == 1
        assert set(StoreMap.objects.get(store_id='default').aisles.values_list('id', flat=True)) == aisle_ids
        assert Item.objects.filter(location__isnull=True).count() == 0

    def test_clear_rebuilds(self):
        run_sample_data()
        Item.objects.create(name='Leftover', price='1.00')

        output = run_sample_data('--clear')

        assert 'Clearing existing data...' in output
        assert not Item.objects.filter(name='Leftover').exists()
        assert Item.objects.count() == 12


@pytest.mark.django_db
class TestMigrations:

    def test_models_match_migrations(self):
        # makemigrations --check exits non-zero when a model change is unmigrated
        call_command('makemigrations', check=True, dry_run=True, stdout=StringIO())
