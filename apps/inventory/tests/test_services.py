import pytest
from decimal import Decimal
from apps.inventory.models import Item, PriceHistoryEntry
from apps.inventory.services import (
    create_item,
    update_item,
    set_promo,
    delete_item,
    get_item_by_barcode,
    get_price_history,
    search_items,
    get_all_categories,
    batch_find_duplicates,
    create_review,
    DuplicateBarcodeError,
    NoFieldsToUpdateError,
    ItemNotFoundError,
    AisleNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
)


@pytest.mark.django_db
class TestCreateItem:

    def test_records_opening_price(self):
        item = create_item(name='Eggs', price=Decimal('2.99'))

        history = list(item.price_history.all())
        assert len(history) == 1
        assert history[0].price == Decimal('2.99')

    def test_blank_barcode_stored_as_null(self):
        first = create_item(name='Loose Apples', barcode='')
        second = create_item(name='Loose Pears', barcode='  ')

        assert first.barcode is None
        assert second.barcode is None

    def test_duplicate_barcode(self, milk):
        with pytest.raises(DuplicateBarcodeError):
            create_item(name='Other Milk', barcode=milk.barcode)

    def test_unknown_location(self):
        import uuid
        with pytest.raises(AisleNotFoundError):
            create_item(name='Eggs', location_id=uuid.uuid4())

    def test_with_location(self, aisle):
        item = create_item(name='Butter', location_id=aisle.id)

        assert item.location == aisle
        assert list(aisle.products.all()) == [item]


@pytest.mark.django_db
class TestUpdateItem:

    def test_price_change_appends_history(self, milk):
        update_item(item_id=milk.id, data={'price': Decimal('3.99')})

        prices = [entry.price for entry in get_price_history(item=milk)]
        assert prices == [Decimal('3.99'), Decimal('3.49')]

    def test_same_price_does_not_append_history(self, milk):
        update_item(item_id=milk.id, data={'price': Decimal('3.49'), 'stock': 3})

        assert milk.price_history.count() == 1

    def test_no_valid_fields(self, milk):
        with pytest.raises(NoFieldsToUpdateError):
            update_item(item_id=milk.id, data={'avg_rating': 5})

    def test_barcode_clash(self, milk, bread):
        with pytest.raises(DuplicateBarcodeError):
            update_item(item_id=bread.id, data={'barcode': milk.barcode})

    def test_keeping_own_barcode_is_fine(self, milk):
        item = update_item(item_id=milk.id, data={'barcode': milk.barcode, 'name': 'Milk 2%'})

        assert item.name == 'Milk 2%'
        assert item.name_normalized == 'milk 2'

    def test_move_and_unlocate(self, milk, aisle):
        update_item(item_id=milk.id, data={'location': aisle.id})
        milk.refresh_from_db()
        assert milk.location == aisle

        update_item(item_id=milk.id, data={'location': None})
        milk.refresh_from_db()
        assert milk.location is None

    def test_unknown_item(self):
        import uuid
        with pytest.raises(ItemNotFoundError):
            update_item(item_id=uuid.uuid4(), data={'name': 'Ghost'})


@pytest.mark.django_db
class TestItemLookup:

    def test_set_promo(self, milk):
        assert set_promo(item_id=milk.id, promo=True).promo is True

    def test_delete(self, milk):
        delete_item(item_id=milk.id)

        assert not Item.objects.filter(id=milk.id).exists()
        assert not PriceHistoryEntry.objects.filter(item_id=milk.id).exists()

    def test_delete_unknown(self):
        import uuid
        with pytest.raises(ItemNotFoundError):
            delete_item(item_id=uuid.uuid4())

    def test_barcode_lookup(self, milk):
        assert get_item_by_barcode(barcode='0123456789012') == milk

    def test_barcode_unknown(self, milk):
        with pytest.raises(ItemNotFoundError):
            get_item_by_barcode(barcode='000')

    def test_price_history_limit(self, milk):
        for cents in range(5):
            update_item(item_id=milk.id, data={'price': Decimal('4.00') + Decimal(cents) / 100})

        history = get_price_history(item=milk, limit=3)

        assert [entry.price for entry in history] == [
            Decimal('4.04'), Decimal('4.03'), Decimal('4.02'),
        ]


@pytest.mark.django_db
class TestSearch:

    def test_search_by_name_and_barcode(self, milk, bread):
        assert list(search_items(search='milk')) == [milk]
        assert list(search_items(search='098765')) == [bread]

    def test_promo_filter_accepts_strings(self, milk, bread):
        assert list(search_items(promo='true')) == [bread]
        assert list(search_items(promo='false')) == [milk]

    def test_categories_sorted_and_distinct(self, milk, bread):
        create_item(name='Cheddar', category='Dairy')
        create_item(name='Bag', category='')

        assert get_all_categories() == ['Bakery', 'Dairy']


@pytest.mark.django_db
class TestDuplicates:

    def test_finds_near_identical_names(self, milk):
        create_item(name='Whole  Milk!', category='Dairy')
        create_item(name='Paper Towels', category='Household')

        pairs = batch_find_duplicates()

        assert len(pairs) == 1
        assert pairs[0]['same_category'] is True
        assert {item.name for item in pairs[0]['items']} == {'Whole Milk', 'Whole  Milk!'}

    def test_cross_category_needs_exact_match(self, milk):
        create_item(name='whole milk', category='')
        create_item(name='Whole Milks', category='Drinks')

        pairs = batch_find_duplicates()

        assert [pair['same_category'] for pair in pairs] == [False]


@pytest.mark.django_db
class TestReviews:

    def test_create_updates_aggregates(self, milk, user, other_user):
        create_review(reviewer=user, item_id=milk.id, rating=5)
        create_review(reviewer=other_user, item_id=milk.id, rating=2)

        milk.refresh_from_db()
        assert milk.review_count == 2
        assert milk.avg_rating == Decimal('3.50')

    def test_duplicate_review(self, milk, user):
        create_review(reviewer=user, item_id=milk.id, rating=5)

        with pytest.raises(DuplicateReviewError):
            create_review(reviewer=user, item_id=milk.id, rating=3)

    def test_invalid_rating(self, milk, user):
        with pytest.raises(InvalidRatingError):
            create_review(reviewer=user, item_id=milk.id, rating=6)
