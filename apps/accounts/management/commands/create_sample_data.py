"""
Management command to create sample data for trying the API.

Usage:
    python manage.py create_sample_data

This creates:
- 4 users (admin, manager, alice, bob)
- The default store map with aisles and outer walls
- 12 items spread over the aisles, some on promotion
- Reviews
- 2 recipes
- A cart and a wishlist for alice
"""

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal

from apps.accounts.models import User, Role
from apps.carts.models import CartItem, Receipt
from apps.carts.services import CartService
from apps.inventory.models import Item, ItemReview
from apps.inventory.services import create_item, create_review
from apps.recipes.models import Recipe
from apps.recipes.services import create_recipe
from apps.stores.models import StoreMap
from apps.stores.services import save_store_map
from apps.wishlists.models import Wishlist
from apps.wishlists.services import create_wishlist, add_item_to_wishlist


MAP_WIDTH = 12
MAP_HEIGHT = 10

AISLES = [
    # (x, y, label)
    (2, 2, 'Produce'),
    (5, 2, 'Dairy'),
    (8, 2, 'Bakery'),
    (2, 6, 'Pantry'),
    (5, 6, 'Household'),
    (8, 6, 'Drinks'),
]

ITEMS = [
    # (barcode, name, category, price, promo, stock)
    ('4011', 'Bananas', 'Produce', '0.59', False, 120),
    ('4131', 'Gala Apples', 'Produce', '1.29', True, 80),
    ('0070470003', 'Whole Milk', 'Dairy', '3.49', False, 40),
    ('0070470496', 'Cheddar Cheese', 'Dairy', '4.99', False, 25),
    ('0072250011', 'Sourdough Bread', 'Bakery', '4.25', True, 15),
    ('0072250037', 'Bagels', 'Bakery', '3.79', False, 20),
    ('0076808280', 'Spaghetti', 'Pantry', '1.99', False, 60),
    ('0051000012', 'Tomato Sauce', 'Pantry', '2.50', True, 50),
    ('0037000862', 'Dish Soap', 'Household', '3.33', False, None),
    ('0037000127', 'Paper Towels', 'Household', '6.49', False, None),
    ('0049000028', 'Sparkling Water', 'Drinks', '0.99', False, 200),
    ('0012000001', 'Orange Juice', 'Drinks', '4.49', True, 30),
]


class Command(BaseCommand):
    help = 'Create sample data for trying the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        store_map = self.create_store_map()
        items = self.create_items(store_map)
        self.create_reviews(users, items)
        recipes = self.create_recipes(users['manager'], items)
        self.create_shopping(users['alice'], items, recipes)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (admin)')
        self.stdout.write('  manager / password123 (manager)')
        self.stdout.write('  alice / password123')
        self.stdout.write('  bob / password123')

    def clear_data(self):
        """Clear all data from the database."""
        Receipt.objects.all().delete()
        CartItem.objects.all().delete()
        Wishlist.objects.all().delete()
        Recipe.objects.all().delete()
        ItemReview.objects.all().delete()
        Item.objects.all().delete()
        StoreMap.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        accounts = [
            ('admin', 'admin123', 'Store Admin', Role.ADMIN),
            ('manager', 'password123', 'Floor Manager', Role.MANAGER),
            ('alice', 'password123', 'Alice', Role.USER),
            ('bob', 'password123', 'Bob', Role.USER),
        ]

        users = {}
        for username, password, display_name, role in accounts:
            user, _ = User.objects.get_or_create(
                username=username,
                defaults={
                    'display_name': display_name,
                    'role': role,
                    'is_staff': role == Role.ADMIN,
                }
            )
            user.set_password(password)
            user.save()
            users[username] = user

        users['alice'].family = ['Sam', 'Robin']
        users['alice'].save(update_fields=['family'])

        return users

    def create_store_map(self):
        """Create the default store map: outer walls and six aisles."""
        self.stdout.write('  Creating store map...')

        right, bottom = MAP_WIDTH - 1, MAP_HEIGHT - 1
        walls = [
            {'start_x': 0, 'start_y': 0, 'end_x': right, 'end_y': 0},
            {'start_x': 0, 'start_y': bottom, 'end_x': right, 'end_y': bottom},
            {'start_x': 0, 'start_y': 0, 'end_x': 0, 'end_y': bottom},
            {'start_x': right, 'start_y': 0, 'end_x': right, 'end_y': bottom},
        ]
        aisles = [{'x': x, 'y': y, 'label': label} for x, y, label in AISLES]

        existing = StoreMap.objects.filter(store_id=settings.DEFAULT_STORE_ID).first()
        if existing is not None:
            # Keep aisle ids so stocked items stay put
            by_label = {a.label: a.id for a in existing.aisles.all()}
            for aisle in aisles:
                if aisle['label'] in by_label:
                    aisle['id'] = by_label[aisle['label']]

        return save_store_map(
            store_id=settings.DEFAULT_STORE_ID,
            width=MAP_WIDTH,
            height=MAP_HEIGHT,
            aisles=aisles,
            walls=walls,
        )

    def create_items(self, store_map):
        """Create items and place them in the aisle of their category."""
        self.stdout.write('  Creating items...')

        aisles = {aisle.label: aisle for aisle in store_map.aisles.all()}

        items = {}
        for barcode, name, category, price, promo, stock in ITEMS:
            item = Item.objects.filter(barcode=barcode).first()
            if item is None:
                item = create_item(
                    barcode=barcode,
                    name=name,
                    category=category,
                    price=Decimal(price),
                    promo=promo,
                    stock=stock,
                    location_id=aisles[category].id,
                )
            items[name] = item

        return items

    def create_reviews(self, users, items):
        """Create reviews for items."""
        self.stdout.write('  Creating reviews...')

        reviews = [
            ('alice', 'Sourdough Bread', 5, 'Crusty and fresh every morning.'),
            ('bob', 'Sourdough Bread', 4, ''),
            ('bob', 'Whole Milk', 3, 'Fine, sometimes close to the date.'),
            ('alice', 'Orange Juice', 4, 'Great when on promo.'),
        ]
        for username, item_name, rating, text in reviews:
            item = items[item_name]
            if not ItemReview.objects.filter(item=item, reviewer=users[username]).exists():
                create_review(
                    reviewer=users[username],
                    item_id=item.id,
                    rating=rating,
                    review_text=text,
                )

    def create_recipes(self, manager, items):
        """Create recipes from sample items."""
        self.stdout.write('  Creating recipes...')

        recipes_data = [
            ('Spaghetti Night', 'Boil, simmer the sauce, top with cheddar.', 4,
             ['Spaghetti', 'Tomato Sauce', 'Cheddar Cheese']),
            ('Breakfast Table', 'Toast, fruit and juice.', 2,
             ['Bagels', 'Bananas', 'Orange Juice', 'Whole Milk']),
        ]

        recipes = []
        for name, description, feeds, ingredient_names in recipes_data:
            recipe = Recipe.objects.filter(name=name).first()
            if recipe is None:
                recipe = create_recipe(
                    name=name,
                    description=description,
                    feeds=feeds,
                    created_by=manager,
                    ingredient_ids=[items[n].id for n in ingredient_names],
                )
            recipes.append(recipe)

        return recipes

    def create_shopping(self, alice, items, recipes):
        """Fill alice's cart and wishlist."""
        self.stdout.write('  Creating cart and wishlist...')

        CartService.clear(alice)
        CartService.add_recipe(alice, recipes[0].id)
        CartService.add_item(alice, barcode='4131', quantity=6)

        wishlist = Wishlist.objects.filter(user=alice, name='Weekend').first()
        if wishlist is None:
            wishlist = create_wishlist(user=alice, name='Weekend')
        for name in ('Sparkling Water', 'Paper Towels'):
            add_item_to_wishlist(user=alice, wishlist_id=wishlist.id, item_id=items[name].id)
