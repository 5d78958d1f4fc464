import uuid
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StoreMap',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('store_id', models.SlugField(max_length=64, unique=True)),
                ('width', models.PositiveSmallIntegerField(default=10, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(50)])),
                ('height', models.PositiveSmallIntegerField(default=10, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(50)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'store_maps',
                'ordering': ['store_id'],
            },
        ),
        migrations.CreateModel(
            name='Aisle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('x', models.PositiveSmallIntegerField()),
                ('y', models.PositiveSmallIntegerField()),
                ('label', models.CharField(blank=True, max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('store_map', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='aisles', to='stores.storemap')),
            ],
            options={
                'db_table': 'aisles',
                'ordering': ['y', 'x'],
                'unique_together': {('store_map', 'x', 'y')},
            },
        ),
        migrations.CreateModel(
            name='WallSegment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('start_x', models.PositiveSmallIntegerField()),
                ('start_y', models.PositiveSmallIntegerField()),
                ('end_x', models.PositiveSmallIntegerField()),
                ('end_y', models.PositiveSmallIntegerField()),
                ('store_map', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='walls', to='stores.storemap')),
            ],
            options={
                'db_table': 'wall_coordinates',
                'ordering': ['start_y', 'start_x'],
            },
        ),
    ]
