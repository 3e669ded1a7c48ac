# Generated manually for the linen catalog

import uuid
from decimal import Decimal
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='LinenCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, unique=True)),
                ('price_per_item', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('999999.99'))])),
                ('section', models.CharField(choices=[('front_of_house', 'Front of House'), ('housekeeping', 'Housekeeping'), ('kitchen', 'Kitchen'), ('other', 'Other')], default='other', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'linen_categories',
                'verbose_name_plural': 'linen categories',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['is_active', 'name'], name='linen_cat_active_name_idx'),
                    models.Index(fields=['section'], name='linen_cat_section_idx'),
                ],
            },
        ),
    ]
