# Generated manually for the batches app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


STATUS_CHOICES = [
    ('pickup', 'Pickup'),
    ('washing', 'Washing'),
    ('completed', 'Completed'),
    ('delivered', 'Delivered'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        ('clients', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Batch',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('paper_batch_id', models.CharField(max_length=50, unique=True)),
                ('system_batch_id', models.CharField(editable=False, max_length=30, unique=True)),
                ('pickup_date', models.DateField()),
                ('delivery_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=STATUS_CHOICES, db_index=True, default='pickup', max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('washing_notes', models.TextField(blank=True)),
                ('completed_notes', models.TextField(blank=True)),
                ('delivery_notes', models.TextField(blank=True)),
                ('total_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('has_discrepancy', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='batches', to='clients.client')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='batches_created', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'batches',
                'verbose_name_plural': 'batches',
                'ordering': ['-pickup_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['client', 'pickup_date'], name='batches_client_pickup_idx'),
                    models.Index(fields=['pickup_date'], name='batches_pickup_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BatchItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('quantity_sent', models.PositiveIntegerField(validators=[MaxValueValidator(10000)])),
                ('quantity_received', models.PositiveIntegerField(validators=[MaxValueValidator(10000)])),
                ('price_per_item', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('subtotal', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('express_delivery', models.BooleanField(default=False)),
                ('discrepancy_details', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='batches.batch')),
                ('linen_category', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='batch_items', to='catalog.linencategory')),
            ],
            options={
                'db_table': 'batch_items',
                'ordering': ['created_at'],
                'unique_together': {('batch', 'linen_category')},
            },
        ),
        migrations.CreateModel(
            name='BatchStatusChange',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('from_status', models.CharField(blank=True, choices=STATUS_CHOICES, max_length=20)),
                ('to_status', models.CharField(choices=STATUS_CHOICES, max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('changed_at', models.DateTimeField(auto_now_add=True)),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='status_changes', to='batches.batch')),
                ('changed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='batch_status_changes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'batch_status_changes',
                'ordering': ['changed_at'],
            },
        ),
    ]
