# Generated manually for the clients app

import uuid
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Client',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, unique=True)),
                ('contact_number', models.CharField(blank=True, max_length=20)),
                ('email', models.EmailField(blank=True, max_length=255, null=True, unique=True)),
                ('address', models.CharField(blank=True, max_length=500)),
                ('logo_url', models.URLField(blank=True, max_length=500)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'clients',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['is_active', 'name'], name='clients_active_name_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ClientFavoriteCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='favorites', to='clients.client')),
                ('linen_category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='client_favorites', to='catalog.linencategory')),
            ],
            options={
                'db_table': 'client_favorite_categories',
                'ordering': ['created_at'],
                'unique_together': {('client', 'linen_category')},
            },
        ),
        migrations.AddField(
            model_name='client',
            name='favorite_categories',
            field=models.ManyToManyField(blank=True, related_name='favorited_by', through='clients.ClientFavoriteCategory', to='catalog.linencategory'),
        ),
    ]
