# Generated manually for the RFID app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='RFIDRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('rfid_number', models.CharField(blank=True, db_index=True, max_length=100)),
                ('category', models.CharField(blank=True, max_length=255)),
                ('status', models.CharField(blank=True, max_length=100)),
                ('condition', models.CharField(blank=True, max_length=100, null=True)),
                ('location', models.CharField(blank=True, max_length=255, null=True)),
                ('user_name', models.CharField(blank=True, max_length=255, null=True)),
                ('qty_washed', models.IntegerField(default=0)),
                ('washes_remaining', models.IntegerField(default=0)),
                ('assigned_location', models.CharField(blank=True, max_length=255, null=True)),
                ('date_assigned', models.DateTimeField(blank=True, null=True)),
                ('date_time', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'rfid_records',
                'ordering': ['-created_at'],
            },
        ),
    ]
