"""
Management command to create demo data for local development.

Usage:
    python manage.py seed_demo_data
    python manage.py seed_demo_data --clear --batches 40

This creates:
- 2 users (admin, operator)
- The standard linen categories
- 5 clients
- Batches spread over the last three months, in every status,
  some with discrepancies
"""

from datetime import timedelta
import random

from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.batches.models import Batch, BatchStatus
from apps.batches.services import create_batch, change_status
from apps.catalog.models import LinenCategory
from apps.clients.models import Client


CLIENTS = [
    ('Ocean View Hotel', 'accounts@oceanview.example.com', '021 555 0100'),
    ('Mountain Lodge', 'office@mountainlodge.example.com', '021 555 0101'),
    ('Harbour Spa', 'spa@harbour.example.com', '021 555 0102'),
    ('City Bistro', 'kitchen@citybistro.example.com', '021 555 0103'),
    ('Vineyard Guest House', 'stay@vineyard.example.com', '021 555 0104'),
]

# Status path walked for a batch of the given age (days)
STATUS_PATHS = [
    (30, [BatchStatus.WASHING, BatchStatus.COMPLETED, BatchStatus.DELIVERED]),
    (7, [BatchStatus.WASHING, BatchStatus.DELIVERED]),
    (3, [BatchStatus.WASHING, BatchStatus.COMPLETED]),
    (1, [BatchStatus.WASHING]),
    (0, []),
]


class Command(BaseCommand):
    help = 'Create demo clients and batches for local development'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing batches and clients before creating demo data',
        )
        parser.add_argument(
            '--batches',
            type=int,
            default=30,
            help='Number of batches to create (default 30)',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=42,
            help='Random seed so repeated runs produce the same data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options['seed'])

        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating demo data...')

        users = self.create_users()
        call_command('seed_categories', stdout=self.stdout)
        clients = self.create_clients()
        self.create_batches(users['operator'], clients, options['batches'], rng)

        self.stdout.write(self.style.SUCCESS('Demo data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Accounts:')
        self.stdout.write('  admin@example.com / admin123 (admin)')
        self.stdout.write('  operator@example.com / password123 (user)')

    def clear_data(self):
        """Delete batches (with items and history) and clients."""
        Batch.objects.all().delete()
        Client.objects.all().delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'full_name': 'Admin User',
                'role': UserRole.ADMIN,
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        operator, _ = User.objects.get_or_create(
            email='operator@example.com',
            defaults={
                'full_name': 'Laundry Operator',
                'role': UserRole.USER,
            }
        )
        operator.set_password('password123')
        operator.save()

        return {'admin': admin, 'operator': operator}

    def create_clients(self):
        self.stdout.write('  Creating clients...')

        clients = []
        for name, email, phone in CLIENTS:
            client, _ = Client.objects.get_or_create(
                name=name,
                defaults={'email': email, 'contact_number': phone},
            )
            clients.append(client)
        return clients

    def create_batches(self, operator, clients, count, rng):
        self.stdout.write(f'  Creating {count} batches...')

        categories = list(LinenCategory.objects.filter(is_active=True))
        today = timezone.localdate()

        for _ in range(count):
            age = rng.randint(0, 90)
            items = []
            for category in rng.sample(categories, k=rng.randint(2, 6)):
                sent = rng.randint(5, 120)
                # Roughly one item line in six comes back short
                received = sent - rng.randint(1, 3) if rng.random() < 0.15 else sent
                items.append({
                    'linen_category_id': category.id,
                    'quantity_sent': sent,
                    'quantity_received': received,
                    'express_delivery': rng.random() < 0.1,
                })

            batch = create_batch(
                client_id=rng.choice(clients).id,
                pickup_date=today - timedelta(days=age),
                items=items,
                created_by=operator,
            )

            path = next(statuses for min_age, statuses in STATUS_PATHS if age >= min_age)
            for status in path:
                change_status(batch_id=batch.id, status=status, changed_by=operator)
