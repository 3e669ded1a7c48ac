"""
Management command to load the standard linen price list.

Usage:
    python manage.py seed_categories
    python manage.py seed_categories --deactivate-missing

Creates any missing category, updates price and section of existing ones,
and optionally deactivates categories that are not on the price list.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import LinenCategory
from apps.catalog.services import PRICE_LIST_BY_SECTION


class Command(BaseCommand):
    help = 'Create or update linen categories from the standard price list'

    def add_arguments(self, parser):
        parser.add_argument(
            '--deactivate-missing',
            action='store_true',
            help='Deactivate categories that are not on the price list',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        created = updated = 0
        names = set()

        for section, entries in PRICE_LIST_BY_SECTION.items():
            for name, price in entries.items():
                names.add(name)
                _, was_created = LinenCategory.objects.update_or_create(
                    name=name,
                    defaults={
                        'price_per_item': price,
                        'section': section,
                        'is_active': True,
                    },
                )
                if was_created:
                    created += 1
                else:
                    updated += 1

        self.stdout.write(f'  Created {created} categories, updated {updated}')

        if options['deactivate_missing']:
            count = (
                LinenCategory.objects
                .filter(is_active=True)
                .exclude(name__in=names)
                .update(is_active=False)
            )
            self.stdout.write(f'  Deactivated {count} categories not on the price list')

        self.stdout.write(self.style.SUCCESS('Price list loaded.'))
