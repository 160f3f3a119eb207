from datetime import date, timedelta

from django.core.management.base import BaseCommand, CommandError

from products.exceptions import ProductStoreError
from products.store import ProductStore


class Command(BaseCommand):
    help = 'Seeds the database with demo products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing products before seeding',
        )

    def handle(self, *args, **options):
        today = date.today()
        products_data = [
            {
                'title': 'Fountain Pen',
                'description': 'Steel nib fountain pen with converter',
                'status': 'Active',
                'date': today - timedelta(days=45),
            },
            {
                'title': 'Standing Desk',
                'description': 'Height adjustable desk, oak top',
                'status': 'Inactive',
                'date': today - timedelta(days=20),
            },
            {
                'title': 'Desk Lamp',
                'description': 'LED lamp with dimmer',
                'status': 'active',
                'date': today - timedelta(days=7),
            },
            {
                'title': 'Notebook',
                'status': 'active',
                'date': today,
            },
        ]

        with ProductStore() as store:
            if options['clear']:
                self.stdout.write(self.style.WARNING('Clearing existing products...'))
                try:
                    deleted = store.delete_all()
                except ProductStoreError as e:
                    raise CommandError(f'Could not clear products: {e}') from e
                self.stdout.write(self.style.SUCCESS(f'{deleted} products deleted!'))

            self.stdout.write(self.style.SUCCESS('Starting product seeding...'))

            for product_data in products_data:
                try:
                    product = store.insert(product_data)
                except ProductStoreError as e:
                    raise CommandError(f"Could not create {product_data['title']}: {e}") from e
                self.stdout.write(f'  Created product: {product.title} [{product.status}] ({product.pk})')

        self.stdout.write(self.style.SUCCESS(f'Seeded {len(products_data)} products.'))
