from datetime import date
from io import StringIO
from unittest import mock

from django.core.management import CommandError, call_command
from django.db import DatabaseError
from django.test import TestCase

from products.models import Product


class SeedProductsCommandTest(TestCase):
    """Test cases for the seed_products management command"""

    def test_seed_products(self):
        """Test demo products are created with normalized status"""
        out = StringIO()
        call_command('seed_products', stdout=out)

        self.assertEqual(Product.objects.count(), 4)
        self.assertEqual(
            set(Product.objects.values_list('status', flat=True)),
            {'active', 'inactive'}
        )
        self.assertTrue(Product.objects.filter(title='Notebook', date=date.today()).exists())
        self.assertIn('Seeded 4 products.', out.getvalue())

    def test_seed_products_clear(self):
        """Test --clear removes existing products first"""
        Product.objects.create(title='Old', status='inactive', date=date(2020, 1, 1))

        call_command('seed_products', '--clear', stdout=StringIO())

        self.assertEqual(Product.objects.count(), 4)
        self.assertFalse(Product.objects.filter(title='Old').exists())

    def test_seed_products_twice_appends(self):
        """Test seeding without --clear keeps existing products"""
        call_command('seed_products', stdout=StringIO())
        call_command('seed_products', stdout=StringIO())
        self.assertEqual(Product.objects.count(), 8)

    def test_seed_products_clear_failure(self):
        """Test a failed clear stops the command before seeding"""
        with mock.patch('django.db.models.query.QuerySet.delete', side_effect=DatabaseError('locked')):
            with self.assertLogs('products.store', level='ERROR'):
                with self.assertRaisesMessage(CommandError, 'Could not clear products'):
                    call_command('seed_products', '--clear', stdout=StringIO())
        self.assertEqual(Product.objects.count(), 0)
