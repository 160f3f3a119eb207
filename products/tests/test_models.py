from datetime import date

from django.test import TestCase

from products.models import Product


class ProductModelTest(TestCase):
    """Test cases for Product model"""

    def setUp(self):
        self.product = Product.objects.create(
            title="Pen",
            description="Blue ink",
            status="active",
            date=date(2025, 1, 1)
        )

    def test_product_creation(self):
        """Test product is created correctly"""
        self.assertIsNotNone(self.product.pk)
        self.assertEqual(self.product.title, "Pen")
        self.assertEqual(self.product.image_url, "")
        self.assertIsNotNone(self.product.created_at)

    def test_product_str(self):
        """Test product string representation"""
        self.assertEqual(str(self.product), "Pen (active)")

    def test_is_active_property(self):
        """Test is_active follows the status"""
        self.assertTrue(self.product.is_active)
        self.product.status = Product.STATUS_INACTIVE
        self.product.save()
        self.assertFalse(self.product.is_active)

    def test_id_is_stable_across_saves(self):
        """Test the id assigned at creation never changes"""
        original_id = self.product.pk
        self.product.title = "Gel Pen"
        self.product.save()
        self.product.refresh_from_db()
        self.assertEqual(self.product.pk, original_id)

    def test_date_stored_as_date(self):
        """Test the date round-trips as a date value"""
        self.product.refresh_from_db()
        self.assertIsInstance(self.product.date, date)
