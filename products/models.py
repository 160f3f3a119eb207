import uuid

from django.db import models
from django.core.exceptions import ValidationError


def validate_not_blank(value):
    """Reject values that are empty once surrounding whitespace is removed"""
    if not value or not value.strip():
        raise ValidationError("This field cannot be blank.", code='blank')


class Product(models.Model):
    """
    Product record of the catalog.
    The only entity of the system; every API operation reads or writes one of these.
    """

    STATUS_ACTIVE = 'active'
    STATUS_INACTIVE = 'inactive'

    # Status choices, stored lowercase
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_INACTIVE, 'Inactive'),
    ]

    # Fields a client may change after creation
    MUTABLE_FIELDS = ('title', 'description', 'image_url', 'status', 'date')

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Opaque identifier assigned at creation"
    )

    # Basic Information
    title = models.CharField(
        max_length=200,
        validators=[validate_not_blank],
        help_text="Product title"
    )
    description = models.TextField(
        blank=True,
        default='',
        help_text="Optional product description"
    )
    image_url = models.CharField(
        max_length=500,
        blank=True,
        default='',
        help_text="Public URL of the product image on the image host"
    )

    # Status and Date
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        help_text="Current product status"
    )
    date = models.DateField(
        help_text="Date the product was added to the catalog"
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when product was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when product was last updated"
    )

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='product_status_idx'),
            models.Index(fields=['date'], name='product_date_idx'),
            models.Index(fields=['-created_at'], name='product_created_at_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.status})"

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE
