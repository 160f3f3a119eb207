"""
Record store for products.

ProductStore is the only component that talks to the database. Views
receive an instance at URL configuration time and never touch the ORM
directly.
"""
import logging
import uuid

from django.core.exceptions import ValidationError
from django.db import Error, connections

from .exceptions import ProductNotFound, ProductValidationError, StoreError
from .models import Product

logger = logging.getLogger(__name__)

# id breaks ties between records created in the same clock tick
DEFAULT_ORDERING = ('-created_at', '-id')


class ProductStore:
    """
    Create, read, update, delete and query products.

    Bound to one database alias. The connection is opened lazily by
    Django on first use; ``open()`` and ``close()`` make the lifecycle
    explicit for callers that want it, and the store can be used as a
    context manager.
    """

    def __init__(self, using='default'):
        self.using = using

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self):
        """Establish the database connection"""
        try:
            connections[self.using].ensure_connection()
        except Error as e:
            logger.exception("Failed to connect to database '%s'", self.using)
            raise StoreError(f"Cannot connect to database '{self.using}'") from e
        return self

    def close(self):
        """Release the database connection of the current thread"""
        connection = connections[self.using]
        # Closing inside an atomic block would discard the transaction
        if not connection.in_atomic_block:
            connection.close()

    @property
    def objects(self):
        return Product.objects.using(self.using)

    def insert(self, fields):
        """
        Create a product from a complete set of fields.

        Raises ProductValidationError if a required field is missing or
        invalid; nothing is written in that case.
        """
        self._check_fields(fields)
        product = Product(**self._normalize(fields))
        self._validate(product)
        try:
            product.save(using=self.using, force_insert=True)
        except Error as e:
            logger.exception("Failed to insert product")
            raise StoreError("Failed to insert product") from e
        logger.info("Created product %s (%s)", product.pk, product.title)
        return product

    def get_by_id(self, product_id):
        """Return the product with the given id or raise ProductNotFound"""
        pk = self._parse_id(product_id)
        try:
            return self.objects.get(pk=pk)
        except Product.DoesNotExist:
            raise ProductNotFound(product_id) from None
        except Error as e:
            logger.exception("Failed to fetch product %s", product_id)
            raise StoreError(f"Failed to fetch product {product_id}") from e

    def update_by_id(self, product_id, partial_fields):
        """
        Merge the supplied fields onto an existing product.

        Only fields in Product.MUTABLE_FIELDS are accepted. An empty
        mapping still saves the record, so updated_at moves forward.
        Never creates a product.
        """
        self._check_fields(partial_fields)
        product = self.get_by_id(product_id)
        for name, value in self._normalize(partial_fields).items():
            setattr(product, name, value)
        self._validate(product)
        try:
            product.save(using=self.using)
        except Error as e:
            logger.exception("Failed to update product %s", product_id)
            raise StoreError(f"Failed to update product {product_id}") from e
        logger.info(
            "Updated product %s fields=%s", product.pk, sorted(partial_fields)
        )
        return product

    def delete_by_id(self, product_id):
        """Delete a product and return its last state"""
        product = self.get_by_id(product_id)
        pk = product.pk
        try:
            product.delete(using=self.using)
        except Error as e:
            logger.exception("Failed to delete product %s", product_id)
            raise StoreError(f"Failed to delete product {product_id}") from e
        # Django clears the primary key of deleted instances
        product.pk = pk
        logger.info("Deleted product %s", pk)
        return product

    def delete_all(self):
        """Delete every product and return how many were removed"""
        try:
            deleted, _ = self.objects.all().delete()
        except Error as e:
            logger.exception("Failed to delete products")
            raise StoreError("Failed to delete products") from e
        logger.info("Deleted %d products", deleted)
        return deleted

    def query(self, product_filter=None, ordering=DEFAULT_ORDERING):
        """
        Return every product matching the filter.

        Newest first unless another ordering is given.
        """
        queryset = self.objects.all()
        if product_filter is not None and not product_filter.is_empty:
            queryset = queryset.filter(product_filter.to_q())
        try:
            return list(queryset.order_by(*ordering))
        except Error as e:
            logger.exception("Failed to query products with %s", product_filter)
            raise StoreError("Failed to query products") from e

    @staticmethod
    def _parse_id(product_id):
        # A malformed id cannot match any record
        try:
            return uuid.UUID(str(product_id))
        except (TypeError, ValueError, AttributeError):
            raise ProductNotFound(product_id) from None

    @staticmethod
    def _check_fields(fields):
        unknown = set(fields) - set(Product.MUTABLE_FIELDS)
        if unknown:
            raise ProductValidationError(
                {name: ["This field cannot be set."] for name in sorted(unknown)}
            )

    @staticmethod
    def _normalize(fields):
        normalized = dict(fields)
        status = normalized.get('status')
        if isinstance(status, str):
            normalized['status'] = status.strip().lower()
        title = normalized.get('title')
        if isinstance(title, str):
            normalized['title'] = title.strip()
        for name in ('description', 'image_url'):
            if name in normalized and normalized[name] is None:
                normalized[name] = ''
        return normalized

    @staticmethod
    def _validate(product):
        try:
            product.full_clean(validate_unique=False)
        except ValidationError as e:
            raise ProductValidationError(e.message_dict)
