"""
Exception classes for the product catalog.

Raised by the record store and the image host client, and translated
into HTTP responses by the product views.
"""


class ProductStoreError(Exception):
    """Base exception for product store errors"""
    pass


class ProductValidationError(ProductStoreError):
    """
    Raised when a product payload fails validation.

    This may occur when:
    - title, status or date is missing
    - title is blank
    - status is not one of the allowed values
    - date is not a valid calendar date
    - a field that cannot be changed is supplied on update

    ``errors`` maps field names to lists of messages.
    """

    def __init__(self, errors, message="Invalid product data"):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ProductNotFound(ProductStoreError):
    """
    Raised when no product matches the given id.

    Malformed ids are reported the same way.
    """

    def __init__(self, product_id):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class StoreError(ProductStoreError):
    """Raised when the database fails for reasons unrelated to the request"""
    pass


class ImageUploadError(Exception):
    """
    Raised when an image cannot be uploaded to the image host.

    Common causes:
    - Image host API key not configured
    - Image host unreachable or timing out
    - Image host rejecting the file
    """
    pass
