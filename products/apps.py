from django.apps import AppConfig


class ProductsConfig(AppConfig):
    """
    Configuration for the Products app.
    Product records, their filtered listing and image uploads.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'products'
    verbose_name = 'Product Catalog'
