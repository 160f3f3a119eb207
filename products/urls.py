from django.urls import path, re_path

from .image_host import ImageHostClient
from .store import ProductStore
from .views import ProductCollectionView, ProductDetailView, ProductImageUploadView

# One store handle shared by the product views
product_store = ProductStore()
image_host = ImageHostClient()

# Trailing slashes are optional so the UI can call /api/products and /api/products/{id}
urlpatterns = [
    re_path(
        r'^products/?$',
        ProductCollectionView.as_view(store=product_store),
        name='product-list'
    ),
    re_path(
        r'^products/images/?$',
        ProductImageUploadView.as_view(image_host=image_host),
        name='product-image-upload'
    ),
    re_path(
        r'^products/(?P<pk>[^/]+)/?$',
        ProductDetailView.as_view(store=product_store),
        name='product-detail'
    ),
]

"""
Available endpoints:

PRODUCTS:
- GET    /api/products/                - List products (newest first, with filters)
- POST   /api/products/                - Create a product
- GET    /api/products/{id}/           - Get product details
- PUT    /api/products/{id}/           - Update the supplied fields of a product
- DELETE /api/products/{id}/           - Delete product

IMAGES:
- POST   /api/products/images/         - Upload an image to the image host

Query Parameters for Filtering:

Products:
- ?status=active/inactive (case-insensitive)
- ?startDate=YYYY-MM-DD
- ?endDate=YYYY-MM-DD
"""
