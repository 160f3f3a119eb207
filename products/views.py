import logging

from rest_framework import status, permissions, serializers
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter, inline_serializer
from drf_spectacular.types import OpenApiTypes

from .exceptions import ImageUploadError, ProductNotFound, ProductValidationError, StoreError
from .filters import ProductFilter
from .serializers import ProductSerializer

logger = logging.getLogger(__name__)

ERROR_RESPONSE = inline_serializer(
    name='ErrorResponse',
    fields={
        'error': serializers.CharField(),
        'details': serializers.DictField(required=False),
    }
)

NOT_FOUND = {'error': 'Product not found'}


def validation_error_response(exc):
    return Response(
        {'error': exc.message, 'details': exc.errors},
        status=status.HTTP_400_BAD_REQUEST
    )


class ProductStoreMixin:
    """
    Holds the ProductStore a view works against.
    The store is handed in through ``as_view(store=...)``.
    """
    store = None

    def get_store(self):
        if self.store is None:
            raise RuntimeError(f"{type(self).__name__} was configured without a product store")
        return self.store


class ProductCollectionView(ProductStoreMixin, APIView):
    """
    Create products and list them with optional filters.

    - GET  /api/products/  - List products (newest first)
    - POST /api/products/  - Create a product
    """
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        tags=['Products'],
        summary='List products',
        description='List products newest first, optionally filtered by status and an inclusive date range.',
        parameters=[
            OpenApiParameter(
                name='status',
                type=OpenApiTypes.STR,
                description='Filter by status (active, inactive; case-insensitive)'
            ),
            OpenApiParameter(
                name='startDate',
                type=OpenApiTypes.DATE,
                description='Only products dated on or after this day'
            ),
            OpenApiParameter(
                name='endDate',
                type=OpenApiTypes.DATE,
                description='Only products dated on or before this day'
            ),
        ],
        responses={200: ProductSerializer(many=True), 400: ERROR_RESPONSE, 500: ERROR_RESPONSE},
    )
    def get(self, request):
        try:
            product_filter = ProductFilter.from_query_params(request.query_params)
        except ProductValidationError as e:
            return validation_error_response(e)

        try:
            products = self.get_store().query(product_filter)
        except StoreError:
            return Response(
                {'error': 'Failed to fetch products'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        tags=['Products'],
        summary='Create a product',
        description='Create a product from a complete payload. Status is stored lowercase.',
        request=ProductSerializer,
        responses={201: ProductSerializer, 400: ERROR_RESPONSE, 500: ERROR_RESPONSE},
    )
    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {'error': 'Invalid product data', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            product = self.get_store().insert(serializer.validated_data)
        except ProductValidationError as e:
            return validation_error_response(e)
        except StoreError:
            return Response(
                {'error': 'Failed to create product'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailView(ProductStoreMixin, APIView):
    """
    Fetch, update and delete a single product.

    - GET    /api/products/{id}/  - Get product details
    - PUT    /api/products/{id}/  - Update the supplied fields only
    - DELETE /api/products/{id}/  - Delete product
    """
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        tags=['Products'],
        summary='Get product details',
        responses={200: ProductSerializer, 404: ERROR_RESPONSE, 500: ERROR_RESPONSE},
    )
    def get(self, request, pk):
        try:
            product = self.get_store().get_by_id(pk)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except StoreError:
            return Response(
                {'error': 'Error fetching product'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(ProductSerializer(product).data)

    @extend_schema(
        tags=['Products'],
        summary='Update product',
        description='Replace only the supplied fields. An empty body leaves the product unchanged.',
        request=ProductSerializer(partial=True),
        responses={
            200: ProductSerializer,
            400: ERROR_RESPONSE,
            404: ERROR_RESPONSE,
            500: ERROR_RESPONSE,
        },
    )
    def put(self, request, pk):
        serializer = ProductSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(
                {'error': 'Invalid product data', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            product = self.get_store().update_by_id(pk, serializer.validated_data)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except ProductValidationError as e:
            return validation_error_response(e)
        except StoreError:
            return Response(
                {'error': 'Error updating product'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(ProductSerializer(product).data)

    @extend_schema(
        tags=['Products'],
        summary='Delete product',
        responses={
            200: inline_serializer(name='DeleteResponse', fields={'message': serializers.CharField()}),
            404: ERROR_RESPONSE,
            500: ERROR_RESPONSE,
        },
    )
    def delete(self, request, pk):
        try:
            self.get_store().delete_by_id(pk)
        except ProductNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except StoreError:
            return Response(
                {'error': 'Error deleting product'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({'message': 'Product deleted'}, status=status.HTTP_200_OK)


class ProductImageUploadView(APIView):
    """
    Forward a product image to the image host.
    POST /api/products/images/ with a multipart ``image`` file.
    """
    permission_classes = [permissions.AllowAny]
    parser_classes = [MultiPartParser, FormParser]
    image_host = None

    @extend_schema(
        tags=['Images'],
        summary='Upload a product image',
        description='Upload the image to the external image host and return its public URL.',
        request={
            'multipart/form-data': {
                'type': 'object',
                'properties': {'image': {'type': 'string', 'format': 'binary'}},
                'required': ['image']
            }
        },
        responses={
            201: inline_serializer(name='ImageUploadResponse', fields={'imageUrl': serializers.CharField()}),
            400: ERROR_RESPONSE,
            502: ERROR_RESPONSE,
        },
    )
    def post(self, request):
        image = request.FILES.get('image')
        if image is None:
            return Response(
                {'error': 'No image provided'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            image_url = self.image_host.upload(image, filename=image.name)
        except ImageUploadError as e:
            logger.warning(f"Rejected image upload {image.name}: {str(e)}")
            return Response(
                {'error': 'Image upload failed'},
                status=status.HTTP_502_BAD_GATEWAY
            )

        return Response({'imageUrl': image_url}, status=status.HTTP_201_CREATED)
