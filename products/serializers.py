from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for product create, update and detail responses.
    Exposes the camelCase field names the catalog UI works with.
    """
    imageUrl = serializers.CharField(
        source='image_url',
        max_length=500,
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Public URL returned by the image host"
    )
    status = serializers.CharField(
        max_length=20,
        help_text="active or inactive (case-insensitive)"
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'title', 'description', 'imageUrl', 'status', 'date',
            'createdAt', 'updatedAt'
        ]
        read_only_fields = ['id', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True, 'allow_null': True},
        }

    def validate_title(self, value):
        """Validate product title"""
        if not value.strip():
            raise serializers.ValidationError("Title is required.")
        return value.strip()

    def validate_status(self, value):
        """Normalize status to lowercase and check it against the choices"""
        value = value.strip().lower()
        if value not in dict(Product.STATUS_CHOICES):
            raise serializers.ValidationError(
                f'Invalid status. Choose from: {", ".join(dict(Product.STATUS_CHOICES).keys())}'
            )
        return value

    def validate(self, attrs):
        """Reject keys that are neither writable nor read-only fields"""
        known = set(self.fields)
        unknown = sorted(set(self.initial_data) - known) if hasattr(self, 'initial_data') else []
        if unknown:
            raise serializers.ValidationError(
                {name: ["This field cannot be set."] for name in unknown}
            )
        return attrs
