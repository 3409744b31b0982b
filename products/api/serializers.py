"""
Request/Response Serializers for Product API Documentation

These serializers define the structure of API requests and responses for OpenAPI schema generation.
They are NOT used for data validation, only for documentation in Swagger/ReDoc.
"""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    error = serializers.CharField(help_text="Human-readable error message")


class ProductCreateRequestSerializer(serializers.Serializer):
    """Multipart body for creating a product"""

    name = serializers.CharField(help_text="Product name")
    description = serializers.CharField(help_text="Product description")
    price = serializers.CharField(help_text="Decimal price in major units, e.g. '49.90'")
    stock = serializers.CharField(required=False, help_text="Stock count (alias: 'estoque'); defaults to 0")
    category = serializers.CharField(required=False, help_text="Category name (alias: 'categoria')")
    photo = serializers.ImageField(required=False, help_text="Product image, up to 5 MiB (alias: 'foto')")
    sizes = serializers.DictField(
        child=serializers.CharField(),
        required=False,
        help_text="Measurements sent as 'sizes[<SIZE>_<MEASURE>]' fields, e.g. 'sizes[PP_busto]=80'",
    )
    medidas = serializers.DictField(
        child=serializers.CharField(),
        required=False,
        help_text="One-size measurements sent as 'medidas[<MEASURE>]' fields",
    )


class CatalogProductSerializer(serializers.Serializer):
    """Product record as stored on the commerce platform"""

    id = serializers.CharField()
    object = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    images = serializers.ListField(child=serializers.URLField(), help_text="Zero or one public image URL")
    metadata = serializers.DictField(
        child=serializers.CharField(),
        help_text="stock, category and one 'size_<SIZE>' JSON entry per size",
    )
    default_price = serializers.CharField(allow_null=True)
    active = serializers.BooleanField()
    created = serializers.IntegerField(allow_null=True)


class CatalogPriceSerializer(serializers.Serializer):
    """Price record as stored on the commerce platform"""

    id = serializers.CharField()
    object = serializers.CharField()
    product = serializers.CharField()
    unit_amount = serializers.IntegerField(help_text="Amount in minor currency units")
    currency = serializers.CharField()
    active = serializers.BooleanField()
    created = serializers.IntegerField(allow_null=True)


class ProductCreateResponseSerializer(serializers.Serializer):
    """Successful product creation"""

    success = serializers.BooleanField()
    product = CatalogProductSerializer()
    price = CatalogPriceSerializer()
