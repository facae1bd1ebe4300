from rest_framework import serializers

from stockroom.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read-only product representation using the API's camelCase keys."""

    stockQuantity = serializers.IntegerField(source="stock_quantity", read_only=True)
    lowStockThreshold = serializers.IntegerField(source="low_stock_threshold", read_only=True)
    isLowStock = serializers.BooleanField(source="is_low_stock", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "stockQuantity",
            "lowStockThreshold",
            "isLowStock",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
