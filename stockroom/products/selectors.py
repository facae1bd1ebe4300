from typing import Optional
from uuid import UUID
from django.db.models import F, Q, QuerySet
from .models import Product

# Reusable condition
LOW_STOCK_FLAG = Q(stock_quantity__lt=F('low_stock_threshold'))


def get_all_products() -> QuerySet[Product]:
    """Retrieve every product, newest first"""
    return Product.objects.all()


def get_product_by_id(product_id: UUID) -> Optional[Product]:
    """Retrieve a single product, or None if it does not exist"""
    return Product.objects.filter(pk=product_id).first()


def get_low_stock_products() -> QuerySet[Product]:
    """
    Retrieve products whose stock is strictly below their own threshold.

    The comparison is field-to-field per record, so a product sitting
    exactly at its threshold is not included.
    """
    return Product.objects.filter(LOW_STOCK_FLAG).order_by('stock_quantity', '-created_at')
