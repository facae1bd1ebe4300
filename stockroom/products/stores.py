# stockroom/products/stores.py
from typing import Any, Dict, List, Optional
from uuid import UUID
from django.db import transaction
from django.db.models import F
from django.utils import timezone
from .constants import InventoryConstants
from .models import Product
from . import selectors


class DjangoProductStore:
    """
    Product persistence backed by the Django ORM.

    Every write runs ``full_clean()`` first so field constraints are
    enforced before the database sees the row; constraint failures surface
    as ``django.core.exceptions.ValidationError``. Lookups that match
    nothing return None (or False for deletes) rather than raising.

    Any object exposing the same methods can stand in for this class
    when constructing ``ProductService``.
    """

    def create(self, **fields: Any) -> Product:
        product = Product(**fields)
        product.full_clean()
        product.save()
        return product

    def find_all(self) -> List[Product]:
        return list(selectors.get_all_products())

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        return selectors.get_product_by_id(product_id)

    def find_low_stock(self) -> List[Product]:
        return list(selectors.get_low_stock_products())

    @transaction.atomic
    def update_by_id(self, product_id: UUID, changes: Dict[str, Any]) -> Optional[Product]:
        """Merge changes into the stored record, validating the merged result"""
        product = Product.objects.select_for_update().filter(pk=product_id).first()
        if product is None:
            return None

        for field, value in changes.items():
            setattr(product, field, value)
        product.full_clean()
        product.save()
        return product

    def delete_by_id(self, product_id: UUID) -> bool:
        deleted, _ = Product.objects.filter(pk=product_id).delete()
        return deleted > 0

    def increment_stock(self, product_id: UUID, amount: int) -> Optional[Product]:
        """
        Atomically add to stock, only if the result stays within
        ``InventoryConstants.MAX_STOCK``.

        Returns None when no row was changed, either because the product
        does not exist or because the addition would overflow the column.
        """
        return self._apply_stock_delta(product_id, amount)

    def decrement_stock(self, product_id: UUID, amount: int) -> Optional[Product]:
        """
        Atomically subtract from stock, only if enough is available.

        Returns None when no row was changed, either because the product
        does not exist or because its stock is below ``amount``.
        """
        return self._apply_stock_delta(product_id, -amount)

    @transaction.atomic
    def _apply_stock_delta(self, product_id: UUID, delta: int) -> Optional[Product]:
        queryset = Product.objects.filter(pk=product_id)
        if delta < 0:
            queryset = queryset.filter(stock_quantity__gte=-delta)
        else:
            queryset = queryset.filter(stock_quantity__lte=InventoryConstants.MAX_STOCK - delta)

        updated = queryset.update(
            stock_quantity=F('stock_quantity') + delta,
            updated_at=timezone.now()
        )
        if not updated:
            return None
        return Product.objects.get(pk=product_id)
