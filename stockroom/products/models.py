from django.db import models
from django.core.validators import MaxValueValidator, MinValueValidator
from django.utils.translation import gettext_lazy as _
from stockroom.core.models import BaseModel
from .constants import FieldLimits, InventoryConstants

class Product(BaseModel):
    """Stocked product with its current count and low-stock threshold"""
    name = models.CharField(
        _("Name"),
        max_length=FieldLimits.PRODUCT_NAME
    )
    description = models.TextField(_("Description"))
    stock_quantity = models.PositiveIntegerField(
        _("Stock Quantity"),
        validators=[
            MinValueValidator(InventoryConstants.MIN_STOCK),
            MaxValueValidator(InventoryConstants.MAX_STOCK)
        ]
    )
    low_stock_threshold = models.PositiveIntegerField(
        _("Low Stock Threshold"),
        default=InventoryConstants.LOW_STOCK_THRESHOLD,
        validators=[
            MinValueValidator(InventoryConstants.MIN_STOCK),
            MaxValueValidator(InventoryConstants.MAX_STOCK)
        ]
    )

    class Meta(BaseModel.Meta):
        verbose_name = _("Product")
        verbose_name_plural = _("Products")

    @property
    def is_low_stock(self) -> bool:
        """Derived at read time, never stored"""
        return self.stock_quantity < self.low_stock_threshold

    def __str__(self):
        return f"{self.name} ({self.stock_quantity} in stock)"
