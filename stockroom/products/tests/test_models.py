import pytest
from django.core.exceptions import ValidationError

from stockroom.products.constants import InventoryConstants
from stockroom.products.models import Product


@pytest.mark.parametrize(
    "stock, threshold, expected",
    [(0, 5, True), (4, 5, True), (5, 5, False), (6, 5, False), (0, 0, False)],
)
def test_is_low_stock(stock, threshold, expected):
    product = Product(name="n", description="d", stock_quantity=stock, low_stock_threshold=threshold)
    assert product.is_low_stock is expected


def test_threshold_defaults_to_zero():
    assert Product(name="n", description="d", stock_quantity=1).low_stock_threshold == 0


@pytest.mark.django_db
def test_negative_stock_fails_validation():
    product = Product(name="n", description="d", stock_quantity=-1)

    with pytest.raises(ValidationError) as excinfo:
        product.full_clean()
    assert "stock_quantity" in excinfo.value.message_dict


@pytest.mark.django_db
@pytest.mark.parametrize("field", ["stock_quantity", "low_stock_threshold"])
def test_counts_above_column_limit_fail_validation(field):
    product = Product(name="n", description="d", stock_quantity=1)
    setattr(product, field, InventoryConstants.MAX_STOCK + 1)

    with pytest.raises(ValidationError) as excinfo:
        product.full_clean()
    assert field in excinfo.value.message_dict
