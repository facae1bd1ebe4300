import pytest
from rest_framework.test import APIClient

from stockroom.products.models import Product


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_product(db):
    def _make_product(**overrides) -> Product:
        fields = {
            "name": "Widget",
            "description": "Standard widget",
            "stock_quantity": 10,
            "low_stock_threshold": 5,
        }
        fields.update(overrides)
        return Product.objects.create(**fields)

    return _make_product


@pytest.fixture
def product(make_product) -> Product:
    return make_product()
