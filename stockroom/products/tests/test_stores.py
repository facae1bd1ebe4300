import uuid

import pytest
from django.core.exceptions import ValidationError

from stockroom.products.constants import InventoryConstants
from stockroom.products.models import Product
from stockroom.products.stores import DjangoProductStore

pytestmark = pytest.mark.django_db


@pytest.fixture
def store() -> DjangoProductStore:
    return DjangoProductStore()


class TestDjangoProductStore:
    def test_create_assigns_id_and_timestamps(self, store):
        product = store.create(name="Bolt", description="M6 bolt", stock_quantity=3, low_stock_threshold=1)

        assert product.id is not None
        assert product.created_at is not None
        assert product.updated_at is not None
        assert Product.objects.filter(pk=product.pk).exists()

    def test_create_rejects_blank_name(self, store):
        with pytest.raises(ValidationError):
            store.create(name="", description="d", stock_quantity=1, low_stock_threshold=0)
        assert not Product.objects.exists()

    def test_find_by_id_missing(self, store):
        assert store.find_by_id(uuid.uuid4()) is None

    def test_find_all(self, store, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")

        assert {p.pk for p in store.find_all()} == {first.pk, second.pk}

    def test_find_low_stock_compares_each_record_to_its_own_threshold(self, store, make_product):
        below = make_product(name="Below", stock_quantity=2, low_stock_threshold=5)
        make_product(name="Equal", stock_quantity=5, low_stock_threshold=5)
        make_product(name="Above", stock_quantity=9, low_stock_threshold=5)
        zero_threshold = make_product(name="NoThreshold", stock_quantity=0, low_stock_threshold=0)

        low = store.find_low_stock()

        assert [p.pk for p in low] == [below.pk]
        assert zero_threshold.pk not in {p.pk for p in low}

    def test_update_merges_changes(self, store, product):
        updated = store.update_by_id(product.pk, {"name": "Gadget"})

        assert updated.name == "Gadget"
        assert updated.description == product.description
        assert updated.stock_quantity == product.stock_quantity

    def test_update_missing(self, store):
        assert store.update_by_id(uuid.uuid4(), {"name": "Gadget"}) is None

    def test_failed_update_leaves_record_unchanged(self, store, product):
        with pytest.raises(ValidationError):
            store.update_by_id(product.pk, {"name": "x" * 300})

        product.refresh_from_db()
        assert product.name == "Widget"

    def test_delete(self, store, product):
        assert store.delete_by_id(product.pk) is True
        assert store.delete_by_id(product.pk) is False
        assert not Product.objects.filter(pk=product.pk).exists()

    def test_increment_stock(self, store, product):
        updated = store.increment_stock(product.pk, 4)

        assert updated.stock_quantity == 14
        product.refresh_from_db()
        assert product.stock_quantity == 14

    def test_increment_missing(self, store):
        assert store.increment_stock(uuid.uuid4(), 1) is None

    def test_increment_is_guarded_at_column_limit(self, store, make_product):
        product = make_product(stock_quantity=InventoryConstants.MAX_STOCK - 5)

        assert store.increment_stock(product.pk, 10) is None

        product.refresh_from_db()
        assert product.stock_quantity == InventoryConstants.MAX_STOCK - 5

    def test_increment_up_to_column_limit(self, store, make_product):
        product = make_product(stock_quantity=InventoryConstants.MAX_STOCK - 5)

        updated = store.increment_stock(product.pk, 5)

        assert updated.stock_quantity == InventoryConstants.MAX_STOCK
        assert isinstance(updated.stock_quantity, int)

    def test_decrement_stock(self, store, product):
        assert store.decrement_stock(product.pk, 10).stock_quantity == 0

    def test_decrement_is_guarded(self, store, product):
        assert store.decrement_stock(product.pk, 11) is None

        product.refresh_from_db()
        assert product.stock_quantity == 10

    def test_stock_change_touches_updated_at(self, store, product):
        before = product.updated_at

        updated = store.increment_stock(product.pk, 1)

        assert updated.updated_at >= before
