import uuid

from django.urls import resolve, reverse


def test_product_list():
    assert reverse("products:product-list") == "/api/products"
    assert resolve("/api/products").view_name == "products:product-list"


def test_low_stock_resolves_before_detail():
    assert reverse("products:product-low-stock") == "/api/products/low-stock"
    assert resolve("/api/products/low-stock").view_name == "products:product-low-stock"


def test_product_detail_accepts_any_id_segment():
    product_id = uuid.uuid4()
    assert reverse("products:product-detail", kwargs={"product_id": str(product_id)}) == f"/api/products/{product_id}"

    match = resolve("/api/products/not-a-uuid")
    assert match.view_name == "products:product-detail"
    assert match.kwargs == {"product_id": "not-a-uuid"}


def test_stock_adjustment_routes():
    assert resolve("/api/products/abc/increase").view_name == "products:product-increase-stock"
    assert resolve("/api/products/abc/decrease").view_name == "products:product-decrease-stock"
