from django.urls import path

from .views import (
    DecreaseStockView,
    IncreaseStockView,
    LowStockProductListView,
    ProductDetailView,
    ProductListCreateView,
)

app_name = "products"

# "low-stock" must resolve before the id-capturing routes.
# Ids are captured as plain strings so malformed ones reach validation (400)
# instead of failing URL resolution (404).
urlpatterns = [
    path("products", ProductListCreateView.as_view(), name="product-list"),
    path("products/low-stock", LowStockProductListView.as_view(), name="product-low-stock"),
    path("products/<str:product_id>", ProductDetailView.as_view(), name="product-detail"),
    path("products/<str:product_id>/increase", IncreaseStockView.as_view(), name="product-increase-stock"),
    path("products/<str:product_id>/decrease", DecreaseStockView.as_view(), name="product-decrease-stock"),
]
