from collections.abc import Mapping

from rest_framework import status
from rest_framework.views import APIView

from stockroom.core.api import success_response
from stockroom.products.constants import Messages, ProductFields
from stockroom.products.services import get_product_service

from .serializers import ProductSerializer


class ProductListCreateView(APIView):
    def get(self, request):
        products = get_product_service().list_products()
        return success_response(Messages.LISTED, ProductSerializer(products, many=True).data)

    def post(self, request):
        product = get_product_service().create_product(request.data)
        return success_response(
            Messages.CREATED,
            ProductSerializer(product).data,
            status_code=status.HTTP_201_CREATED,
        )


class LowStockProductListView(APIView):
    def get(self, request):
        products = get_product_service().list_low_stock_products()
        return success_response(Messages.LOW_STOCK_LISTED, ProductSerializer(products, many=True).data)


class ProductDetailView(APIView):
    def get(self, request, product_id):
        product = get_product_service().get_product(product_id)
        return success_response(Messages.FETCHED, ProductSerializer(product).data)

    def put(self, request, product_id):
        product = get_product_service().update_product(product_id, request.data)
        return success_response(Messages.UPDATED, ProductSerializer(product).data)

    def delete(self, request, product_id):
        get_product_service().delete_product(product_id)
        return success_response(Messages.DELETED)


class IncreaseStockView(APIView):
    def patch(self, request, product_id):
        product = get_product_service().increase_stock(product_id, _amount(request))
        return success_response(Messages.STOCK_INCREASED, ProductSerializer(product).data)


class DecreaseStockView(APIView):
    def patch(self, request, product_id):
        product = get_product_service().decrease_stock(product_id, _amount(request))
        return success_response(Messages.STOCK_DECREASED, ProductSerializer(product).data)


def _amount(request):
    data = request.data
    return data.get(ProductFields.AMOUNT) if isinstance(data, Mapping) else None
