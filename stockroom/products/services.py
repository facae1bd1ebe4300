# stockroom/products/services.py
import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional
from django.core.exceptions import ValidationError
from .models import Product
from .constants import Messages
from .exceptions import (
    InsufficientStockError,
    InvalidProductDataError,
    ProductNotFoundError,
    ProductServiceError,
    ProductStoreError
)
from .stores import DjangoProductStore
from .validators import (
    validate_create_payload,
    validate_product_id,
    validate_stock_amount,
    validate_update_payload
)

logger = logging.getLogger(__name__)

class ProductService:
    """
    Product use cases: CRUD, stock adjustment and the low-stock report.

    Operations are stateless. Input is validated before any store call,
    and every store failure is re-raised as a ``ProductServiceError``
    subclass, so callers never see the store's own exception types.

    The store is injected; by default it is the ORM-backed
    ``DjangoProductStore``.
    """

    def __init__(self, store: Optional[Any] = None):
        self.store = store if store is not None else DjangoProductStore()

    # region Commands

    def create_product(self, payload: Any) -> Product:
        """
        Creates a new product from a raw API payload.

        Args:
            payload: name, description, stockQuantity, lowStockThreshold

        Returns:
            Product: Created product with its assigned id and timestamps

        Raises:
            InvalidProductDataError: For missing, blank or invalid values
            ProductStoreError: For unexpected store failures
        """
        fields = self._validated(validate_create_payload, payload)

        with self._store_errors("create"):
            product = self.store.create(**fields)

        logger.info("Product created successfully",
                  extra={"product_id": str(product.id), "stock_quantity": product.stock_quantity})
        return product

    def update_product(self, product_id: Any, payload: Any) -> Product:
        """
        Applies a partial update and re-validates the merged record.

        Raises:
            InvalidProductDataError: Malformed id, empty payload or invalid values
            ProductNotFoundError: No product with this id
        """
        pk = self._validated(validate_product_id, product_id)
        changes = self._validated(validate_update_payload, payload)

        with self._store_errors("update", product_id=str(pk)):
            product = self.store.update_by_id(pk, changes)

        if product is None:
            raise ProductNotFoundError(str(pk))

        logger.info("Product updated",
                  extra={"product_id": str(pk), "fields": list(changes.keys())})
        self._check_low_stock(product)
        return product

    def delete_product(self, product_id: Any) -> None:
        """
        Permanently removes a product.

        Raises:
            InvalidProductDataError: Malformed id
            ProductNotFoundError: No product with this id
        """
        pk = self._validated(validate_product_id, product_id)

        with self._store_errors("delete", product_id=str(pk)):
            deleted = self.store.delete_by_id(pk)

        if not deleted:
            raise ProductNotFoundError(str(pk))

        logger.info("Product deleted", extra={"product_id": str(pk)})

    def increase_stock(self, product_id: Any, amount: Any) -> Product:
        """
        Adds ``amount`` units to a product's stock in one atomic update.

        Raises:
            InvalidProductDataError: Malformed id, non-positive amount, or a
                result above the largest storable stock count
            ProductNotFoundError: No product with this id
        """
        pk = self._validated(validate_product_id, product_id)
        quantity = self._validated(validate_stock_amount, amount)

        with self._store_errors("increase_stock", product_id=str(pk)):
            product = self.store.increment_stock(pk, quantity)
            current = self.store.find_by_id(pk) if product is None else None

        if product is None:
            if current is None:
                raise ProductNotFoundError(str(pk))
            logger.info("Stock increase rejected",
                      extra={"product_id": str(pk), "amount": quantity,
                             "stock_quantity": current.stock_quantity})
            raise InvalidProductDataError(Messages.STOCK_LIMIT_EXCEEDED)

        logger.info("Stock increased",
                  extra={"product_id": str(pk), "amount": quantity,
                         "stock_quantity": product.stock_quantity})
        return product

    def decrease_stock(self, product_id: Any, amount: Any) -> Product:
        """
        Removes ``amount`` units from a product's stock.

        The subtraction is guarded in the store, so stock never goes below
        zero even under concurrent requests. When the guard rejects the
        change the product is re-read to tell a missing product apart from
        an insufficient one.

        Raises:
            InvalidProductDataError: Malformed id or non-positive amount
            ProductNotFoundError: No product with this id
            InsufficientStockError: amount exceeds current stock
        """
        pk = self._validated(validate_product_id, product_id)
        quantity = self._validated(validate_stock_amount, amount)

        with self._store_errors("decrease_stock", product_id=str(pk)):
            product = self.store.decrement_stock(pk, quantity)
            current = self.store.find_by_id(pk) if product is None else None

        if product is None:
            if current is None:
                raise ProductNotFoundError(str(pk))
            logger.info("Stock decrease rejected",
                      extra={"product_id": str(pk), "amount": quantity,
                             "stock_quantity": current.stock_quantity})
            raise InsufficientStockError(str(pk), available=current.stock_quantity, requested=quantity)

        logger.info("Stock decreased",
                  extra={"product_id": str(pk), "amount": quantity,
                         "stock_quantity": product.stock_quantity})
        self._check_low_stock(product)
        return product

    # endregion

    # region Queries

    def list_products(self) -> List[Product]:
        """
        Returns all products.

        Raises:
            ProductNotFoundError: When no products exist
        """
        with self._store_errors("list"):
            products = self.store.find_all()

        if not products:
            raise ProductNotFoundError(message=Messages.NO_PRODUCTS)
        return products

    def get_product(self, product_id: Any) -> Product:
        """
        Returns a single product.

        Raises:
            InvalidProductDataError: Malformed id
            ProductNotFoundError: Well-formed id with no product
        """
        pk = self._validated(validate_product_id, product_id)

        with self._store_errors("get", product_id=str(pk)):
            product = self.store.find_by_id(pk)

        if product is None:
            raise ProductNotFoundError(str(pk))
        return product

    def list_low_stock_products(self) -> List[Product]:
        """
        Returns products whose stock is strictly below their threshold.

        Raises:
            ProductNotFoundError: When no product is low on stock
        """
        with self._store_errors("low_stock"):
            products = self.store.find_low_stock()

        if not products:
            raise ProductNotFoundError(message=Messages.NO_LOW_STOCK_PRODUCTS)
        return products

    # endregion

    # region Helpers

    @classmethod
    def _validated(cls, validator, value):
        try:
            return validator(value)
        except ValidationError as e:
            raise cls._invalid_data_error(e) from e

    @classmethod
    @contextmanager
    def _store_errors(cls, operation: str, **context: Any) -> Iterator[None]:
        """Re-classifies store exceptions into the product error taxonomy"""
        try:
            yield
        except ProductServiceError:
            raise
        except ValidationError as e:
            logger.warning("Product validation failed",
                         extra={"operation": operation, **context})
            raise cls._invalid_data_error(e) from e
        except Exception as e:
            logger.error("Product store failure",
                       extra={"operation": operation, **context}, exc_info=True)
            raise ProductStoreError() from e

    @classmethod
    def _invalid_data_error(cls, exc: ValidationError) -> InvalidProductDataError:
        errors = cls._format_validation_errors(exc)
        message = "; ".join(errors) if hasattr(exc, 'error_dict') else exc.messages[0]
        return InvalidProductDataError(message, errors=errors)

    @classmethod
    def _format_validation_errors(cls, exc: ValidationError) -> List[str]:
        """Converts Django validation errors to standardized format"""
        if hasattr(exc, 'error_dict'):
            return [f"{field}: {', '.join(errs)}" for field, errs in exc.message_dict.items()]
        return list(exc.messages)

    @staticmethod
    def _check_low_stock(product: Product) -> None:
        """Emits a low-stock alert when stock falls below the product's threshold"""
        if product.is_low_stock:
            logger.warning("Product stock below threshold",
                         extra={"product_id": str(product.id),
                                "stock_quantity": product.stock_quantity,
                                "low_stock_threshold": product.low_stock_threshold})

    # endregion


def get_product_service() -> ProductService:
    """Service used by the API views"""
    return ProductService()
