from typing import Optional, List

from .constants import Messages

class ErrorCodes:
    """Centralized error code constants"""
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    INVALID_DATA = "INVALID_PRODUCT_DATA"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    STORE_FAILURE = "PRODUCT_STORE_FAILURE"

class ProductServiceError(Exception):
    """Base exception for product operations."""
    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.code = code

    def __str__(self):
        error_details = f" - Errors: {', '.join(self.errors)}" if self.errors else ""
        code_details = f" [Code: {self.code}]" if self.code else ""
        return f"{self.__class__.__name__}: {self.message}{error_details}{code_details}"

class ProductNotFoundError(ProductServiceError):
    """Raised when a well-formed lookup matches no product, or a listing is empty."""
    def __init__(
        self,
        product_id: Optional[str] = None,
        message: str = Messages.PRODUCT_NOT_FOUND,
        errors: Optional[List[str]] = None
    ):
        super().__init__(
            message=message,
            errors=errors or ([f"product_id={product_id}: error=not_found"] if product_id else []),
            code=ErrorCodes.PRODUCT_NOT_FOUND
        )
        self.product_id = product_id

class InvalidProductDataError(ProductServiceError):
    """Raised when client data or a product identifier fails validation."""
    def __init__(self, message: str = "Invalid product data", errors: Optional[List[str]] = None):
        super().__init__(
            message=message,
            errors=errors or [message],
            code=ErrorCodes.INVALID_DATA
        )

class InsufficientStockError(ProductServiceError):
    """Raised when a decrease would take stock below zero."""
    def __init__(self, product_id: str, available: int, requested: int):
        super().__init__(
            message=Messages.INSUFFICIENT_STOCK,
            errors=[f"available={available}", f"requested={requested}"],
            code=ErrorCodes.INSUFFICIENT_STOCK
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested

class ProductStoreError(ProductServiceError):
    """Raised when the product store fails unexpectedly. Carries no internal detail."""
    def __init__(self, message: str = Messages.INTERNAL_ERROR):
        super().__init__(
            message=message,
            code=ErrorCodes.STORE_FAILURE
        )
