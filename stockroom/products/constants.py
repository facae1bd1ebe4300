class InventoryConstants:
    """Inventory management constants"""

    LOW_STOCK_THRESHOLD = 0   # Default threshold, nothing is low stock until set
    MIN_STOCK = 0             # Stock and thresholds are never negative
    MAX_STOCK = 2147483647    # Largest PositiveIntegerField value on every backend
    MAX_DIGITS = 10           # Decimal exponent budget checked before int conversion


class FieldLimits:
    """Maximum field lengths for models"""

    PRODUCT_NAME = 255     # Product names


class ProductFields:
    """Mapping between API payload keys and model fields"""

    NAME = 'name'
    DESCRIPTION = 'description'
    STOCK_QUANTITY = 'stockQuantity'
    LOW_STOCK_THRESHOLD = 'lowStockThreshold'
    AMOUNT = 'amount'

    TEXT = (NAME, DESCRIPTION)
    NUMERIC = (STOCK_QUANTITY, LOW_STOCK_THRESHOLD)
    UPDATABLE = TEXT + NUMERIC

    MODEL_FIELDS = {
        NAME: 'name',
        DESCRIPTION: 'description',
        STOCK_QUANTITY: 'stock_quantity',
        LOW_STOCK_THRESHOLD: 'low_stock_threshold',
    }


class Messages:
    """User-facing response messages"""

    # Errors
    FIELDS_REQUIRED = "All fields are required"
    INVALID_NUMBERS = "Stock quantity and threshold must be valid numbers"
    NEGATIVE_NUMBERS = "Stock quantity and threshold cannot be negative"
    NUMBERS_TOO_LARGE = "Stock quantity and threshold cannot exceed 2147483647"
    INVALID_PAYLOAD = "Request body must be a JSON object"
    BLANK_TEXT = "{field} cannot be empty"
    NO_UPDATE_DATA = "No update data provided"
    INVALID_AMOUNT = "Amount must be a positive number"
    AMOUNT_TOO_LARGE = "Amount cannot exceed 2147483647"
    STOCK_LIMIT_EXCEEDED = "Stock quantity cannot exceed 2147483647"
    ID_REQUIRED = "Product ID is required"
    INVALID_ID = "Invalid product ID format"
    PRODUCT_NOT_FOUND = "Product not found"
    NO_PRODUCTS = "No products found"
    NO_LOW_STOCK_PRODUCTS = "No low stock products found"
    INSUFFICIENT_STOCK = "Insufficient stock"
    INTERNAL_ERROR = "Internal server error"

    # Success
    CREATED = "Product created successfully"
    LISTED = "Products fetched successfully"
    FETCHED = "Product fetched successfully"
    UPDATED = "Product updated successfully"
    DELETED = "Product deleted successfully"
    STOCK_INCREASED = "Stock increased successfully"
    STOCK_DECREASED = "Stock decreased successfully"
    LOW_STOCK_LISTED = "Low stock products fetched successfully"
