# stockroom/products/validators.py
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional
from django.core.exceptions import ValidationError
from .constants import InventoryConstants, Messages, ProductFields


def parse_whole_number(value: Any) -> Optional[int]:
    """
    Coerce a JSON number or numeric string to an int.

    Stock counts are whole numbers, so ``5``, ``5.0`` and ``"5"`` parse while
    ``2.5``, ``"abc"``, booleans and non-finite values do not. Exponent
    forms beyond ``InventoryConstants.MAX_DIGITS`` are refused before the
    integer is built, so ``"1e20000000"`` costs nothing.

    Returns:
        The parsed integer, or None if the value is not a whole number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, (str, float, Decimal)):
        return None
    try:
        number = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite() or number.adjusted() > InventoryConstants.MAX_DIGITS:
        return None
    if number != number.to_integral_value():
        return None
    return int(number)


def validate_payload(data: Any) -> Mapping:
    """Validate that a request body is a key/value object."""
    if not isinstance(data, Mapping):
        raise ValidationError(Messages.INVALID_PAYLOAD)
    return data


def validate_product_id(value: Any) -> uuid.UUID:
    """Validate an identifier is a well-formed product ID (UUID)."""
    if isinstance(value, uuid.UUID):
        return value
    if value is None or value == "":
        raise ValidationError(Messages.ID_REQUIRED)
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise ValidationError(Messages.INVALID_ID)


def validate_create_payload(data: Any) -> Dict[str, Any]:
    """
    Validate a product creation payload.

    Args:
        data: Raw payload keyed by API field names

    Returns:
        Model field values with text trimmed and counts parsed

    Raises:
        ValidationError: For missing, blank, non-numeric, negative or oversized values
    """
    data = validate_payload(data)

    if (
        not _is_filled_text(data.get(ProductFields.NAME))
        or not _is_filled_text(data.get(ProductFields.DESCRIPTION))
        or data.get(ProductFields.STOCK_QUANTITY) is None
        or data.get(ProductFields.LOW_STOCK_THRESHOLD) is None
    ):
        raise ValidationError(Messages.FIELDS_REQUIRED)

    stock = parse_whole_number(data[ProductFields.STOCK_QUANTITY])
    threshold = parse_whole_number(data[ProductFields.LOW_STOCK_THRESHOLD])

    if stock is None or threshold is None:
        raise ValidationError(Messages.INVALID_NUMBERS)
    if stock < InventoryConstants.MIN_STOCK or threshold < InventoryConstants.MIN_STOCK:
        raise ValidationError(Messages.NEGATIVE_NUMBERS)
    if stock > InventoryConstants.MAX_STOCK or threshold > InventoryConstants.MAX_STOCK:
        raise ValidationError(Messages.NUMBERS_TOO_LARGE)

    return {
        'name': data[ProductFields.NAME].strip(),
        'description': data[ProductFields.DESCRIPTION].strip(),
        'stock_quantity': stock,
        'low_stock_threshold': threshold,
    }


def validate_update_payload(data: Any) -> Dict[str, Any]:
    """
    Validate a partial product update.

    Only name, description, stockQuantity and lowStockThreshold are
    updatable; other keys are ignored. A payload with none of them is
    treated as empty.

    Returns:
        Model field values for the provided keys only
    """
    data = validate_payload(data)
    provided = {key: data[key] for key in ProductFields.UPDATABLE if key in data}

    if not provided:
        raise ValidationError(Messages.NO_UPDATE_DATA)

    changes = {}
    for key, value in provided.items():
        field = ProductFields.MODEL_FIELDS[key]
        if key in ProductFields.TEXT:
            if not _is_filled_text(value):
                raise ValidationError(Messages.BLANK_TEXT.format(field=key))
            changes[field] = value.strip()
        else:
            number = parse_whole_number(value)
            if number is None:
                raise ValidationError(Messages.INVALID_NUMBERS)
            if number < InventoryConstants.MIN_STOCK:
                raise ValidationError(Messages.NEGATIVE_NUMBERS)
            if number > InventoryConstants.MAX_STOCK:
                raise ValidationError(Messages.NUMBERS_TOO_LARGE)
            changes[field] = number

    return changes


def validate_stock_amount(value: Any) -> int:
    """Validate a stock adjustment amount is a positive whole number."""
    amount = parse_whole_number(value)
    if amount is None or amount <= 0:
        raise ValidationError(Messages.INVALID_AMOUNT)
    if amount > InventoryConstants.MAX_STOCK:
        raise ValidationError(Messages.AMOUNT_TOO_LARGE)
    return amount


def _is_filled_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
