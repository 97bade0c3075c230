"""
validation.py — Order Payload Validation

Decides whether a raw request payload qualifies as an order. The structural
rules live on the pydantic models in `models.py`; this module runs them and
translates every failure into a `FieldError` with a stable, client-facing
message.

All rules are evaluated, so a payload with several problems reports all of
them at once. `validate_order()` never raises.
"""

from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from .models import FieldError, OrderCreate

ORDER_MESSAGES = {
    "customerId": "Customer ID is required",
    "items": "At least one item required",
    # Zero is accepted, "positive" is kept for client compatibility.
    "totalAmount": "Total amount must be positive",
}

ITEM_MESSAGES = {
    "productId": "Product ID is required",
    "quantity": "Quantity must be a positive integer",
    "price": "Price must be non-negative",
}

ITEM_NOT_OBJECT_MESSAGE = "Item must be an object"


def validate_order(payload: Any) -> Tuple[Optional[OrderCreate], List[FieldError]]:
    """
    Validates a raw order payload.

    Args:
        payload (Any): Decoded JSON body of the request. Anything other than an
            object is treated as an object with every field missing.

    Returns:
        tuple: `(OrderCreate, [])` if the payload is valid, otherwise
        `(None, [FieldError, ...])` with one entry per failing field.
    """
    if not isinstance(payload, dict):
        return None, [FieldError(field=field, message=message) for field, message in ORDER_MESSAGES.items()]

    try:
        return OrderCreate.model_validate(payload), []
    except ValidationError as e:
        return None, _to_field_errors(e)


def _to_field_errors(error: ValidationError) -> List[FieldError]:
    errors = []
    seen = set()
    for detail in error.errors():
        field, message = _describe(detail)
        if field in seen:
            continue
        seen.add(field)
        errors.append(FieldError(field=field, message=message))
    return errors


def _describe(detail: dict) -> Tuple[str, str]:
    """Maps one pydantic error entry to a (field, message) pair."""
    loc = detail["loc"]

    if len(loc) == 1 and loc[0] in ORDER_MESSAGES:
        return loc[0], ORDER_MESSAGES[loc[0]]

    if len(loc) >= 2 and loc[0] == "items" and isinstance(loc[1], int):
        index = loc[1]
        if len(loc) == 2:
            return f"items[{index}]", ITEM_NOT_OBJECT_MESSAGE
        name = loc[2]
        return f"items[{index}].{name}", ITEM_MESSAGES.get(name, detail["msg"])

    return ".".join(str(part) for part in loc), detail["msg"]
