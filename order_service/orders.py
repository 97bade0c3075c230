"""
orders.py — Order Endpoints

    POST /orders — validate the payload and store it as a new order
    GET  /orders — list all stored orders in creation order

Creating the same payload twice creates two orders; there is no idempotency key.
"""

import json
from typing import Any, List

from fastapi import APIRouter, Depends, Request

from .config import get_service_env
from .errors import ApiError, OrderValidationError
from .logging_config import get_logger
from .models import Order
from .store import OrderStore
from .validation import validate_order

log = get_logger(__name__)
router = APIRouter()


def get_order_store(request: Request) -> OrderStore:
    """Returns the store created for this application by `create_app()`."""
    return request.app.state.order_store


async def read_json_body(request: Request) -> Any:
    """
    Decodes the request body as JSON.

    An empty body is read as an empty object, so that it is reported as a
    regular validation failure.

    Raises:
        ApiError(400): If the body is not valid JSON.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError:
        raise ApiError("Malformed JSON body", status_code=400, environment=get_service_env()) from None


@router.post("", status_code=201, response_model=Order)
@router.post("/", status_code=201, response_model=Order, include_in_schema=False)
async def create_order(request: Request, store: OrderStore = Depends(get_order_store)):
    """
    Creates a new order.

    Returns:
        Order: The stored order including its assigned `id` (HTTP 201).

    Raises:
        OrderValidationError(400): With every failing field, not just the first.
        ApiError(400): If the body is not valid JSON.
    """
    payload = await read_json_body(request)
    data, errors = validate_order(payload)
    if errors:
        fields = ", ".join(error.field for error in errors)
        log.warning(f"Order rejected, invalid fields: {fields}")
        raise OrderValidationError(errors)

    return store.create(data)


@router.get("", response_model=List[Order])
@router.get("/", response_model=List[Order], include_in_schema=False)
def list_orders(store: OrderStore = Depends(get_order_store)):
    return store.list()
