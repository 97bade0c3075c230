import pytest

from order_service.models import OrderCreate
from order_service.validation import validate_order


def fields(errors):
    return [error.field for error in errors]


def messages(errors):
    return {error.field: error.message for error in errors}


def test_valid_payload(valid_order):
    data, errors = validate_order(valid_order)
    assert errors == []
    assert isinstance(data, OrderCreate)
    assert data.customerId == "CUST-1"
    assert data.totalAmount == 20
    assert data.items[0].productId == "P1"
    assert data.items[0].quantity == 2


def test_all_fields_missing_reports_every_field():
    data, errors = validate_order({})
    assert data is None
    assert messages(errors) == {
        "customerId": "Customer ID is required",
        "items": "At least one item required",
        "totalAmount": "Total amount must be positive",
    }


def test_empty_items_and_negative_total_without_customer():
    data, errors = validate_order({"items": [], "totalAmount": -5})
    assert data is None
    assert fields(errors) == ["customerId", "items", "totalAmount"]


@pytest.mark.parametrize("customer_id", ["", "   ", None, 42])
def test_invalid_customer_id(valid_order, customer_id):
    valid_order["customerId"] = customer_id
    data, errors = validate_order(valid_order)
    assert data is None
    assert messages(errors) == {"customerId": "Customer ID is required"}


def test_customer_id_is_trimmed(valid_order):
    valid_order["customerId"] = "  CUST-9 "
    data, errors = validate_order(valid_order)
    assert errors == []
    assert data.customerId == "CUST-9"


@pytest.mark.parametrize("items", [[], None, "P1", {"productId": "P1"}])
def test_invalid_items(valid_order, items):
    valid_order["items"] = items
    data, errors = validate_order(valid_order)
    assert data is None
    assert messages(errors) == {"items": "At least one item required"}


@pytest.mark.parametrize("total", [-0.01, "abc", None, [], float("inf")])
def test_invalid_total_amount(valid_order, total):
    valid_order["totalAmount"] = total
    data, errors = validate_order(valid_order)
    assert data is None
    assert messages(errors) == {"totalAmount": "Total amount must be positive"}


def test_zero_total_amount_is_accepted(valid_order):
    valid_order["totalAmount"] = 0
    data, errors = validate_order(valid_order)
    assert errors == []
    assert data.totalAmount == 0


def test_numeric_string_total_is_coerced(valid_order):
    valid_order["totalAmount"] = "19.5"
    data, errors = validate_order(valid_order)
    assert errors == []
    assert data.totalAmount == 19.5


def test_total_is_not_reconciled_with_items(valid_order):
    valid_order["totalAmount"] = 999
    data, errors = validate_order(valid_order)
    assert errors == []
    assert data.totalAmount == 999


def test_item_errors_are_indexed(valid_order):
    valid_order["items"] = [
        {"productId": "P1", "quantity": 1, "price": 5},
        {"productId": " ", "quantity": 0, "price": -1},
        "not-an-item",
    ]
    data, errors = validate_order(valid_order)
    assert data is None
    assert messages(errors) == {
        "items[1].productId": "Product ID is required",
        "items[1].quantity": "Quantity must be a positive integer",
        "items[1].price": "Price must be non-negative",
        "items[2]": "Item must be an object",
    }


def test_item_missing_fields(valid_order):
    valid_order["items"] = [{}]
    _, errors = validate_order(valid_order)
    assert fields(errors) == ["items[0].productId", "items[0].quantity", "items[0].price"]


def test_fractional_quantity_is_rejected(valid_order):
    valid_order["items"][0]["quantity"] = 1.5
    _, errors = validate_order(valid_order)
    assert fields(errors) == ["items[0].quantity"]


@pytest.mark.parametrize("payload", [None, [], "order", 12])
def test_non_object_payload_reports_all_fields(payload):
    data, errors = validate_order(payload)
    assert data is None
    assert fields(errors) == ["customerId", "items", "totalAmount"]


def test_unknown_keys_are_ignored(valid_order):
    valid_order["note"] = "leave at the door"
    data, errors = validate_order(valid_order)
    assert errors == []
    assert not hasattr(data, "note")


@pytest.mark.parametrize("total", [True, False])
def test_boolean_total_is_rejected(valid_order, total):
    valid_order["totalAmount"] = total
    data, errors = validate_order(valid_order)
    assert data is None
    assert messages(errors) == {"totalAmount": "Total amount must be positive"}


def test_boolean_item_numbers_are_rejected(valid_order):
    valid_order["items"] = [{"productId": "P1", "quantity": True, "price": False}]
    valid_order["totalAmount"] = True
    data, errors = validate_order(valid_order)
    assert data is None
    assert messages(errors) == {
        "items[0].quantity": "Quantity must be a positive integer",
        "items[0].price": "Price must be non-negative",
        "totalAmount": "Total amount must be positive",
    }


def test_numeric_string_quantity_is_still_coerced(valid_order):
    valid_order["items"][0]["quantity"] = "3"
    data, errors = validate_order(valid_order)
    assert errors == []
    assert data.items[0].quantity == 3
