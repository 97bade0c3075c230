import logging

import pytest
from fastapi.testclient import TestClient

from order_service.main import create_app
from order_service.store import OrderStore


@pytest.fixture(autouse=True)
def service_env(monkeypatch):
    """Runs every test with a known environment name and no PORT override."""
    monkeypatch.setenv("SERVICE_ENV", "test")
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def store():
    return OrderStore()


@pytest.fixture
def request_logger():
    return logging.getLogger("tests.requests")


@pytest.fixture
def app(store, request_logger):
    return create_app(store=store, request_logger=request_logger)


@pytest.fixture
def client(app):
    # Unexpected errors must come back as 500 responses, not as raised exceptions.
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def valid_order():
    return {
        "customerId": "CUST-1",
        "items": [{"productId": "P1", "quantity": 2, "price": 10}],
        "totalAmount": 20,
    }
