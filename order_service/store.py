"""
store.py — In-Memory Order Store

Holds every accepted order for the lifetime of the process. Nothing is
persisted; a restart starts with an empty store.

FastAPI runs synchronous endpoints on a worker thread pool, so all access to
the underlying list goes through a lock.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import List

from .logging_config import get_logger
from .models import Order, OrderCreate

log = get_logger(__name__)


class OrderStore:
    """
    Process-lifetime collection of accepted orders.

    The store is the only owner of Order instances. Orders can be created and
    listed; there is no update or delete.
    """

    def __init__(self):
        self._orders: List[Order] = []
        self._lock = threading.Lock()

    def create(self, data: OrderCreate) -> Order:
        """
        Stores a validated order.

        Args:
            data (OrderCreate): Output of `validate_order()`.

        Returns:
            Order: The stored order with its assigned `id` and `createdAt`.
        """
        order = Order(
            id=str(uuid.uuid4()),
            createdAt=datetime.now(timezone.utc),
            customerId=data.customerId,
            items=data.items,
            totalAmount=data.totalAmount,
        )
        with self._lock:
            self._orders.append(order)
            count = len(self._orders)
        log.info(f"[Order: {order.id}] Created for customer {order.customerId} ({count} stored).")
        return order

    def list(self) -> List[Order]:
        """Returns a snapshot of all stored orders in creation order."""
        with self._lock:
            return list(self._orders)

    def __len__(self):
        with self._lock:
            return len(self._orders)
