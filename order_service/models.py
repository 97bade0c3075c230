"""
models.py — Data Models for the Order API

Pydantic models for incoming order payloads, stored orders and the small
response documents of the health and metadata endpoints.

Models:
    - OrderItem: One product line within an order.
    - OrderCreate: A validated order payload, before the store assigns an id.
    - Order: An accepted order as held by the OrderStore.
    - FieldError: One field-level validation failure.
    - HealthStatus: Liveness answer for platform probes.
    - ServiceInfo: Static service metadata served on the root path.
"""

from datetime import datetime
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def reject_bool(value):
    # JSON true/false would otherwise be read as 1/0.
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


class OrderItem(BaseModel):
    """
    Represents a single product line in an order.

    Attributes:
        productId (str): Product identifier. Must not be blank.
        quantity (int): Number of units ordered. Must be at least 1.
        price (float): Unit price. Must not be negative.
    """
    model_config = ConfigDict(frozen=True)

    productId: NonBlankStr
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("quantity", "price", mode="before")
    @classmethod
    def check_not_bool(cls, value):
        return reject_bool(value)


class OrderCreate(BaseModel):
    """
    Order data that passed validation but has not been stored yet.

    `totalAmount` is not reconciled against the item prices; zero is a valid total.
    """
    model_config = ConfigDict(frozen=True)

    customerId: NonBlankStr
    items: List[OrderItem] = Field(..., min_length=1)
    totalAmount: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("totalAmount", mode="before")
    @classmethod
    def check_total_not_bool(cls, value):
        return reject_bool(value)


class Order(OrderCreate):
    """
    An accepted order. Created once by the OrderStore and never mutated.

    Attributes:
        id (str): Identifier assigned by the store, unique for the process lifetime.
        createdAt (datetime): UTC creation time.
    """
    id: str
    createdAt: datetime


class FieldError(BaseModel):
    field: str
    message: str


class HealthStatus(BaseModel):
    status: str = "healthy"
    timestamp: datetime
    environment: str


class ServiceInfo(BaseModel):
    service: str
    environment: str
    version: str
    status: str = "running"
