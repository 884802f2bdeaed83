"""
Service Models Package

This package contains the Pydantic models used throughout the service:
request validation models, response models and the Order domain model.
"""

from .input import CreateOrderRequest, DeleteOrderRequest, OrderKeyRequest, UpdateOrderStatusRequest
from .order import Order, OrderStatus, order_key
from .output import ErrorOutput, OrderActionOutput

__all__ = [
    # Input models
    "CreateOrderRequest",
    "OrderKeyRequest",
    "UpdateOrderStatusRequest",
    "DeleteOrderRequest",

    # Output models
    "OrderActionOutput",
    "ErrorOutput",

    # Domain models
    "Order",
    "OrderStatus",
    "order_key",
]
