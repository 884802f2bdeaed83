"""
Coffee Shop Orders Service Module.

Serverless create, list, update-status and delete handlers over a single
DynamoDB table of coffee orders:

- handlers: Lambda entry points
- logic: one function per order operation
- dal: data access layer for the orders table
- models: Pydantic request, response and domain models
"""

__version__ = "1.0.0"
__description__ = "Serverless CRUD handlers for coffee orders"

from coffee_shop.models.order import Order, OrderStatus
from coffee_shop.models.input import CreateOrderRequest, DeleteOrderRequest, UpdateOrderStatusRequest
from coffee_shop.models.output import OrderActionOutput

__all__ = [
    "Order",
    "OrderStatus",
    "CreateOrderRequest",
    "UpdateOrderStatusRequest",
    "DeleteOrderRequest",
    "OrderActionOutput",
]
