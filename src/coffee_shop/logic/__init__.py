"""
Business Logic Layer Module.

One function per order operation, coordinating between the handlers and the
data access layer.
"""

from coffee_shop.logic.orders import create_order, delete_order, list_orders, update_order_status

__all__ = [
    "create_order",
    "list_orders",
    "update_order_status",
    "delete_order",
]
