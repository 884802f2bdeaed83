"""
Business logic for coffee orders.

Each function performs exactly one store operation through the data access
layer and shapes the result for the handler layer.
"""

from typing import Any, Dict, List

from aws_lambda_powertools.metrics import MetricUnit

from coffee_shop.dal import DalHandler
from coffee_shop.handlers.utils.observability import logger, metrics, tracer
from coffee_shop.models.input import CreateOrderRequest, DeleteOrderRequest, UpdateOrderStatusRequest
from coffee_shop.models.order import Order
from coffee_shop.models.output import OrderActionOutput


@tracer.capture_method
def create_order(request: CreateOrderRequest, dal_handler: DalHandler) -> OrderActionOutput:
    """
    Create a new pending order.

    Args:
        request: Validated create request
        dal_handler: Orders table handler

    Returns:
        Confirmation with the generated order ID
    """
    order = Order.create(customer_name=request.customer_name, coffee_blend=request.coffee_blend)
    dal_handler.put_order(order)

    metrics.add_metric(name="OrderCreated", unit=MetricUnit.Count, value=1)
    logger.info("Order created", extra={
        "order_id": order.order_id,
        "coffee_blend": order.coffee_blend,
    })

    return OrderActionOutput(message='Order created successfully!', order_id=order.order_id)


@tracer.capture_method
def list_orders(dal_handler: DalHandler) -> List[Dict[str, Any]]:
    """Return every stored order item, unshaped."""
    items = dal_handler.scan_orders()

    metrics.add_metric(name="OrdersListed", unit=MetricUnit.Count, value=len(items))
    return items


@tracer.capture_method
def update_order_status(request: UpdateOrderStatusRequest, dal_handler: DalHandler) -> OrderActionOutput:
    """
    Replace the status of an existing order.

    Args:
        request: Validated update request
        dal_handler: Orders table handler

    Returns:
        Confirmation with the order ID

    Raises:
        OrderNotFoundError: If the addressed order does not exist
    """
    attributes = dal_handler.update_order_status(
        order_id=request.order_id,
        customer_name=request.customer_name,
        new_status=request.new_status,
    )

    metrics.add_metric(name="OrderStatusUpdated", unit=MetricUnit.Count, value=1)
    logger.info("Order status updated", extra={
        "order_id": request.order_id,
        "new_status": attributes.get("OrderStatus", request.new_status),
        "coffee_blend": attributes.get("CoffeeBlend"),
    })

    return OrderActionOutput(message='Order status updated successfully!', order_id=request.order_id)


@tracer.capture_method
def delete_order(request: DeleteOrderRequest, dal_handler: DalHandler) -> OrderActionOutput:
    """Delete an order; a missing order is not reported."""
    deleted = dal_handler.delete_order(order_id=request.order_id, customer_name=request.customer_name)

    metrics.add_metric(name="OrderDeleted", unit=MetricUnit.Count, value=1)
    logger.info("Order delete processed", extra={
        "order_id": request.order_id,
        "existed": deleted,
    })

    return OrderActionOutput(message='Order deleted successfully!', order_id=request.order_id)
