"""
UpdateOrderStatus handler.

Accepts ``order_id``, ``customer_name`` and ``new_status`` and replaces the
status of the addressed order. Any status text is accepted.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from coffee_shop.handlers.utils.dependencies import get_orders_dal
from coffee_shop.handlers.utils.observability import logger, metrics, tracer
from coffee_shop.handlers.utils.responses import create_api_response, handle_service_errors, parse_request_body
from coffee_shop.logic.orders import update_order_status
from coffee_shop.models.input import UpdateOrderStatusRequest


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@handle_service_errors('Could not update order')
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Update the status of a coffee order.

    Args:
        event: API Gateway proxy event with a JSON body
        context: Lambda context object

    Returns:
        API Gateway response with the OrderId, 404 if the order does not exist
    """
    request = parse_request_body(event, UpdateOrderStatusRequest)

    tracer.put_annotation("order_id", request.order_id)
    logger.info("Update order status request received", extra={
        "order_id": request.order_id,
        "new_status": request.new_status,
    })

    output = update_order_status(request, dal_handler=get_orders_dal())

    return create_api_response(status_code=200, body=output.model_dump_json(by_alias=True))
