"""
DeleteOrder handler.

Accepts ``order_id`` and ``customer_name`` and removes the addressed order.
Deleting an order that does not exist still succeeds.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from coffee_shop.handlers.utils.dependencies import get_orders_dal
from coffee_shop.handlers.utils.observability import logger, metrics, tracer
from coffee_shop.handlers.utils.responses import create_api_response, handle_service_errors, parse_request_body
from coffee_shop.logic.orders import delete_order
from coffee_shop.models.input import DeleteOrderRequest


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@handle_service_errors('Could not delete order')
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Delete a coffee order."""
    request = parse_request_body(event, DeleteOrderRequest)

    tracer.put_annotation("order_id", request.order_id)
    logger.info("Delete order request received", extra={"order_id": request.order_id})

    output = delete_order(request, dal_handler=get_orders_dal())

    return create_api_response(status_code=200, body=output.model_dump_json(by_alias=True))
