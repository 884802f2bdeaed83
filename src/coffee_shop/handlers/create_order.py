"""
CreateOrder handler.

Accepts ``customer_name`` and ``coffee_blend`` and stores a new order with
status "Pending".
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from coffee_shop.handlers.utils.dependencies import get_orders_dal
from coffee_shop.handlers.utils.observability import logger, metrics, tracer
from coffee_shop.handlers.utils.responses import create_api_response, handle_service_errors, parse_request_body
from coffee_shop.logic.orders import create_order
from coffee_shop.models.input import CreateOrderRequest


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@handle_service_errors('Could not create order')
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Create a coffee order.

    Args:
        event: API Gateway proxy event with a JSON body
        context: Lambda context object

    Returns:
        API Gateway response with the new OrderId
    """
    request = parse_request_body(event, CreateOrderRequest)

    tracer.put_annotation("coffee_blend", request.coffee_blend)
    logger.info("Create order request received", extra={"customer_name": request.customer_name})

    output = create_order(request, dal_handler=get_orders_dal())

    return create_api_response(status_code=200, body=output.model_dump_json(by_alias=True))
