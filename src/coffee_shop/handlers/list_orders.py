"""
ListOrders handler.

Returns every order in the table as a raw JSON array. Only the first scan page
is read.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from coffee_shop.handlers.utils.dependencies import get_orders_dal
from coffee_shop.handlers.utils.observability import logger, metrics, tracer
from coffee_shop.handlers.utils.responses import create_api_response, handle_service_errors
from coffee_shop.logic.orders import list_orders


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@handle_service_errors('Could not retrieve orders')
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """List all coffee orders."""
    logger.info("List orders request received")

    items = list_orders(dal_handler=get_orders_dal())

    logger.info("Orders listed", extra={"orders_count": len(items)})
    return create_api_response(status_code=200, body=items)
