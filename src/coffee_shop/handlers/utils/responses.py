"""
Request parsing and response helpers for the order handlers.

This module turns API Gateway proxy events into validated request models and
service results or errors into API Gateway proxy responses.
"""

import functools
import json
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import BaseModel, ValidationError

from coffee_shop.handlers.utils.errors import (
    OrderServiceError,
    OrderValidationError,
    StoreUnavailableError,
    format_error_response,
    get_http_status_code,
)
from coffee_shop.handlers.utils.observability import logger, metrics, tracer

T = TypeVar('T', bound=BaseModel)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "OPTIONS,POST,GET,PUT,DELETE",
}


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""
    response_headers = dict(DEFAULT_HEADERS)
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": body if isinstance(body, str) else json.dumps(body, default=str),
    }


def parse_request_body(event: Dict[str, Any], model: Type[T]) -> T:
    """
    Parse and validate the JSON body of an API Gateway event.

    Args:
        event: API Gateway proxy event
        model: Pydantic model the body must satisfy

    Returns:
        Validated request model

    Raises:
        OrderValidationError: If the body is not a JSON object or misses a field
    """
    api_event = APIGatewayProxyEvent(event)
    raw_body = api_event.decoded_body if api_event.body is not None else None

    # Direct invocations may pass the body already decoded
    if isinstance(raw_body, dict):
        payload = raw_body
    else:
        try:
            payload = json.loads(raw_body or "{}")
        except json.JSONDecodeError as e:
            raise OrderValidationError(f"Invalid JSON in request body: {e.msg}")

    if not isinstance(payload, dict):
        raise OrderValidationError("Request body must be a JSON object")

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        field_errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in e.errors()
        ]
        summary = "; ".join(f"{item['field']}: {item['message']}" for item in field_errors)
        raise OrderValidationError(
            message=f"Request validation failed ({summary})",
            field_errors=field_errors,
        )


def handle_service_errors(failure_message: str) -> Callable:
    """
    Decorator converting handler failures into API Gateway error responses.

    Failures are caught once and never retried. Unknown exceptions are treated
    as store failures and keep their original message.

    Args:
        failure_message: Prefix for the ``error`` text, e.g. ``Could not create order``
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OrderServiceError as e:
                error = e
            except Exception as e:
                logger.exception("Unexpected error in handler", extra={
                    "error": str(e),
                    "function_name": func.__name__,
                })
                error = StoreUnavailableError(message=str(e), operation=func.__name__)

            metrics.add_metric(name=error.kind.metric_name, unit=MetricUnit.Count, value=1)
            tracer.put_annotation("error_code", error.kind.value)
            logger.error(failure_message, extra=error.to_dict())

            return create_api_response(
                status_code=get_http_status_code(error),
                body=format_error_response(error, prefix=failure_message),
            )

        return wrapper
    return decorator
