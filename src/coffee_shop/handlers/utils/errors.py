"""
Error types for the order handlers.

Every failure surfaced to a caller is an ``OrderServiceError`` carrying one
``ErrorKind``. The kind decides the HTTP status code and is echoed in the
response body as ``error_code``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from coffee_shop.models.output import ErrorOutput


class ErrorKind(str, Enum):
    """Kinds of failure surfaced to callers."""
    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "ORDER_NOT_FOUND"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    @property
    def metric_name(self) -> str:
        """Counter name, e.g. StoreUnavailableError."""
        return "".join(part.title() for part in self.name.split("_")) + "Error"


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE_UNAVAILABLE: 500,
}


class OrderServiceError(Exception):
    """Base exception class for order service errors."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.STORE_UNAVAILABLE):
        super().__init__(message)
        self.message = message
        self.kind = kind

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.kind.value,
            "error_message": self.message,
        }


class OrderValidationError(OrderServiceError):
    """Raised when the request body is malformed or misses a field."""

    def __init__(self, message: str, field_errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message, kind=ErrorKind.VALIDATION)
        self.field_errors = field_errors or []


class OrderNotFoundError(OrderServiceError):
    """Raised when the addressed order does not exist."""

    def __init__(self, order_id: str, customer_name: str):
        super().__init__(
            f"Order '{order_id}' for customer '{customer_name}' not found",
            kind=ErrorKind.NOT_FOUND,
        )
        self.order_id = order_id
        self.customer_name = customer_name


class StoreUnavailableError(OrderServiceError):
    """Raised when the order store rejects or fails an operation."""

    def __init__(self, message: str, operation: str, table_name: Optional[str] = None):
        super().__init__(message, kind=ErrorKind.STORE_UNAVAILABLE)
        self.operation = operation
        self.table_name = table_name


def get_http_status_code(error: OrderServiceError) -> int:
    """Get the HTTP status code for an error."""
    return _STATUS_BY_KIND.get(error.kind, 500)


def format_error_response(error: OrderServiceError, prefix: str) -> Dict[str, Any]:
    """
    Format an error for the API response body.

    Args:
        error: Error to format
        prefix: Operation failure text, e.g. ``Could not create order``

    Returns:
        Response body dictionary
    """
    field_errors = error.field_errors if isinstance(error, OrderValidationError) else []

    output = ErrorOutput(
        error=f"{prefix}: {error.message}",
        error_code=error.kind.value,
        field_errors=field_errors or None,
    )
    return output.model_dump(exclude_none=True)
