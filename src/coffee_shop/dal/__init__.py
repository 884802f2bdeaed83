"""
Data Access Layer (DAL) for the coffee orders table.

This module provides the data access layer interfaces and the factory used by
the handlers to obtain a table handler.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from coffee_shop.models.order import Order


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    table_name: str

    def put_order(self, order: Order) -> Order:
        """Write an order unconditionally."""
        ...

    def scan_orders(self) -> List[Dict[str, Any]]:
        """Return all items from the first scan page."""
        ...

    def update_order_status(self, order_id: str, customer_name: str, new_status: str) -> Dict[str, Any]:
        """Set the status of an existing order."""
        ...

    def delete_order(self, order_id: str, customer_name: str) -> bool:
        """Delete an order by composite key."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def put_order(self, order: Order) -> Order:
        pass

    @abstractmethod
    def scan_orders(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def update_order_status(self, order_id: str, customer_name: str, new_status: str) -> Dict[str, Any]:
        pass

    @abstractmethod
    def delete_order(self, order_id: str, customer_name: str) -> bool:
        pass


@lru_cache(maxsize=None)
def get_dal_handler(
    table_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> DalHandler:
    """
    Factory function to get the DAL handler for a table.

    Handlers are cached per execution environment so warm invocations reuse
    the boto3 resource.

    Args:
        table_name: Name of the database table
        region_name: AWS region name
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from coffee_shop.dal.dynamodb_handler import DynamoDbHandler

    return DynamoDbHandler(table_name, region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'DalHandler',
    'BaseDalHandler',
    'get_dal_handler',
]
