"""
Order domain model.

This module defines the coffee Order entity stored in the orders table. Python
field names are snake_case; the aliases are the attribute names persisted in
DynamoDB.
"""

from enum import Enum
from typing import Annotated, Any, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Known order lifecycle states. Stored statuses are free-form text."""

    PENDING = 'Pending'
    BREWING = 'Brewing'
    READY = 'Ready'
    COMPLETED = 'Completed'


class Order(BaseModel):
    """Core coffee Order domain model."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "OrderId": "550e8400-e29b-41d4-a716-446655440000",
                "CustomerName": "Jane Smith",
                "CoffeeBlend": "Ethiopian Yirgacheffe",
                "OrderStatus": "Pending",
            }
        },
    )

    order_id: Annotated[str, Field(
        alias='OrderId',
        description='Unique identifier for the order',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    customer_name: Annotated[str, Field(
        alias='CustomerName',
        description='Customer name, the range part of the composite key',
        examples=['Jane Smith']
    )]

    coffee_blend: Annotated[str, Field(
        alias='CoffeeBlend',
        description='Coffee blend ordered',
        examples=['House Blend']
    )]

    order_status: Annotated[str, Field(
        alias='OrderStatus',
        description='Current status of the order',
        examples=['Pending', 'Brewing']
    )] = OrderStatus.PENDING.value

    @classmethod
    def create(cls, customer_name: str, coffee_blend: str) -> 'Order':
        """
        Create a new pending order with a generated ID.

        Args:
            customer_name: Name of the customer placing the order
            coffee_blend: Coffee blend ordered

        Returns:
            New Order instance
        """
        return cls(
            order_id=str(uuid4()),
            customer_name=customer_name,
            coffee_blend=coffee_blend,
            order_status=OrderStatus.PENDING.value,
        )

    @property
    def key(self) -> Dict[str, str]:
        """Composite primary key of the stored item."""
        return order_key(self.order_id, self.customer_name)

    def to_item(self) -> Dict[str, Any]:
        """Convert the order to a DynamoDB item."""
        return self.model_dump(by_alias=True)


def order_key(order_id: str, customer_name: str) -> Dict[str, str]:
    """Build the (OrderId, CustomerName) composite key."""
    return {
        'OrderId': order_id,
        'CustomerName': customer_name,
    }
