"""
Input models for request validation using Pydantic.

Only field presence and type are checked; values are otherwise passed
through to the store as given.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class CreateOrderRequest(BaseModel):
    """Request model for creating a new order."""

    customer_name: Annotated[str, Field(
        description='Customer name for the order',
        examples=['Jane Smith']
    )]

    coffee_blend: Annotated[str, Field(
        description='Coffee blend to brew',
        examples=['House Blend', 'Ethiopian Yirgacheffe']
    )]


class OrderKeyRequest(BaseModel):
    """Request model addressing a single order by its composite key."""

    order_id: Annotated[str, Field(
        description='Order identifier returned at creation',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    customer_name: Annotated[str, Field(
        description='Customer name the order was placed under',
        examples=['Jane Smith']
    )]


class UpdateOrderStatusRequest(OrderKeyRequest):
    """Request model for changing an order's status."""

    # Free-form; not restricted to OrderStatus members
    new_status: Annotated[str, Field(
        description='Replacement status value',
        examples=['Brewing', 'Ready', 'Completed']
    )]


class DeleteOrderRequest(OrderKeyRequest):
    """Request model for deleting an order."""
