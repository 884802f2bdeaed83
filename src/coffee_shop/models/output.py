"""
Output models for API responses using Pydantic.
"""

from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderActionOutput(BaseModel):
    """Response model for create, update and delete operations."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field(
        description='Human-readable confirmation',
        examples=['Order created successfully!']
    )]

    order_id: Annotated[str, Field(
        alias='OrderId',
        description='Identifier of the affected order',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]


class ErrorOutput(BaseModel):
    """Standard error response model."""

    error: Annotated[str, Field(
        description='Operation failure message including the underlying cause',
        examples=['Could not create order: Requested resource not found']
    )]

    error_code: Annotated[str, Field(
        description='Error kind',
        examples=['VALIDATION_ERROR', 'ORDER_NOT_FOUND', 'STORE_UNAVAILABLE']
    )]

    field_errors: Annotated[Optional[List[Dict[str, str]]], Field(
        default=None,
        description='Per-field problems for validation errors'
    )] = None
