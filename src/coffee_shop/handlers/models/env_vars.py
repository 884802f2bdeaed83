"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by
the order handlers.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class OrdersHandlerEnvVars(BaseModel):
    """Environment variables for the order handlers."""

    # DynamoDB table holding coffee orders
    COFFEE_ORDERS_TABLE: Annotated[str, Field(
        description='DynamoDB table name for coffee order storage',
        min_length=1
    )]

    # Local DynamoDB endpoint, unset in AWS
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override for local testing'
    )] = None

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='coffee-orders',
        description='Service name for AWS Powertools'
    )] = 'coffee-orders'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='CoffeeShop',
        description='Namespace for CloudWatch metrics'
    )] = 'CoffeeShop'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> OrdersHandlerEnvVars:
    """
    Get typed environment variables for the order handlers.

    The result is cached by ``get_environment_variables`` for the lifetime of
    the execution environment.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=OrdersHandlerEnvVars)
