"""
Pytest configuration and shared fixtures for the coffee orders service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import pytest

# Environment must be in place before Powertools and the env model are imported
TEST_TABLE_NAME = "test-coffee-orders"

os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "AWS_SECURITY_TOKEN": "testing",
    "AWS_SESSION_TOKEN": "testing",
    "COFFEE_ORDERS_TABLE": TEST_TABLE_NAME,
    "POWERTOOLS_SERVICE_NAME": "test-coffee-orders",
    "POWERTOOLS_METRICS_NAMESPACE": "TestCoffeeShop",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import boto3  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from moto import mock_aws  # noqa: E402

from coffee_shop.dal import get_dal_handler  # noqa: E402


# DynamoDB fixtures
@pytest.fixture
def orders_table():
    """Create a mock coffee orders table keyed by (OrderId, CustomerName)."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TEST_TABLE_NAME,
            KeySchema=[
                {"AttributeName": "OrderId", "KeyType": "HASH"},
                {"AttributeName": "CustomerName", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "OrderId", "AttributeType": "S"},
                {"AttributeName": "CustomerName", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        table.wait_until_exists()

        # Handlers cached from a previous mock must not leak into this one
        get_dal_handler.cache_clear()
        yield table
        get_dal_handler.cache_clear()


@pytest.fixture
def orders_dal(orders_table):
    """DAL handler bound to the mock table, shared with the handlers."""
    return get_dal_handler(
        table_name=TEST_TABLE_NAME,
        region_name="us-east-1",
        endpoint_url=None,
    )


@dataclass
class FakeLambdaContext:
    function_name: str = "test-coffee-orders-function"
    function_version: str = "1"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-coffee-orders-function"
    aws_request_id: str = "test-request-id-123"
    log_group_name: str = "/aws/lambda/test-coffee-orders-function"
    log_stream_name: str = "2024/01/01/[$LATEST]test123"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a Lambda context for testing."""
    return FakeLambdaContext()


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway proxy events around a request body."""

    def build(body: Any = None, http_method: str = "POST", path: str = "/orders", raw: Optional[str] = None) -> Dict[str, Any]:
        if raw is not None:
            event_body = raw
        elif body is None:
            event_body = None
        else:
            event_body = json.dumps(body)

        return {
            "httpMethod": http_method,
            "path": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": event_body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": http_method,
                "path": path,
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "isBase64Encoded": False,
        }

    return build


# Error simulation fixtures
@pytest.fixture
def dynamodb_error() -> Callable[..., ClientError]:
    """Build DynamoDB ClientErrors for testing error handling."""

    def create_error(error_code: str, message: str = "Test error", operation_name: str = "TestOperation") -> ClientError:
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
