"""
DynamoDB implementation of the Data Access Layer (DAL).

This module wraps the four table primitives the order handlers need and
translates boto errors into order service errors.
"""

import functools
from typing import Any, Dict, List, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from coffee_shop.dal import BaseDalHandler
from coffee_shop.handlers.utils.errors import OrderNotFoundError, OrderServiceError, StoreUnavailableError
from coffee_shop.handlers.utils.observability import logger, metrics, tracer
from coffee_shop.models.order import Order, order_key


def dynamodb_operation(operation: str):
    """Decorator to translate DynamoDB failures into StoreUnavailableError."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self: 'DynamoDbHandler', *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except OrderServiceError:
                raise
            except ClientError as e:
                error_code = e.response['Error']['Code']
                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"DynamoDB {operation} error", extra={
                    "error_code": error_code,
                    "error_message": e.response['Error'].get('Message'),
                    "table_name": self.table_name,
                })
                raise StoreUnavailableError(str(e), operation=operation, table_name=self.table_name) from e
            except BotoCoreError as e:
                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"DynamoDB connection error during {operation}", extra={
                    "error": str(e),
                    "table_name": self.table_name,
                })
                raise StoreUnavailableError(str(e), operation=operation, table_name=self.table_name) from e
            except Exception as e:
                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"Unexpected error during {operation}", extra={
                    "error": str(e),
                    "table_name": self.table_name,
                })
                raise StoreUnavailableError(str(e), operation=operation, table_name=self.table_name) from e

        return wrapper
    return decorator


class DynamoDbHandler(BaseDalHandler):
    """DynamoDB implementation of the orders data access layer."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        super().__init__(table_name)

        resource_config: Dict[str, Any] = {}
        if region_name:
            resource_config['region_name'] = region_name
        if endpoint_url:
            resource_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **resource_config)
        self.table = self.dynamodb.Table(table_name)

        logger.debug("DynamoDB handler initialized", extra={
            "table_name": table_name,
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        })

    @tracer.capture_method
    @dynamodb_operation("PutItem")
    def put_order(self, order: Order) -> Order:
        """
        Write an order, overwriting any item with the same key.

        Args:
            order: Order to store

        Returns:
            The stored order

        Raises:
            StoreUnavailableError: If the DynamoDB operation fails
        """
        self.table.put_item(Item=order.to_item())

        logger.info("Order stored", extra={
            "table_name": self.table_name,
            **order.key,
        })
        tracer.put_annotation("order_id", order.order_id)
        return order

    @tracer.capture_method
    @dynamodb_operation("Scan")
    def scan_orders(self) -> List[Dict[str, Any]]:
        """
        Return every item from the first scan page.

        Further pages are not followed.

        Raises:
            StoreUnavailableError: If the DynamoDB operation fails
        """
        response = self.table.scan()
        items = response.get('Items', [])

        if 'LastEvaluatedKey' in response:
            logger.warning("Scan result truncated to first page", extra={
                "table_name": self.table_name,
                "items_count": len(items),
            })

        logger.info("Scan completed", extra={
            "table_name": self.table_name,
            "items_count": len(items),
        })
        return items

    @tracer.capture_method
    @dynamodb_operation("UpdateItem")
    def update_order_status(self, order_id: str, customer_name: str, new_status: str) -> Dict[str, Any]:
        """
        Set OrderStatus on an existing order.

        Args:
            order_id: Order identifier
            customer_name: Customer name of the order
            new_status: Replacement status value

        Returns:
            The updated item attributes

        Raises:
            OrderNotFoundError: If no item has the given key
            StoreUnavailableError: If the DynamoDB operation fails
        """
        try:
            response = self.table.update_item(
                Key=order_key(order_id, customer_name),
                UpdateExpression='SET OrderStatus = :status',
                ConditionExpression='attribute_exists(OrderId)',
                ExpressionAttributeValues={':status': new_status},
                ReturnValues='ALL_NEW',
            )
        except ClientError as e:
            if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                logger.info("Order not found for update", extra={
                    "order_id": order_id,
                    "customer_name": customer_name,
                })
                raise OrderNotFoundError(order_id, customer_name) from e
            raise

        logger.info("Order status updated", extra={
            "table_name": self.table_name,
            "order_id": order_id,
            "new_status": new_status,
        })
        return response.get('Attributes', {})

    @tracer.capture_method
    @dynamodb_operation("DeleteItem")
    def delete_order(self, order_id: str, customer_name: str) -> bool:
        """
        Delete an order by its composite key.

        Deleting a missing key is not an error.

        Returns:
            True if an item was removed, False if none existed

        Raises:
            StoreUnavailableError: If the DynamoDB operation fails
        """
        response = self.table.delete_item(
            Key=order_key(order_id, customer_name),
            ReturnValues='ALL_OLD',
        )
        deleted = bool(response.get('Attributes'))

        if deleted:
            logger.info("Order deleted", extra={"table_name": self.table_name, "order_id": order_id})
        else:
            logger.info("Order not found for deletion", extra={"table_name": self.table_name, "order_id": order_id})
        return deleted
