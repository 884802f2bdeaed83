"""
ListOrders Lambda Function - Entry point to list orders.

This module serves as the Lambda function entry point and delegates to the
list_orders handler.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from coffee_shop.handlers.list_orders import lambda_handler as list_orders_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for ListOrders.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return list_orders_handler(event, context)
