"""
DeleteOrder Lambda Function - Entry point to delete orders.

This module serves as the Lambda function entry point and delegates to the
delete_order handler.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from coffee_shop.handlers.delete_order import lambda_handler as delete_order_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for DeleteOrder.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return delete_order_handler(event, context)
