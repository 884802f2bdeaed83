"""
UpdateOrderStatus Lambda Function - Entry point to update order statuses.

This module serves as the Lambda function entry point and delegates to the
update_order_status handler.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from coffee_shop.handlers.update_order_status import lambda_handler as update_order_status_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for UpdateOrderStatus.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return update_order_status_handler(event, context)
