"""
Dependency wiring for the order handlers.
"""

from coffee_shop.dal import DalHandler, get_dal_handler
from coffee_shop.handlers.models.env_vars import get_handler_env_vars


def get_orders_dal() -> DalHandler:
    """
    Get the orders table handler configured from the environment.

    The table name is read once from ``COFFEE_ORDERS_TABLE`` and passed
    explicitly to the handler constructor.
    """
    env_vars = get_handler_env_vars()
    return get_dal_handler(
        table_name=env_vars.COFFEE_ORDERS_TABLE,
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )
