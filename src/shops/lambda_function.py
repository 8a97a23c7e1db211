"""
Shops Lambda Function - Entry points for the shops API.

Each API Gateway route of the shops API is deployed as its own Lambda function
whose handler setting names one of the functions below, for example
``lambda_function.shop_create``.
"""

import os
import sys

# Add the web_shop package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from web_shop.handlers.shop_handler import (  # noqa: E402
    shop_create,
    shop_delete,
    shop_get,
    shop_get_all,
    shop_update,
)

__all__ = [
    "shop_create",
    "shop_get_all",
    "shop_get",
    "shop_update",
    "shop_delete",
]
