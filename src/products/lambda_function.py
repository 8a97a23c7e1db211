"""
Products Lambda Function - Entry points for the products API.

Each API Gateway route of the products API is deployed as its own Lambda
function whose handler setting names one of the functions below, for example
``lambda_function.product_list`` for ``GET /shops/{id}/products``.
"""

import os
import sys

# Add the web_shop package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from web_shop.handlers.product_handler import (  # noqa: E402
    product_create,
    product_delete,
    product_get,
    product_get_all,
    product_list,
    product_update,
)

__all__ = [
    "product_create",
    "product_get_all",
    "product_get",
    "product_update",
    "product_delete",
    "product_list",
]
