"""
AWS Lambda Handlers Module.

This module contains the Lambda function handlers that serve as entry points
for the web shop. Each handler implements the three-layer architecture pattern:

1. Handler Layer (this module): Request validation, error responses
2. Logic Layer: Store call sequencing per entity
3. Data Access Layer: DynamoDB table access

Handler modules:
- shop_handler: shop_create, shop_get_all, shop_get, shop_update, shop_delete
- product_handler: product_create, product_get_all, product_get, product_update,
  product_delete, product_list
"""

__version__ = "1.0.0"

# Re-export observability utilities for convenience
from web_shop.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
