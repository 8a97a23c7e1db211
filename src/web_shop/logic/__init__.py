"""
Business Logic Layer Module.

This module contains one service per entity. A service sequences the store
calls of an operation (existence check, then mutation) and classifies store
failures into the error kinds the handlers report.
"""

__version__ = "1.0.0"

from web_shop.logic.product_service import ProductService
from web_shop.logic.shop_service import ShopService

__all__ = [
    "ProductService",
    "ShopService",
]
