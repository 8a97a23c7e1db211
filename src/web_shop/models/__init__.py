"""
Web Shop Models Package

This package contains all Pydantic models used throughout the service,
including input validation models, output response models, and domain models.
"""

from .identifiers import ID_PATTERN, generate_id, is_valid_id
from .input import CreateProductRequest, CreateShopRequest, UpdateProductRequest, UpdateShopRequest
from .output import DeleteOutput, ProductListOutput, ShopListOutput
from .product import Product
from .shop import Shop

__all__ = [
    # Input models
    "CreateShopRequest",
    "UpdateShopRequest",
    "CreateProductRequest",
    "UpdateProductRequest",

    # Output models
    "ShopListOutput",
    "ProductListOutput",
    "DeleteOutput",

    # Domain models
    "Shop",
    "Product",

    # Identifiers
    "ID_PATTERN",
    "generate_id",
    "is_valid_id",
]
