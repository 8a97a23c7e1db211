"""
Output models for API responses using Pydantic.

This module defines the response bodies of the list and delete operations.
Single-record responses serialize the domain models directly.
"""

from typing import Annotated

from pydantic import BaseModel, Field

from web_shop.models.product import Product
from web_shop.models.shop import Shop

DELETE_SUCCESS_MESSAGE = 'delete item successfully!'


class ShopListOutput(BaseModel):
    """Response model for listing shops."""

    count: Annotated[int, Field(
        ge=0,
        description='Number of shops returned',
        examples=[2]
    )]

    shops: Annotated[list[Shop], Field(
        description='Shop records'
    )]

    @classmethod
    def from_shops(cls, shops: list[Shop]) -> 'ShopListOutput':
        return cls(count=len(shops), shops=shops)


class ProductListOutput(BaseModel):
    """Response model for listing products, either all of them or those of one shop."""

    count: Annotated[int, Field(
        ge=0,
        description='Number of products returned',
        examples=[3]
    )]

    products: Annotated[list[Product], Field(
        description='Product records'
    )]

    @classmethod
    def from_products(cls, products: list[Product]) -> 'ProductListOutput':
        return cls(count=len(products), products=products)


class DeleteOutput(BaseModel):
    """Response model for a successful delete."""

    msg: Annotated[str, Field(
        default=DELETE_SUCCESS_MESSAGE,
        description='Confirmation message'
    )] = DELETE_SUCCESS_MESSAGE
