"""
Input models for request validation using Pydantic.

This module defines the request body models of the shop and product handlers.
Field types are strict: a name must be a JSON string and a price a JSON number,
no coercion takes place. Fields holding ``null`` or ``""`` are stripped before
validation, so they surface as missing rather than as a wrong format. A product
price of 0 on creation likewise counts as missing.
"""

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, confloat, field_validator, model_validator
from pydantic_core import PydanticCustomError

# JSON number: integer or finite float, never a boolean
Price = Union[StrictInt, confloat(strict=True, allow_inf_nan=False)]


class PartialUpdateRequest(BaseModel):
    """Base for partial updates: at least one mutable field must be supplied."""

    model_config = ConfigDict(extra='ignore')

    @model_validator(mode='after')
    def validate_has_changes(self):
        """Validate that the update carries at least one field."""
        if not self.model_fields_set:
            raise PydanticCustomError('missing', 'at least one updatable field is required')
        return self

    def changes(self) -> dict:
        """Return only the fields supplied by the caller."""
        return self.model_dump(include=self.model_fields_set)


class CreateShopRequest(BaseModel):
    """Request model for creating a new shop."""

    model_config = ConfigDict(extra='ignore')

    name: Annotated[StrictStr, Field(
        description='Display name of the shop',
        examples=['Acme']
    )]


class UpdateShopRequest(PartialUpdateRequest):
    """Request model for renaming an existing shop."""

    name: Annotated[Optional[StrictStr], Field(
        default=None,
        description='New display name of the shop'
    )] = None


class CreateProductRequest(BaseModel):
    """Request model for creating a new product."""

    model_config = ConfigDict(extra='ignore')

    name: Annotated[StrictStr, Field(
        description='Product name',
        examples=['Anvil']
    )]

    shop_id: Annotated[StrictStr, Field(
        description='Identifier of the shop selling the product',
        examples=['5d0a2f5e-12c4-11e1-840d-7b25c5ee775a']
    )]

    price: Annotated[Price, Field(
        description='Product price',
        examples=[10, 9.99]
    )]

    @field_validator('price')
    @classmethod
    def validate_price_present(cls, value):
        """Validate that the price is set: a zero price reads as not supplied."""
        if value == 0:
            raise PydanticCustomError('missing', 'price is required')
        return value


class UpdateProductRequest(PartialUpdateRequest):
    """Request model for a partial product update."""

    name: Annotated[Optional[StrictStr], Field(
        default=None,
        description='New product name'
    )] = None

    price: Annotated[Optional[Price], Field(
        default=None,
        description='New product price, must be greater than 0'
    )] = None
