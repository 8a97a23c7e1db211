"""
Shop domain model.

This module defines the Shop entity persisted in the shops table and its
conversion to and from DynamoDB items.
"""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, Field

from web_shop.models.identifiers import generate_id


class Shop(BaseModel):
    """Core Shop domain model."""

    id: Annotated[str, Field(
        description='Unique identifier for the shop',
        examples=['6c84fb90-12c4-11e1-840d-7b25c5ee775a']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Display name of the shop',
        examples=['Acme']
    )]

    @classmethod
    def create(cls, name: str, shop_id: str | None = None) -> 'Shop':
        """
        Create a new shop with a generated ID.

        Args:
            name: Display name of the shop
            shop_id: Identifier to use instead of a generated one

        Returns:
            New Shop instance
        """
        return cls(id=shop_id or generate_id(), name=name)

    def to_item(self) -> Dict[str, Any]:
        """Convert the shop to a DynamoDB item."""
        return {
            'id': self.id,
            'name': self.name,
        }

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'Shop':
        """Create a Shop instance from a DynamoDB item."""
        return cls(id=item['id'], name=item['name'])
