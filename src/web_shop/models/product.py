"""
Product domain model.

Products belong to a shop through ``shop_id``. Prices are stored as DynamoDB
numbers, which boto3 hands back as ``Decimal``; the model always holds a plain
``int`` or ``float``.
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, Union

from pydantic import BaseModel, Field

from web_shop.models.identifiers import decimal_to_number, generate_id


class Product(BaseModel):
    """Core Product domain model."""

    id: Annotated[str, Field(
        description='Unique identifier for the product',
        examples=['6c84fb90-12c4-11e1-840d-7b25c5ee775a']
    )]

    shop_id: Annotated[str, Field(
        description='Identifier of the shop selling the product',
        examples=['5d0a2f5e-12c4-11e1-840d-7b25c5ee775a']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Product name',
        examples=['Anvil']
    )]

    # Not bounded: creation accepts any non-zero finite number, only updates require a positive price
    price: Annotated[Union[int, float], Field(
        description='Product price',
        examples=[10, 9.99]
    )]

    @classmethod
    def create(
        cls,
        shop_id: str,
        name: str,
        price: Union[int, float],
        product_id: str | None = None,
    ) -> 'Product':
        """
        Create a new product with a generated ID.

        Args:
            shop_id: Identifier of the owning shop
            name: Product name
            price: Product price
            product_id: Identifier to use instead of a generated one

        Returns:
            New Product instance
        """
        return cls(id=product_id or generate_id(), shop_id=shop_id, name=name, price=price)

    def to_item(self) -> Dict[str, Any]:
        """
        Convert the product to a DynamoDB item.

        Returns:
            Dictionary suitable for DynamoDB storage
        """
        return {
            'id': self.id,
            'shop_id': self.shop_id,
            'name': self.name,
            'price': self.price_to_item(self.price),
        }

    @staticmethod
    def price_to_item(price: Union[int, float]) -> Decimal:
        """Encode a price as the Decimal boto3 writes as a DynamoDB number."""
        return Decimal(str(price))

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'Product':
        """
        Create a Product instance from a DynamoDB item.

        Args:
            item: DynamoDB item dictionary

        Returns:
            Product instance with a numeric price
        """
        return cls(
            id=item['id'],
            shop_id=item['shop_id'],
            name=item['name'],
            price=decimal_to_number(item['price']),
        )
