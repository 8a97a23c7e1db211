"""
Data Access Layer (DAL) for the web shop service.

This module provides the store gateway interface the services depend on and a
factory building the DynamoDB implementation for one table.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class StoreGateway(Protocol):
    """Protocol defining the operations the services need from one table."""

    table_name: str

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or overwrite an item."""
        ...

    def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Retrieve an item by its primary key."""
        ...

    def update_item(self, key: Dict[str, Any], fields: Dict[str, Any]) -> Dict[str, Any]:
        """Set the given fields on an existing item and return the updated item."""
        ...

    def delete_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Delete an item and return its previous attributes."""
        ...

    def scan_items(self) -> List[Dict[str, Any]]:
        """Return every item of the table."""
        ...

    def query_index(self, index_name: str, field: str, value: Any) -> List[Dict[str, Any]]:
        """Return the items whose indexed field equals a value."""
        ...


def get_dal_handler(table_name: str, region_name: Optional[str] = None, endpoint_url: Optional[str] = None) -> StoreGateway:
    """
    Factory function to get the DAL handler of a table.

    Args:
        table_name: Name of the DynamoDB table
        region_name: AWS region name
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from web_shop.dal.dynamodb_handler import DynamoDBHandler

    return DynamoDBHandler(table_name=table_name, region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'StoreGateway',
    'get_dal_handler',
]
