"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model of the environment variables read by the
web shop Lambda handlers at cold start.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class WebShopEnvVars(BaseModel):
    """Environment variables for the shop and product handlers."""

    # DynamoDB table holding shop records
    SHOPS_TABLE_NAME: Annotated[str, Field(
        default='shops',
        description='DynamoDB table name for shop storage',
        min_length=1
    )] = 'shops'

    # DynamoDB table holding product records
    PRODUCTS_TABLE_NAME: Annotated[str, Field(
        default='products',
        description='DynamoDB table name for product storage',
        min_length=1
    )] = 'products'

    # Global secondary index on the products table keyed by shop_id
    PRODUCTS_SHOP_INDEX_NAME: Annotated[str, Field(
        default='shopid',
        description='Name of the products index keyed on shop_id',
        min_length=1
    )] = 'shopid'

    # Endpoint override, e.g. DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL used for local testing'
    )] = None

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='web-shop',
        description='Service name for AWS Powertools'
    )] = 'web-shop'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='WebShop',
        description='Namespace for CloudWatch metrics'
    )] = 'WebShop'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def uses_local_endpoint(self) -> bool:
        """Check if DynamoDB calls go to an endpoint override."""
        return bool(self.DYNAMODB_ENDPOINT)


def get_handler_env_vars() -> WebShopEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=WebShopEnvVars)
