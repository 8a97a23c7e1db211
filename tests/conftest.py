"""
Pytest configuration and shared fixtures for the web shop handlers.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import boto3
import pytest
from moto import mock_aws

# Handler modules wire their tables at import time, so the environment must be
# in place before test collection imports them.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "AWS_SECURITY_TOKEN": "test",
    "AWS_SESSION_TOKEN": "test",
    "SHOPS_TABLE_NAME": "test-shops",
    "PRODUCTS_TABLE_NAME": "test-products",
    "PRODUCTS_SHOP_INDEX_NAME": "shopid",
    "POWERTOOLS_SERVICE_NAME": "test-web-shop",
    "POWERTOOLS_METRICS_NAMESPACE": "TestWebShop",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

SHOPS_TABLE = "test-shops"
PRODUCTS_TABLE = "test-products"
SHOP_INDEX = "shopid"


# DynamoDB fixtures
@pytest.fixture
def dynamodb():
    """Mocked DynamoDB resource."""
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


@pytest.fixture
def shops_table(dynamodb):
    """Create the mock shops table."""
    table = dynamodb.create_table(
        TableName=SHOPS_TABLE,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def products_table(dynamodb):
    """Create the mock products table with its shop_id index."""
    table = dynamodb.create_table(
        TableName=PRODUCTS_TABLE,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "id", "AttributeType": "S"},
            {"AttributeName": "shop_id", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": SHOP_INDEX,
                "KeySchema": [{"AttributeName": "shop_id", "KeyType": "HASH"}],
                "Projection": {"ProjectionType": "ALL"},
            }
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    return table


@pytest.fixture
def shops_dal(shops_table):
    from web_shop.dal.dynamodb_handler import DynamoDBHandler

    return DynamoDBHandler(SHOPS_TABLE, region_name="us-east-1")


@pytest.fixture
def products_dal(products_table):
    from web_shop.dal.dynamodb_handler import DynamoDBHandler

    return DynamoDBHandler(PRODUCTS_TABLE, region_name="us-east-1")


# Service and handler fixtures
@pytest.fixture
def shop_service(shops_dal):
    from web_shop.logic.shop_service import ShopService

    return ShopService(shops_dal)


@pytest.fixture
def product_service(products_dal):
    from web_shop.logic.product_service import ProductService

    return ProductService(products_dal, shop_index_name=SHOP_INDEX)


@pytest.fixture
def shop_handlers(shop_service):
    from web_shop.handlers.shop_handler import ShopHandlers

    return ShopHandlers(shop_service)


@pytest.fixture
def product_handlers(product_service):
    from web_shop.handlers.product_handler import ProductHandlers

    return ProductHandlers(product_service)


# Event fixtures
@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway proxy events for the handlers."""

    def build(
        body: Any = None,
        path_parameters: Optional[Dict[str, str]] = None,
        http_method: str = "GET",
        path: str = "/shops",
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "httpMethod": http_method,
            "path": path,
            "resource": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": http_method,
                "path": path,
                "protocol": "HTTP/1.1",
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def proxy_event(api_gateway_event):
    """Build Powertools ``APIGatewayProxyEvent`` objects for the handler classes."""
    from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

    def build(**kwargs) -> APIGatewayProxyEvent:
        return APIGatewayProxyEvent(api_gateway_event(**kwargs))

    return build


@dataclass
class LambdaContext:
    function_name: str = "test-lambda-function"
    function_version: str = "1"
    memory_limit_in_mb: int = 512
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    aws_request_id: str = "test-request-id-123"
    log_group_name: str = "/aws/lambda/test-lambda-function"
    log_stream_name: str = "2024/01/01/[$LATEST]test123"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> LambdaContext:
    """Create a Lambda context for testing."""
    return LambdaContext()


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Mock DynamoDB errors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error", status_code: int = 400):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                },
                "ResponseMetadata": {
                    "RequestId": "test-dynamodb-request-id",
                    "HTTPStatusCode": status_code,
                },
            },
            operation_name="TestOperation"
        )

    return create_error


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Add markers based on test location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics buffered by a previous test."""
    from web_shop.handlers.utils.observability import metrics

    metrics.clear_metrics()
    yield
    metrics.clear_metrics()
