"""
Product Handlers - Lambda functions for the product API.

This module implements the handler layer for product operations, including the
listing of the products of a single shop through the ``shop_id`` index.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from web_shop.dal import get_dal_handler
from web_shop.handlers.models.env_vars import get_handler_env_vars
from web_shop.handlers.utils.errors import create_api_response, handle_service_errors
from web_shop.handlers.utils.observability import logger, metrics, tracer
from web_shop.handlers.utils.validation import (
    check_update_price,
    parse_create_product,
    parse_path_id,
    parse_request_body,
)
from web_shop.logic.product_service import ProductService
from web_shop.models.input import UpdateProductRequest
from web_shop.models.output import DeleteOutput, ProductListOutput

Response = Dict[str, Any]


class ProductHandlers:
    """Request handling for every product operation."""

    def __init__(self, service: ProductService):
        self.service = service

    @handle_service_errors
    def create(self, event: APIGatewayProxyEvent) -> Response:
        request = parse_create_product(event)
        product = self.service.create_product(request)
        return create_api_response(status_code=200, body=product.model_dump_json())

    @handle_service_errors
    def get_all(self, event: APIGatewayProxyEvent) -> Response:
        products = self.service.list_products()
        logger.info('Products listed', extra={'count': len(products)})
        return create_api_response(status_code=200, body=ProductListOutput.from_products(products).model_dump_json())

    @handle_service_errors
    def get(self, event: APIGatewayProxyEvent) -> Response:
        product_id = parse_path_id(event)
        product = self.service.get_product(product_id)
        return create_api_response(status_code=200, body=product.model_dump_json())

    @handle_service_errors
    def update(self, event: APIGatewayProxyEvent) -> Response:
        request = parse_request_body(event, UpdateProductRequest)
        product_id = parse_path_id(event)
        check_update_price(request)

        tracer.put_annotation('product_id', product_id)
        product = self.service.update_product(product_id, request)
        return create_api_response(status_code=200, body=product.model_dump_json())

    @handle_service_errors
    def delete(self, event: APIGatewayProxyEvent) -> Response:
        product_id = parse_path_id(event)
        self.service.delete_product(product_id)
        return create_api_response(status_code=200, body=DeleteOutput().model_dump_json())

    @handle_service_errors
    def list_by_shop(self, event: APIGatewayProxyEvent) -> Response:
        # The path id names the shop, not a product
        shop_id = parse_path_id(event)
        products = self.service.list_products_by_shop(shop_id)
        return create_api_response(status_code=200, body=ProductListOutput.from_products(products).model_dump_json())


def build_product_handlers() -> ProductHandlers:
    """Wire the product handlers to the configured products table and shop index."""
    env_vars = get_handler_env_vars()
    products_dal = get_dal_handler(
        table_name=env_vars.PRODUCTS_TABLE_NAME,
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )
    service = ProductService(products_dal, shop_index_name=env_vars.PRODUCTS_SHOP_INDEX_NAME)
    return ProductHandlers(service)


product_handlers = build_product_handlers()


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def product_create(event: Dict[str, Any], context: LambdaContext) -> Response:
    """Create a product from a JSON body ``{"name", "shop_id", "price"}``."""
    return product_handlers.create(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def product_get_all(event: Dict[str, Any], context: LambdaContext) -> Response:
    return product_handlers.get_all(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def product_get(event: Dict[str, Any], context: LambdaContext) -> Response:
    return product_handlers.get(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def product_update(event: Dict[str, Any], context: LambdaContext) -> Response:
    """Apply a partial update to the product identified by the ``id`` path parameter."""
    return product_handlers.update(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def product_delete(event: Dict[str, Any], context: LambdaContext) -> Response:
    return product_handlers.delete(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def product_list(event: Dict[str, Any], context: LambdaContext) -> Response:
    """List the products of the shop identified by the ``id`` path parameter."""
    return product_handlers.list_by_shop(APIGatewayProxyEvent(event))
