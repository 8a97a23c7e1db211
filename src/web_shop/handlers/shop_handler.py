"""
Shop Handlers - Lambda functions for the shop API.

This module implements the handler layer for shop operations. Each entry point
validates the API Gateway event, delegates to ``ShopService`` and formats the
outcome as an API Gateway proxy response.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from web_shop.dal import get_dal_handler
from web_shop.handlers.models.env_vars import get_handler_env_vars
from web_shop.handlers.utils.errors import create_api_response, handle_service_errors
from web_shop.handlers.utils.observability import logger, metrics, tracer
from web_shop.handlers.utils.validation import parse_path_id, parse_request_body
from web_shop.logic.shop_service import ShopService
from web_shop.models.input import CreateShopRequest, UpdateShopRequest
from web_shop.models.output import DeleteOutput, ShopListOutput

Response = Dict[str, Any]


class ShopHandlers:
    """Request handling for every shop operation."""

    def __init__(self, service: ShopService):
        self.service = service

    @handle_service_errors
    def create(self, event: APIGatewayProxyEvent) -> Response:
        request = parse_request_body(event, CreateShopRequest)
        shop = self.service.create_shop(request)
        return create_api_response(status_code=200, body=shop.model_dump_json())

    @handle_service_errors
    def get_all(self, event: APIGatewayProxyEvent) -> Response:
        shops = self.service.list_shops()
        logger.info('Shops listed', extra={'count': len(shops)})
        return create_api_response(status_code=200, body=ShopListOutput.from_shops(shops).model_dump_json())

    @handle_service_errors
    def get(self, event: APIGatewayProxyEvent) -> Response:
        shop_id = parse_path_id(event)
        shop = self.service.get_shop(shop_id)
        return create_api_response(status_code=200, body=shop.model_dump_json())

    @handle_service_errors
    def update(self, event: APIGatewayProxyEvent) -> Response:
        request = parse_request_body(event, UpdateShopRequest)
        shop_id = parse_path_id(event)
        shop = self.service.update_shop(shop_id, request)
        return create_api_response(status_code=200, body=shop.model_dump_json())

    @handle_service_errors
    def delete(self, event: APIGatewayProxyEvent) -> Response:
        shop_id = parse_path_id(event)
        self.service.delete_shop(shop_id)
        return create_api_response(status_code=200, body=DeleteOutput().model_dump_json())


def build_shop_handlers() -> ShopHandlers:
    """Wire the shop handlers to the configured shops table."""
    env_vars = get_handler_env_vars()
    shops_dal = get_dal_handler(
        table_name=env_vars.SHOPS_TABLE_NAME,
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )
    return ShopHandlers(ShopService(shops_dal))


shop_handlers = build_shop_handlers()


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def shop_create(event: Dict[str, Any], context: LambdaContext) -> Response:
    """Create a shop from a JSON body ``{"name": ...}``."""
    return shop_handlers.create(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def shop_get_all(event: Dict[str, Any], context: LambdaContext) -> Response:
    return shop_handlers.get_all(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def shop_get(event: Dict[str, Any], context: LambdaContext) -> Response:
    return shop_handlers.get(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def shop_update(event: Dict[str, Any], context: LambdaContext) -> Response:
    """Rename the shop identified by the ``id`` path parameter."""
    return shop_handlers.update(APIGatewayProxyEvent(event))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def shop_delete(event: Dict[str, Any], context: LambdaContext) -> Response:
    return shop_handlers.delete(APIGatewayProxyEvent(event))
