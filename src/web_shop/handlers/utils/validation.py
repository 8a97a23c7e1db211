"""
Request validation for the web shop handlers.

Validation never touches the store. Each function either returns validated
input or raises ``RequestValidationError`` carrying the first failing kind, in
this order: missing body, JSON format, missing parameters, parameter format,
identifier format, parameter values.
"""

import json
from typing import Any, Dict, Type, TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import BaseModel, ValidationError

from web_shop.handlers.utils.errors import ErrorKind, RequestValidationError
from web_shop.handlers.utils.observability import logger
from web_shop.models.identifiers import is_valid_id
from web_shop.models.input import CreateProductRequest, UpdateProductRequest

ModelT = TypeVar('ModelT', bound=BaseModel)

PATH_ID_PARAMETER = 'id'


def parse_path_id(event: APIGatewayProxyEvent) -> str:
    """
    Extract the record identifier from the request path.

    Raises:
        RequestValidationError: missing_params if absent, id_format_error if malformed
    """
    path_parameters = event.path_parameters or {}
    record_id = path_parameters.get(PATH_ID_PARAMETER)

    if record_id is None or record_id == '':
        raise RequestValidationError(ErrorKind.MISSING_PARAMS)

    if not is_valid_id(record_id):
        logger.info('Rejected malformed path id', extra={'path_id': record_id})
        raise RequestValidationError(ErrorKind.ID_FORMAT_ERROR)

    return record_id


def load_json_body(event: APIGatewayProxyEvent) -> Dict[str, Any]:
    """
    Decode the request body into a JSON object.

    Fields holding ``null`` or ``""`` are dropped so they read as absent.
    """
    if not event.body:
        raise RequestValidationError(ErrorKind.MISSING_BODY)

    try:
        payload = json.loads(event.body)
    except json.JSONDecodeError as e:
        raise RequestValidationError(ErrorKind.JSON) from e

    if not isinstance(payload, dict):
        raise RequestValidationError(ErrorKind.JSON)

    return {key: value for key, value in payload.items() if value is not None and value != ''}


def parse_request_body(event: APIGatewayProxyEvent, model: Type[ModelT]) -> ModelT:
    """
    Validate the request body against a request model.

    Args:
        event: API Gateway proxy event
        model: Request model class

    Returns:
        Validated request model instance

    Raises:
        RequestValidationError: With the kind of the first failing rule
    """
    payload = load_json_body(event)

    try:
        request = model.model_validate(payload)
    except ValidationError as e:
        error_types = {error['type'] for error in e.errors()}
        logger.info('Request body failed validation', extra={
            'model': model.__name__,
            'error_types': sorted(error_types),
        })
        if 'missing' in error_types:
            raise RequestValidationError(ErrorKind.MISSING_PARAMS) from e
        raise RequestValidationError(ErrorKind.WRONG_PARAM_FORMAT) from e

    return request


def parse_create_product(event: APIGatewayProxyEvent) -> CreateProductRequest:
    """Validate a product creation body, including the referenced shop id format."""
    request = parse_request_body(event, CreateProductRequest)

    if not is_valid_id(request.shop_id):
        raise RequestValidationError(ErrorKind.ID_FORMAT_ERROR)

    return request


def check_update_price(request: UpdateProductRequest) -> UpdateProductRequest:
    """Reject an update supplying a price that is not positive."""
    if 'price' in request.model_fields_set and request.price <= 0:
        raise RequestValidationError(ErrorKind.WRONG_PARAMS)

    return request
