"""
Error taxonomy and response utilities for the web shop Lambda handlers.

Every failure a handler can report is an ``ErrorKind``. The kind table is an
immutable mapping built once at import time, so a kind can never be shadowed
or looked up without a matching entry. Store failures that are surfaced
verbatim (the 504 path of the product handlers) travel as
``StoreUnavailableError`` instead.
"""

import functools
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from aws_lambda_powertools.metrics import MetricUnit

from web_shop.handlers.utils.observability import logger, metrics, tracer

JSON_CONTENT_TYPE = 'application/json'
TEXT_CONTENT_TYPE = 'text/plain'


class ErrorKind(str, Enum):
    """Classified outcomes a handler may answer with."""

    MISSING_BODY = 'missing_body'
    JSON = 'json'
    MISSING_PARAMS = 'missing_params'
    WRONG_PARAMS = 'wrong_params'
    WRONG_PARAM_FORMAT = 'wrong_param_format'
    ID_FORMAT_ERROR = 'id_format_error'
    DB_ERROR = 'db_error'
    ITEM_ERROR = 'item_error'


@dataclass(frozen=True)
class ErrorDefinition:
    """HTTP status code and plain-text message of an error kind."""

    status_code: int
    message: str


ERROR_TABLE: Mapping[ErrorKind, ErrorDefinition] = MappingProxyType({
    ErrorKind.MISSING_BODY: ErrorDefinition(400, 'Error: empty request'),
    ErrorKind.JSON: ErrorDefinition(400, 'Error: JSON format'),
    ErrorKind.MISSING_PARAMS: ErrorDefinition(400, 'Error: missing parameters'),
    ErrorKind.WRONG_PARAMS: ErrorDefinition(400, 'Error: invalid parameters'),
    ErrorKind.WRONG_PARAM_FORMAT: ErrorDefinition(400, 'Error: parameters in wrong format'),
    ErrorKind.ID_FORMAT_ERROR: ErrorDefinition(400, 'Error: invalid id'),
    ErrorKind.DB_ERROR: ErrorDefinition(500, 'Error: database could not process request'),
    ErrorKind.ITEM_ERROR: ErrorDefinition(400, 'Error: there is no this item in database'),
})


def create_api_response(
    status_code: int,
    body: Any,
    content_type: str = JSON_CONTENT_TYPE,
    headers: Optional[Dict[str, str]] = None,
    cors_enabled: bool = True,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""

    default_headers = {
        'Content-Type': content_type,
    }

    if cors_enabled:
        default_headers.update({
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
            'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,PUT,DELETE',
        })

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': body if isinstance(body, str) else json.dumps(body),
    }


def error_response(kind: ErrorKind) -> Dict[str, Any]:
    """Build the plain-text response registered for an error kind."""
    definition = ERROR_TABLE[kind]
    return create_api_response(
        status_code=definition.status_code,
        body=definition.message,
        content_type=TEXT_CONTENT_TYPE,
    )


class WebShopError(Exception, ABC):
    """Base exception for every failure a handler turns into a response."""

    @abstractmethod
    def to_response(self) -> Dict[str, Any]:
        """Build the API Gateway response reporting this error."""
        pass

    @property
    def metric_name(self) -> str:
        return type(self).__name__


class ServiceError(WebShopError):
    """Raised when an operation ends in one of the classified error kinds."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        super().__init__(message or ERROR_TABLE[kind].message)
        self.kind = kind

    @property
    def status_code(self) -> int:
        return ERROR_TABLE[self.kind].status_code

    @property
    def metric_name(self) -> str:
        return ''.join(part.capitalize() for part in self.kind.value.split('_'))

    def to_response(self) -> Dict[str, Any]:
        return error_response(self.kind)


class RequestValidationError(ServiceError):
    """Raised when a request is rejected before any store access."""


class StoreUnavailableError(WebShopError):
    """Raised when a store failure is reported to the caller with its raw detail."""

    status_code = 504

    def __init__(self, detail: Dict[str, Any]):
        super().__init__(detail.get('message', 'store operation failed'))
        self.detail = detail

    def to_response(self) -> Dict[str, Any]:
        return create_api_response(
            status_code=self.status_code,
            body=json.dumps(self.detail, default=str),
        )


@tracer.capture_method
def log_error_metrics(error: WebShopError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name='ErrorCount', unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f'{error.metric_name}Count', unit=MetricUnit.Count, value=1)

    tracer.put_annotation('error_type', error.metric_name)

    if isinstance(error, ServiceError) and error.status_code < 500:
        logger.info('Request rejected', extra={
            'error_kind': error.kind.value,
            'status_code': error.status_code,
        })
    else:
        logger.error('Service error occurred', extra={
            'error_type': error.metric_name,
            'error_message': str(error),
            'detail': getattr(error, 'detail', None),
        })


def handle_service_errors(func: Callable[..., Dict[str, Any]]) -> Callable[..., Dict[str, Any]]:
    """Decorator to handle service errors and convert to HTTP responses."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            return func(*args, **kwargs)
        except WebShopError as e:
            log_error_metrics(e)
            return e.to_response()
        except Exception:
            logger.exception('Unexpected error in handler', extra={'function_name': func.__name__})
            metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
            return error_response(ErrorKind.DB_ERROR)

    return wrapper
