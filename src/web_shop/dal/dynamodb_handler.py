"""
DynamoDB implementation of the store gateway.

This module provides the data access layer for one DynamoDB table, with
consistent error translation and observability. boto3 and botocore failures,
and numbers boto3 cannot encode, are raised as ``StoreError``; deciding how a
failure is reported to the caller is left to the logic layer.
"""

import decimal
import functools
import time
from typing import Any, Callable, Dict, List, Optional, TypeVar

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from web_shop.handlers.utils.observability import logger, metrics, tracer

F = TypeVar('F', bound=Callable[..., Any])

RETRYABLE_ERROR_CODES = frozenset({
    'ProvisionedThroughputExceededException',
    'ThrottlingException',
    'RequestLimitExceeded',
    'InternalServerError',
    'ServiceUnavailable',
})


class StoreError(Exception):
    """Raised when a DynamoDB operation fails."""

    def __init__(
        self,
        message: str,
        operation: str,
        table_name: str,
        error_code: str = 'DAL_ERROR',
        status_code: Optional[int] = None,
        retryable: bool = False,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.table_name = table_name
        self.error_code = error_code
        self.status_code = status_code
        self.retryable = retryable
        self.request_id = request_id

    @classmethod
    def from_client_error(cls, error: ClientError, operation: str, table_name: str) -> 'StoreError':
        error_info = error.response.get('Error', {})
        metadata = error.response.get('ResponseMetadata', {})
        error_code = error_info.get('Code', 'Unknown')
        error_class = ConditionalCheckFailedError if error_code == 'ConditionalCheckFailedException' else cls
        return error_class(
            message=error_info.get('Message', str(error)),
            operation=operation,
            table_name=table_name,
            error_code=error_code,
            status_code=metadata.get('HTTPStatusCode'),
            retryable=error_code in RETRYABLE_ERROR_CODES,
            request_id=metadata.get('RequestId'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Raw error detail, as reported to callers of the product API."""
        return {
            'message': self.message,
            'code': self.error_code,
            'statusCode': self.status_code,
            'retryable': self.retryable,
            'requestId': self.request_id,
            'operation': self.operation,
            'table': self.table_name,
        }


class ConditionalCheckFailedError(StoreError):
    """Raised when the condition of a DynamoDB write does not hold."""


def handle_dynamodb_errors(operation: str) -> Callable[[F], F]:
    """Decorator translating boto3 failures of a table operation into StoreError."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: 'DynamoDBHandler', *args, **kwargs):
            operation_start = time.time()
            metrics.add_metric(name=f'DynamoDB{operation}Count', unit=MetricUnit.Count, value=1)

            try:
                result = func(self, *args, **kwargs)

            except ClientError as e:
                store_error = StoreError.from_client_error(e, operation=operation, table_name=self.table_name)
                metrics.add_metric(name=f'DynamoDB{operation}Error', unit=MetricUnit.Count, value=1)
                logger.error(f'DynamoDB {operation} error', extra={
                    'error_code': store_error.error_code,
                    'error_message': store_error.message,
                    'table_name': self.table_name,
                    'operation': operation,
                })
                raise store_error from e

            except BotoCoreError as e:
                metrics.add_metric(name=f'DynamoDB{operation}Error', unit=MetricUnit.Count, value=1)
                logger.error(f'DynamoDB connection error during {operation}', extra={
                    'error': str(e),
                    'table_name': self.table_name,
                })
                raise StoreError(
                    message=f'Database connection error: {e}',
                    operation=operation,
                    table_name=self.table_name,
                    error_code=type(e).__name__,
                    retryable=True,
                ) from e

            except decimal.DecimalException as e:
                # boto3 refuses numbers outside the DynamoDB number range before sending
                metrics.add_metric(name=f'DynamoDB{operation}Error', unit=MetricUnit.Count, value=1)
                logger.error(f'DynamoDB {operation} rejected a number', extra={
                    'error': repr(e),
                    'table_name': self.table_name,
                })
                raise StoreError(
                    message='Number out of the range DynamoDB can store',
                    operation=operation,
                    table_name=self.table_name,
                    error_code='ValidationException',
                    status_code=400,
                ) from e

            operation_duration = (time.time() - operation_start) * 1000
            metrics.add_metric(name=f'DynamoDB{operation}Duration', unit=MetricUnit.Milliseconds, value=operation_duration)
            tracer.put_annotation('dynamodb_operation', operation)
            tracer.put_annotation('table_name', self.table_name)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


class DynamoDBHandler:
    """Store gateway over a single DynamoDB table keyed by ``id``."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        key_attribute: str = 'id',
    ):
        """
        Initialize DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
            key_attribute: Name of the table's hash key
        """
        self.table_name = table_name
        self.key_attribute = key_attribute

        session_config = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)
        self.table = self.dynamodb.Table(table_name)

        logger.info('DynamoDB handler initialized', extra={
            'table_name': table_name,
            'region_name': region_name,
            'endpoint_url': endpoint_url,
        })

    @tracer.capture_method
    @handle_dynamodb_errors('PutItem')
    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put an item into DynamoDB. Existing items with the same key are overwritten.

        Args:
            item: Item data to store

        Returns:
            The stored item data

        Raises:
            StoreError: If DynamoDB operation fails
        """
        self.table.put_item(Item=item)

        logger.info('Item stored successfully', extra={
            'table_name': self.table_name,
            'item_id': item.get(self.key_attribute),
        })
        return item

    @tracer.capture_method
    @handle_dynamodb_errors('GetItem')
    def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from DynamoDB.

        Args:
            key: Primary key of the item to retrieve

        Returns:
            Item data or None if not found

        Raises:
            StoreError: If DynamoDB operation fails
        """
        response = self.table.get_item(Key=key)
        item = response.get('Item')

        if item is None:
            logger.debug('Item not found', extra={'table_name': self.table_name, 'key': key})

        return item

    @tracer.capture_method
    @handle_dynamodb_errors('UpdateItem')
    def update_item(self, key: Dict[str, Any], fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Set the given attributes on an existing item.

        Only the supplied attributes are written; the update is conditioned on
        the item still existing, so it never creates a new item.

        Args:
            key: Primary key of the item to update
            fields: Attribute names and their new values

        Returns:
            The item as stored after the update

        Raises:
            ConditionalCheckFailedError: If the item no longer exists
            StoreError: If DynamoDB operation fails
        """
        if not fields:
            raise ValueError('update_item requires at least one field')

        expression_attribute_names = {'#key': self.key_attribute}
        expression_attribute_values = {}
        assignments = []
        for index, (name, value) in enumerate(fields.items()):
            expression_attribute_names[f'#f{index}'] = name
            expression_attribute_values[f':v{index}'] = value
            assignments.append(f'#f{index} = :v{index}')

        response = self.table.update_item(
            Key=key,
            UpdateExpression='SET ' + ', '.join(assignments),
            ExpressionAttributeNames=expression_attribute_names,
            ExpressionAttributeValues=expression_attribute_values,
            ConditionExpression='attribute_exists(#key)',
            ReturnValues='ALL_NEW',
        )

        logger.info('Item updated successfully', extra={
            'table_name': self.table_name,
            'key': key,
            'updated_fields': list(fields),
        })
        return response['Attributes']

    @tracer.capture_method
    @handle_dynamodb_errors('DeleteItem')
    def delete_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Delete an item from DynamoDB.

        Args:
            key: Primary key of the item to delete

        Returns:
            The deleted item, or None if nothing was removed

        Raises:
            StoreError: If DynamoDB operation fails
        """
        response = self.table.delete_item(Key=key, ReturnValues='ALL_OLD')
        deleted_item = response.get('Attributes')

        if deleted_item:
            logger.info('Item deleted successfully', extra={'table_name': self.table_name, 'key': key})
        else:
            logger.warning('Item not found for deletion', extra={'table_name': self.table_name, 'key': key})

        return deleted_item or None

    @tracer.capture_method
    @handle_dynamodb_errors('Scan')
    def scan_items(self) -> List[Dict[str, Any]]:
        """
        Scan every item of the table, following DynamoDB's result pages.

        Returns:
            All items of the table

        Raises:
            StoreError: If DynamoDB operation fails
        """
        items: List[Dict[str, Any]] = []
        scan_kwargs: Dict[str, Any] = {}

        while True:
            response = self.table.scan(**scan_kwargs)
            items.extend(response.get('Items', []))
            if 'LastEvaluatedKey' not in response:
                break
            scan_kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']

        logger.info('Scan completed successfully', extra={
            'table_name': self.table_name,
            'items_count': len(items),
        })
        return items

    @tracer.capture_method
    @handle_dynamodb_errors('Query')
    def query_index(self, index_name: str, field: str, value: Any) -> List[Dict[str, Any]]:
        """
        Query a global secondary index for the items whose key equals a value.

        Args:
            index_name: Global secondary index name
            field: Hash key attribute of the index
            value: Value to match

        Returns:
            All matching items

        Raises:
            StoreError: If DynamoDB operation fails
        """
        items: List[Dict[str, Any]] = []
        query_kwargs: Dict[str, Any] = {
            'IndexName': index_name,
            'KeyConditionExpression': Key(field).eq(value),
        }

        while True:
            response = self.table.query(**query_kwargs)
            items.extend(response.get('Items', []))
            if 'LastEvaluatedKey' not in response:
                break
            query_kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']

        logger.info('Query completed successfully', extra={
            'table_name': self.table_name,
            'index_name': index_name,
            'items_count': len(items),
        })
        return items
