"""
Business Logic Layer for shops.

Every store failure of a shop operation is reported as ``db_error``.
"""

from typing import Callable, List

from aws_lambda_powertools.metrics import MetricUnit

from web_shop.dal import StoreGateway
from web_shop.dal.dynamodb_handler import ConditionalCheckFailedError, StoreError
from web_shop.handlers.utils.errors import ErrorKind, ServiceError
from web_shop.handlers.utils.observability import logger, metrics, tracer
from web_shop.models.identifiers import generate_id
from web_shop.models.input import CreateShopRequest, UpdateShopRequest
from web_shop.models.shop import Shop


class ShopService:
    """Business logic service for shop management."""

    def __init__(self, shops_dal: StoreGateway, id_factory: Callable[[], str] = generate_id):
        """
        Initialize shop service.

        Args:
            shops_dal: Store gateway of the shops table
            id_factory: Generator of new shop identifiers
        """
        self.shops_dal = shops_dal
        self.id_factory = id_factory

        logger.info('Shop service initialized', extra={'table_name': shops_dal.table_name})

    @tracer.capture_method
    def create_shop(self, request: CreateShopRequest) -> Shop:
        """Persist a new shop under a freshly generated id."""
        shop = Shop.create(name=request.name, shop_id=self.id_factory())

        try:
            self.shops_dal.put_item(shop.to_item())
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        tracer.put_annotation('shop_id', shop.id)
        metrics.add_metric(name='ShopCreated', unit=MetricUnit.Count, value=1)
        logger.info('Shop created', extra={'shop_id': shop.id})
        return shop

    @tracer.capture_method
    def get_shop(self, shop_id: str) -> Shop:
        return self._require_shop(shop_id)

    @tracer.capture_method
    def list_shops(self) -> List[Shop]:
        try:
            items = self.shops_dal.scan_items()
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        return [Shop.from_item(item) for item in items]

    @tracer.capture_method
    def update_shop(self, shop_id: str, request: UpdateShopRequest) -> Shop:
        """
        Rename an existing shop.

        Args:
            shop_id: Identifier of the shop
            request: Validated update request

        Returns:
            The shop as stored after the update

        Raises:
            ServiceError: item_error if the shop does not exist, db_error on store failure
        """
        self._require_shop(shop_id)

        try:
            item = self.shops_dal.update_item({'id': shop_id}, request.changes())
        except ConditionalCheckFailedError as e:
            # Deleted between the existence check and the update
            raise ServiceError(ErrorKind.ITEM_ERROR) from e
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        metrics.add_metric(name='ShopUpdated', unit=MetricUnit.Count, value=1)
        logger.info('Shop updated', extra={'shop_id': shop_id})
        return Shop.from_item(item)

    @tracer.capture_method
    def delete_shop(self, shop_id: str) -> None:
        """
        Delete an existing shop.

        Raises:
            ServiceError: item_error if the shop does not exist or was already removed
        """
        self._require_shop(shop_id)

        try:
            deleted = self.shops_dal.delete_item({'id': shop_id})
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        if not deleted:
            raise ServiceError(ErrorKind.ITEM_ERROR)

        metrics.add_metric(name='ShopDeleted', unit=MetricUnit.Count, value=1)
        logger.info('Shop deleted', extra={'shop_id': shop_id})

    def _require_shop(self, shop_id: str) -> Shop:
        try:
            item = self.shops_dal.get_item({'id': shop_id})
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        if item is None:
            raise ServiceError(ErrorKind.ITEM_ERROR)
        return Shop.from_item(item)
