"""
Business Logic Layer for products.

Store failures are classified the way the product API has always reported
them: point reads, existence checks and deletes answer ``db_error``, while
create, list, update and the by-shop query surface the raw store error with a
504 status.
"""

from typing import Callable, List

from aws_lambda_powertools.metrics import MetricUnit

from web_shop.dal import StoreGateway
from web_shop.dal.dynamodb_handler import ConditionalCheckFailedError, StoreError
from web_shop.handlers.utils.errors import ErrorKind, ServiceError, StoreUnavailableError
from web_shop.handlers.utils.observability import logger, metrics, tracer
from web_shop.models.identifiers import generate_id
from web_shop.models.input import CreateProductRequest, UpdateProductRequest
from web_shop.models.product import Product

DEFAULT_SHOP_INDEX_NAME = 'shopid'


class ProductService:
    """Business logic service for product management."""

    def __init__(
        self,
        products_dal: StoreGateway,
        shop_index_name: str = DEFAULT_SHOP_INDEX_NAME,
        id_factory: Callable[[], str] = generate_id,
    ):
        """
        Initialize product service.

        Args:
            products_dal: Store gateway of the products table
            shop_index_name: Global secondary index keyed on shop_id
            id_factory: Generator of new product identifiers
        """
        self.products_dal = products_dal
        self.shop_index_name = shop_index_name
        self.id_factory = id_factory

        logger.info('Product service initialized', extra={
            'table_name': products_dal.table_name,
            'shop_index_name': shop_index_name,
        })

    @tracer.capture_method
    def create_product(self, request: CreateProductRequest) -> Product:
        """
        Persist a new product under a freshly generated id.

        The shop is not looked up: products may reference any well-formed shop id.
        """
        product = Product.create(
            shop_id=request.shop_id,
            name=request.name,
            price=request.price,
            product_id=self.id_factory(),
        )

        try:
            self.products_dal.put_item(product.to_item())
        except StoreError as e:
            raise StoreUnavailableError(e.to_dict()) from e

        tracer.put_annotation('product_id', product.id)
        metrics.add_metric(name='ProductCreated', unit=MetricUnit.Count, value=1)
        logger.info('Product created', extra={'product_id': product.id, 'shop_id': product.shop_id})
        return product

    @tracer.capture_method
    def get_product(self, product_id: str) -> Product:
        return self._require_product(product_id)

    @tracer.capture_method
    def list_products(self) -> List[Product]:
        try:
            items = self.products_dal.scan_items()
        except StoreError as e:
            raise StoreUnavailableError(e.to_dict()) from e

        return [Product.from_item(item) for item in items]

    @tracer.capture_method
    def list_products_by_shop(self, shop_id: str) -> List[Product]:
        """Return every product whose shop_id equals the given shop id."""
        try:
            items = self.products_dal.query_index(self.shop_index_name, 'shop_id', shop_id)
        except StoreError as e:
            raise StoreUnavailableError(e.to_dict()) from e

        tracer.put_annotation('shop_id', shop_id)
        logger.info('Products listed for shop', extra={'shop_id': shop_id, 'count': len(items)})
        return [Product.from_item(item) for item in items]

    @tracer.capture_method
    def update_product(self, product_id: str, request: UpdateProductRequest) -> Product:
        """
        Apply a partial update to an existing product.

        Only the fields present in the request are written; the rest of the
        record is left untouched.

        Args:
            product_id: Identifier of the product
            request: Validated update request

        Returns:
            The product as stored after the update

        Raises:
            ServiceError: item_error if the product does not exist, db_error if the lookup fails
            StoreUnavailableError: If the update call fails
        """
        self._require_product(product_id)

        changes = request.changes()
        if 'price' in changes:
            changes['price'] = Product.price_to_item(changes['price'])

        try:
            item = self.products_dal.update_item({'id': product_id}, changes)
        except ConditionalCheckFailedError as e:
            # Deleted between the existence check and the update
            raise ServiceError(ErrorKind.ITEM_ERROR) from e
        except StoreError as e:
            raise StoreUnavailableError(e.to_dict()) from e

        metrics.add_metric(name='ProductUpdated', unit=MetricUnit.Count, value=1)
        logger.info('Product updated', extra={'product_id': product_id, 'updated_fields': sorted(changes)})
        return Product.from_item(item)

    @tracer.capture_method
    def delete_product(self, product_id: str) -> None:
        """
        Delete an existing product.

        Raises:
            ServiceError: item_error if the product does not exist or was already removed
        """
        self._require_product(product_id)

        try:
            deleted = self.products_dal.delete_item({'id': product_id})
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        if not deleted:
            raise ServiceError(ErrorKind.ITEM_ERROR)

        metrics.add_metric(name='ProductDeleted', unit=MetricUnit.Count, value=1)
        logger.info('Product deleted', extra={'product_id': product_id})

    def _require_product(self, product_id: str) -> Product:
        try:
            item = self.products_dal.get_item({'id': product_id})
        except StoreError as e:
            raise ServiceError(ErrorKind.DB_ERROR) from e

        if item is None:
            raise ServiceError(ErrorKind.ITEM_ERROR)
        return Product.from_item(item)
