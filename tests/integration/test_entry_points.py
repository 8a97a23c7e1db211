"""
Integration tests for the Lambda entry points.

The module-level handler sets are swapped for ones bound to the mocked tables,
then the decorated entry points are invoked with raw API Gateway events.
"""

import json

import pytest

from web_shop.handlers import product_handler, shop_handler


@pytest.fixture
def bound_entry_points(monkeypatch, shop_handlers, product_handlers):
    monkeypatch.setattr(shop_handler, "shop_handlers", shop_handlers)
    monkeypatch.setattr(product_handler, "product_handlers", product_handlers)


@pytest.mark.usefixtures("bound_entry_points")
class TestShopEntryPoints:
    """Test cases for the shop entry points."""

    def test_shop_lifecycle(self, api_gateway_event, lambda_context):
        created = shop_handler.shop_create(api_gateway_event(body={"name": "Acme"}, http_method="POST"), lambda_context)
        shop = json.loads(created["body"])
        path = {"id": shop["id"]}

        updated = shop_handler.shop_update(api_gateway_event(body={"name": "Globex"}, path_parameters=path), lambda_context)
        fetched = shop_handler.shop_get(api_gateway_event(path_parameters=path), lambda_context)
        listed = shop_handler.shop_get_all(api_gateway_event(), lambda_context)
        deleted = shop_handler.shop_delete(api_gateway_event(path_parameters=path), lambda_context)

        assert created["statusCode"] == 200
        assert json.loads(updated["body"])["name"] == "Globex"
        assert json.loads(fetched["body"]) == {"id": shop["id"], "name": "Globex"}
        assert json.loads(listed["body"])["count"] == 1
        assert json.loads(deleted["body"]) == {"msg": "delete item successfully!"}

    def test_shop_get_malformed_id(self, api_gateway_event, lambda_context):
        response = shop_handler.shop_get(api_gateway_event(path_parameters={"id": "abc"}), lambda_context)

        assert response["statusCode"] == 400
        assert response["body"] == "Error: invalid id"


@pytest.mark.usefixtures("bound_entry_points")
class TestProductEntryPoints:
    """Test cases for the product entry points."""

    def test_product_lifecycle(self, api_gateway_event, lambda_context):
        shop = json.loads(shop_handler.shop_create(api_gateway_event(body={"name": "Acme"}), lambda_context)["body"])
        body = {"name": "Anvil", "shop_id": shop["id"], "price": 10}

        created = product_handler.product_create(api_gateway_event(body=body, http_method="POST"), lambda_context)
        product = json.loads(created["body"])
        path = {"id": product["id"]}

        updated = product_handler.product_update(api_gateway_event(body={"price": 15}, path_parameters=path), lambda_context)
        fetched = product_handler.product_get(api_gateway_event(path_parameters=path), lambda_context)
        listed = product_handler.product_get_all(api_gateway_event(), lambda_context)
        by_shop = product_handler.product_list(api_gateway_event(path_parameters={"id": shop["id"]}), lambda_context)
        deleted = product_handler.product_delete(api_gateway_event(path_parameters=path), lambda_context)

        assert json.loads(updated["body"])["price"] == 15
        assert json.loads(fetched["body"]) == {"id": product["id"], "shop_id": shop["id"], "name": "Anvil", "price": 15}
        assert json.loads(listed["body"])["count"] == 1
        assert json.loads(by_shop["body"])["count"] == 1
        assert deleted["statusCode"] == 200

    def test_product_update_non_positive_price(self, api_gateway_event, lambda_context):
        event = api_gateway_event(body={"price": 0}, path_parameters={"id": "5d0a2f5e-12c4-11e1-840d-7b25c5ee775a"})

        response = product_handler.product_update(event, lambda_context)

        assert response["body"] == "Error: invalid parameters"


class TestDeploymentModules:
    """The per-function deployment modules expose every entry point."""

    def test_shops_module(self):
        from shops import lambda_function

        assert lambda_function.shop_create is shop_handler.shop_create
        assert set(lambda_function.__all__) == {"shop_create", "shop_get_all", "shop_get", "shop_update", "shop_delete"}

    def test_products_module(self):
        from products import lambda_function

        assert lambda_function.product_list is product_handler.product_list
        assert len(lambda_function.__all__) == 6
