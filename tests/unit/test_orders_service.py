import uuid

import pydantic
import pytest

from photostore.errors import ValidationError as StoreValidationError
from photostore.orders import service as orders_service
from photostore.orders.models import OrderRequest


def _request(items, **extra):
    return OrderRequest.model_validate({"items": items, **extra})


def test_total_uses_catalog_prices_only():
    req = _request(
        [{"id": "photo-1", "quantity": 2, "price": 1}, {"id": "photo-3", "quantity": 1, "price": 1}],
        total=2,
    )
    order = orders_service.create_order(req)
    assert order.total == 8497
    assert [(i.id, i.quantity) for i in order.items] == [("photo-1", 2), ("photo-3", 1)]
    uuid.UUID(order.order_id)
    assert order.created_at.tzinfo is not None


def test_each_call_yields_new_order_id():
    req = _request([{"id": "photo-1", "quantity": 1}])
    first = orders_service.create_order(req)
    second = orders_service.create_order(req)
    assert first.order_id != second.order_id
    assert first.total == second.total == 2999


def test_unknown_product_names_the_id():
    req = _request([{"id": "photo-1", "quantity": 1}, {"id": "photo-99", "quantity": 1}])
    with pytest.raises(StoreValidationError) as exc:
        orders_service.create_order(req)
    assert exc.value.message == "Product not found: photo-99"
    assert exc.value.status_code == 400


@pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
def test_bad_quantity_rejected(quantity):
    with pytest.raises(pydantic.ValidationError) as exc:
        _request([{"id": "photo-1", "quantity": quantity}])
    assert "Invalid quantity: must be a positive integer" in str(exc.value)


@pytest.mark.parametrize("item", [{"id": "photo-1"}, {"quantity": 1}, {"id": "", "quantity": 1}, "photo-1"])
def test_bad_item_structure_rejected(item):
    with pytest.raises(pydantic.ValidationError) as exc:
        _request([item])
    assert "Invalid item structure: id and quantity required" in str(exc.value)


@pytest.mark.parametrize("payload", [{}, {"items": []}, {"items": None}])
def test_empty_order_rejected(payload):
    with pytest.raises(pydantic.ValidationError) as exc:
        OrderRequest.model_validate(payload)
    assert "No items in order" in str(exc.value)


def test_email_is_validated_and_empty_means_absent():
    assert _request([{"id": "photo-1", "quantity": 1}], customerEmail="").customer_email is None
    assert _request([{"id": "photo-1", "quantity": 1}], customerEmail="buyer@example.com").customer_email == "buyer@example.com"
    with pytest.raises(pydantic.ValidationError) as exc:
        _request([{"id": "photo-1", "quantity": 1}], customerEmail="not-an-email")
    assert "Invalid email address format" in str(exc.value)


def test_compute_total_counts_repeated_lines():
    req = _request([{"id": "photo-2", "quantity": 1}, {"id": "photo-2", "quantity": 2}])
    products = orders_service.resolve_products(req.items)
    assert orders_service.compute_total(req.items, products) == 3 * 3499
