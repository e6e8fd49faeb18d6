"""Shared BDD fixtures and step definitions for the storefront."""

import asyncio

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.gateway import FakeItemsAPI
from storefront.order.order import OrderConfirmation, OrderRequest, Rejection
from storefront.order.submission import OrderService


@pytest.fixture()
def outcome():
    """Container for the result of the last submission."""
    return {"result": None}


def _submit(items_api, items, total, address, outcome):
    request = OrderRequest(
        payment="online",
        email="buyer@example.com",
        phone="+7 900 000-00-00",
        address=address,
        total=total,
        items=[item for item in items.split(",") if item],
    )
    outcome["result"] = asyncio.run(OrderService(items_api).submit_order(request))


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given('a catalog of items "0" to "9" priced equal to their id', target_fixture="items_api")
def catalog_items_api():
    return FakeItemsAPI()


@given("the items API is unavailable")
def items_api_unavailable(items_api):
    items_api.configure(should_fail=True)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('an order for items "{items}" with total {total:d} is submitted to "{address}"'))
def submit_order_with_address(items_api, items, total, address, outcome):
    _submit(items_api, items, total, address, outcome)


@when(parsers.cfparse('an order for items "{items}" with total {total:d} is submitted without an address'))
def submit_order_without_address(items_api, items, total, outcome):
    _submit(items_api, items, total, None, outcome)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order is confirmed with total {total:d}"))
def order_confirmed(outcome, total):
    result = outcome["result"]
    assert isinstance(result, OrderConfirmation)
    assert result.total == total


@then(parsers.cfparse('the order is rejected with "{error}"'))
def order_rejected(outcome, error):
    result = outcome["result"]
    assert isinstance(result, Rejection)
    assert result.error == error
