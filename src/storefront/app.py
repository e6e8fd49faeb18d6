"""Storefront composition and a small command line front end.

``build_storefront()`` wires the items API, catalog, basket and order service
together; nothing is shared at module level.

Usage:
    python -m storefront.app catalog
    python -m storefront.app order 2 5 --address "Lenina 1" --email a@b.c --phone 123
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog
from protean.exceptions import ValidationError

from storefront.basket.basket import Basket
from storefront.catalog.catalog import Catalog, DetailView
from storefront.checkout.forms import build_order_request, contacts_form, payment_form
from storefront.domain import storefront
from storefront.gateway import FakeItemsAPI, ItemsAPI
from storefront.order.order import OrderConfirmation, OrderResult, PaymentType
from storefront.order.submission import OrderService
from storefront.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


@dataclass
class Storefront:
    api: ItemsAPI
    catalog: Catalog
    basket: Basket = field(default_factory=Basket)
    orders: OrderService | None = None

    def __post_init__(self) -> None:
        if self.orders is None:
            self.orders = OrderService(self.api)


def build_storefront(api: ItemsAPI | None = None, detail_view: DetailView | None = None) -> Storefront:
    api = api or FakeItemsAPI()
    return Storefront(api=api, catalog=Catalog(api, detail_view=detail_view))


async def place_order(
    shop: Storefront,
    item_ids: Sequence[str],
    payment: str,
    address: str,
    email: str,
    phone: str,
) -> OrderResult:
    """Fill the basket from the loaded catalog, fill the forms and submit."""
    await shop.catalog.load()
    known = shop.catalog.as_mapping()

    for item_id in item_ids:
        if item_id not in known:
            raise KeyError(item_id)
        shop.basket.add_catalog_item(known[item_id])

    first, second = payment_form(), contacts_form()
    first.field("payment").select(payment)
    first.field("address").value = address
    second.field("email").value = email
    second.field("phone").value = phone

    request = build_order_request(shop.basket, first, second)
    result = await shop.orders.submit_order(request)
    if isinstance(result, OrderConfirmation):
        shop.basket.clear()
    return result


async def _show_catalog(shop: Storefront) -> None:
    await shop.catalog.load()
    print(f"{shop.catalog.total} items")
    for index, item in enumerate(shop.catalog):
        print(f"  [{index}] {item.id}  {item.name}  {item.price}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Storefront catalog and checkout")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("catalog", help="List the catalog")

    order_parser = subparsers.add_parser("order", help="Place an order for the given item ids")
    order_parser.add_argument("items", nargs="+", help="Item ids, repeat an id to order it twice")
    order_parser.add_argument("--payment", choices=[p.value for p in PaymentType], default=PaymentType.ONLINE.value)
    order_parser.add_argument("--address", default="")
    order_parser.add_argument("--email", required=True)
    order_parser.add_argument("--phone", required=True)

    args = parser.parse_args(argv)

    configure_logging()
    storefront.init()

    with structlog.contextvars.bound_contextvars(command=args.command), storefront.domain_context():
        logger.info("Storefront started")
        shop = build_storefront()
        if args.command == "catalog":
            asyncio.run(_show_catalog(shop))
            return 0

        try:
            result = asyncio.run(
                place_order(shop, args.items, args.payment, args.address, args.email, args.phone)
            )
        except KeyError as exc:
            print(f"ERR: unknown item {exc.args[0]}")
            return 1
        except ValidationError as exc:
            for name, messages in exc.messages.items():
                print(f"ERR: {name}: {', '.join(messages)}")
            return 1

    if isinstance(result, OrderConfirmation):
        print(f"Order {result.id} confirmed, total {result.total}")
        return 0
    print(f"ERR: {result.error}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
