"""Items API port (abstract interface).

Defines the contract the storefront needs from its data source: the item
list, a single product, and order submission. The in-memory FakeItemsAPI
implements it for development and tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.order.order import OrderRequest, OrderResult
from storefront.shared.collections import ItemsPage


class CollaboratorError(Exception):
    """The items API could not answer."""


@dataclass(frozen=True)
class ErrorResponse:
    """Error answer of the items API."""

    error: str


class ItemsAPI(ABC):
    """Abstract items API interface."""

    @abstractmethod
    async def load_items_list(self) -> ItemsPage[dict]:
        """Return the reported item count and the raw item records."""
        ...

    @abstractmethod
    async def load_product(self, item_id: str) -> dict | ErrorResponse:
        """Return the raw record of one item."""
        ...

    @abstractmethod
    async def post_order(self, request: OrderRequest) -> OrderResult:
        """Submit an order; the answer is authoritative."""
        ...
