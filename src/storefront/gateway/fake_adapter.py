"""In-memory items API for development and testing.

Serves a fixed list of items and validates submitted orders the same way the
real backend does. It can be switched to fail at runtime, which lets tests
exercise the collaborator-failure paths.
"""

import copy

from storefront.catalog.items import CatalogItem
from storefront.gateway.port import CollaboratorError, ErrorResponse, ItemsAPI
from storefront.order.order import OrderRequest, OrderResult
from storefront.order.validation import validate_order
from storefront.shared.collections import ItemsPage


def default_items(count: int = 10) -> list[dict]:
    """Items "0".."count-1", each priced equal to its id."""
    return [
        {
            "id": str(n),
            "name": f"Item {n}",
            "price": n,
            "category": f"Category {n}",
            "image": f"image-{n}.jpg",
            "description": f"Description {n}",
        }
        for n in range(count)
    ]


class FakeItemsAPI(ItemsAPI):
    """Configurable fake items API."""

    def __init__(self, items: list[dict] | None = None, total: int | None = None) -> None:
        self.data: list[dict] = default_items() if items is None else list(items)
        self.total: int = len(self.data) if total is None else total
        self.should_fail: bool = False
        self.failure_reason: str = "Items API unavailable"
        self.calls: list[dict] = []

    def configure(self, should_fail: bool, failure_reason: str = "Items API unavailable") -> None:
        """Configure API behavior at runtime."""
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    async def load_items_list(self) -> ItemsPage[dict]:
        self._record("load_items_list")
        return ItemsPage(total=self.total, items=copy.deepcopy(self.data))

    async def load_product(self, item_id: str) -> dict | ErrorResponse:
        self._record("load_product", item_id=item_id)
        item = next((i for i in self.data if i["id"] == item_id), None)
        if item is None:
            return ErrorResponse(error="NotFound")
        return copy.deepcopy(item)

    async def post_order(self, request: OrderRequest) -> OrderResult:
        self._record("post_order", total=request.total, items=list(request.items or []))
        canonical = {item["id"]: CatalogItem.from_raw(item) for item in self.data}
        return validate_order(request, canonical)

    def _record(self, method: str, **kwargs) -> None:
        self.calls.append({"method": method, **kwargs})
        if self.should_fail:
            raise CollaboratorError(self.failure_reason)
