"""Catalog service: the canonical item list loaded from the items API."""

from typing import Protocol

import structlog

from storefront.catalog.items import CatalogItem
from storefront.gateway.port import ErrorResponse, ItemsAPI
from storefront.order.order import Rejection
from storefront.shared.collections import LoadCollection

logger = structlog.get_logger(__name__)


class DetailView(Protocol):
    """Shows one product in detail (the product popup)."""

    def show_item(self, item: CatalogItem) -> None: ...


class Catalog(LoadCollection[CatalogItem, dict]):
    """Read-only catalog, replaced as a whole on every ``load()``."""

    def __init__(self, api: ItemsAPI, detail_view: DetailView | None = None) -> None:
        super().__init__(item_constructor=CatalogItem.from_raw, source=api)
        self._api = api
        self._detail_view = detail_view

    async def load(self) -> None:
        await super().load()
        logger.info("Catalog loaded", total=self.total, count=len(self))

    def select_item(self, index: int) -> CatalogItem:
        """Open the product at ``index`` in the detail view."""
        self._check_index(index)
        item = self._items[index]

        logger.debug("Catalog item selected", index=index, item_id=item.id)
        if self._detail_view is not None:
            self._detail_view.show_item(item)
        return item

    async def fetch_product(self, item_id: str) -> CatalogItem | Rejection:
        """Load a single product straight from the items API."""
        try:
            answer = await self._api.load_product(item_id)
        except Exception:
            logger.exception("Product fetch failed", item_id=item_id)
            return Rejection.collaborator_failure()

        if isinstance(answer, ErrorResponse):
            logger.info("Product not found", item_id=item_id, error=answer.error)
            return Rejection.item_not_found(item_id)

        return CatalogItem.from_raw(answer)

    def as_mapping(self) -> dict[str, CatalogItem]:
        """Loaded items keyed by id."""
        return {item.id: item for item in self._items}
