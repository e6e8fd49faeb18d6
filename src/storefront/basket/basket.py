"""Basket service: the customer's selection, changed one entry at a time."""

import structlog

from storefront.basket.items import BasketItem
from storefront.catalog.items import CatalogItem
from storefront.shared.collections import ModifiableCollection

logger = structlog.get_logger(__name__)


class Basket(ModifiableCollection[BasketItem]):
    """Selected items in the order they were added.

    The same catalog item may appear several times; each occurrence is its own
    entry. ``total`` from the collection is not used here, the amount due is
    ``basket_total()``.
    """

    def add_item(self, item: BasketItem) -> None:
        super().add_item(item)
        logger.debug("Basket item added", item_id=item.id, size=len(self))

    def add_catalog_item(self, item: CatalogItem) -> BasketItem:
        """Copy a catalog item into a new basket entry."""
        entry = BasketItem.from_catalog_item(item)
        self.add_item(entry)
        return entry

    def delete(self, index: int) -> None:
        super().delete(index)
        logger.debug("Basket item deleted", index=index, size=len(self))

    def basket_total(self) -> int:
        return sum(item.price for item in self._items)

    def item_ids(self) -> list[str]:
        return [item.id for item in self._items]

    def clear(self) -> None:
        self._items = []
        logger.debug("Basket cleared")
