"""Basket item value object."""

from protean.fields import Integer, Text

from storefront.catalog.items import CatalogItem
from storefront.domain import storefront


@storefront.value_object
class BasketItem:
    """Entry of the basket: identity and price of a catalog item, no display data."""

    id: Text(required=True)
    name: Text(required=True)
    price: Integer(required=True, min_value=0)

    @classmethod
    def from_catalog_item(cls, item: CatalogItem) -> "BasketItem":
        return cls(id=item.id, name=item.name, price=item.price)
