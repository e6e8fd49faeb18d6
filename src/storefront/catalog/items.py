"""Catalog item value object: the canonical record of a product."""

from collections.abc import Mapping
from typing import Any

from protean.fields import Integer, Text

from storefront.domain import storefront


@storefront.value_object
class CatalogItem:
    """Product as published in the catalog.

    ``id`` and ``price`` are authoritative for ordering; ``category``,
    ``image`` and ``description`` are display-only. Prices are kept in minor
    units so totals compare exactly.
    """

    id: Text(required=True)
    name: Text(required=True)
    price: Integer(required=True, min_value=0)
    category: Text()
    image: Text()
    description: Text()

    @classmethod
    def from_raw(cls, data: Mapping[str, Any]) -> "CatalogItem":
        """Build an item from a raw collaborator record, ignoring unknown keys."""
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            price=data.get("price"),
            category=data.get("category"),
            image=data.get("image"),
            description=data.get("description"),
        )
