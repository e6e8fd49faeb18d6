"""Tests for the catalog and basket item value objects."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from storefront.basket.items import BasketItem
from storefront.catalog.items import CatalogItem


def _raw(**overrides):
    data = {
        "id": "3",
        "name": "Item 3",
        "price": 3,
        "category": "Category 3",
        "image": "image-3.jpg",
        "description": "Description 3",
    }
    data.update(overrides)
    return data


class TestCatalogItem:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert CatalogItem.element_type == DomainObjects.VALUE_OBJECT

    def test_declared_fields(self):
        fields = declared_fields(CatalogItem)
        for name in ("id", "name", "price", "category", "image", "description"):
            assert name in fields

    def test_from_raw(self):
        item = CatalogItem.from_raw(_raw())
        assert item.id == "3"
        assert item.name == "Item 3"
        assert item.price == 3
        assert item.category == "Category 3"
        assert item.image == "image-3.jpg"

    def test_from_raw_ignores_unknown_keys(self):
        item = CatalogItem.from_raw(_raw(rating=5))
        assert item.id == "3"

    def test_long_identity_and_name_accepted(self):
        item = CatalogItem.from_raw(_raw(id="x" * 60, name="n" * 300))
        assert item.id == "x" * 60
        assert item.name == "n" * 300

    def test_zero_price_is_valid(self):
        assert CatalogItem.from_raw(_raw(price=0)).price == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError) as exc:
            CatalogItem.from_raw(_raw(price=-1))
        assert "price" in exc.value.messages

    def test_missing_id_rejected(self):
        data = _raw()
        del data["id"]
        with pytest.raises(ValidationError) as exc:
            CatalogItem.from_raw(data)
        assert "id" in exc.value.messages

    def test_items_are_immutable(self):
        item = CatalogItem.from_raw(_raw())
        with pytest.raises(Exception):
            item.price = 100

    def test_equal_by_value(self):
        assert CatalogItem.from_raw(_raw()) == CatalogItem.from_raw(_raw())


class TestBasketItem:
    def test_declared_fields_carry_no_display_data(self):
        fields = declared_fields(BasketItem)
        assert set(fields) >= {"id", "name", "price"}
        assert "image" not in fields
        assert "description" not in fields

    def test_from_catalog_item(self):
        entry = BasketItem.from_catalog_item(CatalogItem.from_raw(_raw()))
        assert entry.id == "3"
        assert entry.name == "Item 3"
        assert entry.price == 3

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            BasketItem(id="1", name="Item 1", price=-5)
