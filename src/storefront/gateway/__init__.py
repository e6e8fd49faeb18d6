"""Items API port and its in-memory adapter."""

from storefront.gateway.fake_adapter import FakeItemsAPI, default_items
from storefront.gateway.port import CollaboratorError, ErrorResponse, ItemsAPI

__all__ = ["CollaboratorError", "ErrorResponse", "FakeItemsAPI", "ItemsAPI", "default_items"]
