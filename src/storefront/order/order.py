"""Order request and the two possible outcomes of submitting it."""

from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from protean.fields import Integer, List, String, Text

from storefront.domain import storefront


class PaymentType(Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class RejectionReason(Enum):
    ADDRESS_MISSING = "AddressMissing"
    ITEM_NOT_FOUND = "ItemNotFound"
    TOTAL_MISMATCH = "TotalMismatch"
    COLLABORATOR_FAILURE = "CollaboratorFailure"


@storefront.value_object
class OrderRequest:
    """Basket contents plus delivery and contact data, as submitted.

    ``items`` lists item ids in basket order; an id appears once per basket
    entry. ``total`` is the amount the customer saw, in minor units.
    """

    payment: String(required=True, choices=PaymentType)
    email: Text(required=True)
    phone: Text(required=True)
    address: Text()
    total: Integer(required=True)
    items: List(content_type=Text())


@dataclass(frozen=True)
class OrderConfirmation:
    """Accepted order. ``id`` is minted by the accepting side."""

    id: str
    total: int


@dataclass(frozen=True)
class Rejection:
    """Refused order; ``error`` is shown to the customer as is."""

    reason: RejectionReason
    error: str
    item_id: str | None = None

    @classmethod
    def address_missing(cls) -> "Rejection":
        return cls(RejectionReason.ADDRESS_MISSING, "Delivery address is not specified")

    @classmethod
    def item_not_found(cls, item_id: str) -> "Rejection":
        return cls(RejectionReason.ITEM_NOT_FOUND, f"Item with id {item_id} not found", item_id=item_id)

    @classmethod
    def total_mismatch(cls) -> "Rejection":
        return cls(RejectionReason.TOTAL_MISMATCH, "Order total is incorrect")

    @classmethod
    def collaborator_failure(cls) -> "Rejection":
        return cls(RejectionReason.COLLABORATOR_FAILURE, "Service is unavailable, try again later")


OrderResult = OrderConfirmation | Rejection


def new_order_id() -> str:
    return f"ord-{uuid4().hex[:12]}"
