"""Storefront bounded context: product catalog, basket and order checkout.

Holds the canonical catalog loaded from the items collaborator, the customer's
basket, and the validation that gates an order before it is confirmed.
"""

import structlog
from protean.domain import Domain

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
