"""Order validation against the canonical item set.

Checks run in a fixed order and stop at the first failure:

1. a delivery address is present;
2. every ordered id exists in the canonical set, in the order listed;
3. the submitted total equals the sum of canonical prices, each duplicate
   contributing its own price.

Only a request that passes all three is confirmed. The result is always a
value, a rejected order never raises.
"""

from collections.abc import Callable, Mapping

import structlog

from storefront.order.order import OrderConfirmation, OrderRequest, OrderResult, Rejection, new_order_id

logger = structlog.get_logger(__name__)


def validate_order(
    request: OrderRequest,
    canonical: Mapping,
    id_factory: Callable[[], str] = new_order_id,
) -> OrderResult:
    """Confirm ``request`` or return the first reason it is refused.

    Args:
        request: The submitted order.
        canonical: Item id to canonical item (anything with a ``price``).
        id_factory: Mints the id of an accepted order.
    """
    if not request.address:
        return _reject(Rejection.address_missing())

    ordered_ids = list(request.items or [])

    for item_id in ordered_ids:
        if item_id not in canonical:
            return _reject(Rejection.item_not_found(item_id))

    expected_total = sum(canonical[item_id].price for item_id in ordered_ids)
    if expected_total != request.total:
        logger.info("Order total mismatch", expected_total=expected_total, submitted_total=request.total)
        return _reject(Rejection.total_mismatch())

    confirmation = OrderConfirmation(id=id_factory(), total=request.total)
    logger.info("Order passed validation", order_id=confirmation.id, total=confirmation.total, items=len(ordered_ids))
    return confirmation


def _reject(rejection: Rejection) -> Rejection:
    logger.info("Order rejected", reason=rejection.reason.value, item_id=rejection.item_id)
    return rejection
