"""Order submission: local validation first, then the authoritative items API."""

import structlog

from storefront.catalog.items import CatalogItem
from storefront.gateway.port import ItemsAPI
from storefront.order.order import OrderConfirmation, OrderRequest, OrderResult, Rejection
from storefront.order.validation import validate_order

logger = structlog.get_logger(__name__)


class OrderService:
    """Submits order requests through the items API.

    The request is checked against a freshly fetched canonical item set so
    the customer gets feedback without a round trip to ``post_order``; the
    items API still has the final word. Nothing is retried.
    """

    def __init__(self, api: ItemsAPI) -> None:
        self._api = api

    async def submit_order(self, request: OrderRequest) -> OrderResult:
        try:
            page = await self._api.load_items_list()
            canonical = {item.id: item for item in map(CatalogItem.from_raw, page.items)}
        except Exception:
            logger.exception("Canonical items could not be loaded")
            return Rejection.collaborator_failure()

        local_result = validate_order(request, canonical)
        if isinstance(local_result, Rejection):
            return local_result

        try:
            result = await self._api.post_order(request)
        except Exception:
            logger.exception("Order submission failed", total=request.total)
            return Rejection.collaborator_failure()

        if isinstance(result, OrderConfirmation):
            logger.info("Order confirmed", order_id=result.id, total=result.total)
        else:
            logger.warning("Order refused by items API", reason=result.reason.value)
        return result
