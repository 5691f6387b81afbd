"""Domain service: resolve an order reference to an order.

Callers may identify an order either by its numeric ID or by the custom
order number shown to customers. The ID is tried first; a custom number
that happens to look like an existing ID will therefore never be reached.
That precedence is kept on purpose so existing callers see stable results.
"""

from __future__ import annotations

import logging

from wcrpc.domain.exceptions import EntityNotFoundError
from wcrpc.domain.model.order import Order
from wcrpc.domain.model.value_objects import OrderReference
from wcrpc.domain.repository.order_store import OrderStore

logger = logging.getLogger(__name__)


class OrderResolver:

    def __init__(self, order_store: OrderStore) -> None:
        self._order_store = order_store

    def resolve(self, reference: OrderReference) -> Order:
        order_id = reference.as_id()
        if order_id is not None:
            order = self._order_store.get_by_id(order_id)
            if order is not None:
                logger.debug("Resolved order %s by ID", reference)
                return order

        order = self._order_store.find_by_custom_number(reference.value)
        if order is not None:
            logger.debug("Resolved order %s by custom number -> #%s", reference, order.id)
            return order

        raise EntityNotFoundError(f'Order with number "{reference}" not found')
