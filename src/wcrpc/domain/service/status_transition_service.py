"""Domain service: validate and apply order status changes.

Shared by both handlers, since a tracking update may also move the order
to a new status.
"""

from __future__ import annotations

import logging

from wcrpc.domain.exceptions import ValidationError
from wcrpc.domain.model.order import Order
from wcrpc.domain.model.value_objects import StatusUpdate
from wcrpc.domain.repository.order_store import OrderStore
from wcrpc.domain.repository.status_vocabulary import StatusVocabulary

logger = logging.getLogger(__name__)


class StatusTransitionService:

    def __init__(self, order_store: OrderStore, vocabulary: StatusVocabulary) -> None:
        self._order_store = order_store
        self._vocabulary = vocabulary

    def validate(self, status: str) -> None:
        """Raise ValidationError unless *status* is currently a valid status."""
        if status not in self._vocabulary.list_valid_statuses():
            raise ValidationError(f'"{status}" is not a valid order status.')

    def apply(self, order: Order, update: StatusUpdate) -> bool:
        """Transition *order* unless it already has the requested status.

        Returns True when the store was asked to change the status.
        """
        if update.status == order.status:
            logger.info("Order #%s already %s, nothing to do", order.id, order.status)
            return False

        self._order_store.transition_status(order.id, update.status, update.message)
        logger.info("Order #%s status %s -> %s", order.id, order.status, update.status)
        return True
