"""Application service: Update Order Status use case.

Moves an order to another status of the shop's status list. Asking for the
status the order already has is accepted and changes nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from wcrpc.application.dto import SUCCESS
from wcrpc.application.params import is_test_mode, optional_param, require_params
from wcrpc.domain.model.value_objects import OrderReference, StatusUpdate
from wcrpc.domain.repository.order_store import OrderStore
from wcrpc.domain.repository.status_vocabulary import StatusVocabulary
from wcrpc.domain.service.order_resolver import OrderResolver
from wcrpc.domain.service.status_transition_service import (
    StatusTransitionService,
)

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_store: OrderStore, vocabulary: StatusVocabulary) -> None:
        self._resolver = OrderResolver(order_store)
        self._statuses = StatusTransitionService(order_store, vocabulary)

    def handle(self, params: Mapping[str, Any]) -> str:
        require_params(params, "order_number", "order_status")

        order_status = str(params["order_status"])
        message = str(optional_param(params, "message") or "")

        self._statuses.validate(order_status)
        order = self._resolver.resolve(OrderReference.of(params["order_number"]))

        if is_test_mode(params):
            logger.info("Test mode: skipping status update for order #%s", order.id)
            return SUCCESS

        self._statuses.apply(order, StatusUpdate(order_status, message))
        return SUCCESS
