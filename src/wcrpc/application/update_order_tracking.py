"""Application service: Update Order Tracking use case.

Writes shipment tracking details onto an order so the storefront can show
them to the customer, and optionally moves the order to a new status in the
same call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from wcrpc.application.dto import SUCCESS
from wcrpc.application.params import (
    clean_text,
    is_test_mode,
    optional_param,
    require_params,
)
from wcrpc.domain.model.value_objects import (
    OrderReference,
    StatusUpdate,
    TrackingUpdate,
    parse_ship_date,
)
from wcrpc.domain.repository.order_store import OrderStore
from wcrpc.domain.repository.status_vocabulary import StatusVocabulary
from wcrpc.domain.service.order_resolver import OrderResolver
from wcrpc.domain.service.status_transition_service import (
    StatusTransitionService,
)

logger = logging.getLogger(__name__)


class UpdateOrderTrackingHandler:

    def __init__(self, order_store: OrderStore, vocabulary: StatusVocabulary) -> None:
        self._order_store = order_store
        self._resolver = OrderResolver(order_store)
        self._statuses = StatusTransitionService(order_store, vocabulary)

    def handle(self, params: Mapping[str, Any]) -> str:
        require_params(params, "order_number", "tracking_provider", "tracking_number")

        date_shipped = optional_param(params, "date_shipped")
        custom_provider = optional_param(params, "custom_tracking_provider")
        custom_link = optional_param(params, "custom_tracking_link")
        tracking = TrackingUpdate(
            tracking_provider=clean_text(params["tracking_provider"]),
            tracking_number=clean_text(params["tracking_number"]),
            date_shipped=parse_ship_date(str(date_shipped)) if date_shipped else None,
            custom_tracking_provider=clean_text(custom_provider) if custom_provider else None,
            custom_tracking_link=clean_text(custom_link) if custom_link else None,
        )

        # Validate everything before the first write
        status_update = None
        order_status = optional_param(params, "order_status")
        if order_status is not None:
            self._statuses.validate(str(order_status))
            status_update = StatusUpdate(
                str(order_status), str(optional_param(params, "message") or "")
            )

        order = self._resolver.resolve(OrderReference.of(params["order_number"]))

        if is_test_mode(params):
            logger.info("Test mode: skipping tracking update for order #%s", order.id)
            return SUCCESS

        self._order_store.update_metadata(order.id, tracking.to_metadata())
        logger.info(
            "Order #%s tracking set to %s %s",
            order.id,
            tracking.tracking_provider or tracking.custom_tracking_provider,
            tracking.tracking_number,
        )

        if status_update is not None:
            self._statuses.apply(order, status_update)

        return SUCCESS
