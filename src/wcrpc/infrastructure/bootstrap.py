"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The method table is
built here once and handed to the transport.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wcrpc.application.dispatcher import Handler, RequestDispatcher
from wcrpc.application.events import CallNotifier, log_call
from wcrpc.application.registrar import MethodRegistrar
from wcrpc.application.update_order_status import UpdateOrderStatusHandler
from wcrpc.application.update_order_tracking import UpdateOrderTrackingHandler
from wcrpc.domain.repository.identity_provider import IdentityProvider
from wcrpc.domain.repository.order_store import OrderStore
from wcrpc.domain.repository.status_vocabulary import StatusVocabulary
from wcrpc.infrastructure.config import Settings
from wcrpc.infrastructure.persistence.json_identity_provider import (
    JsonIdentityProvider,
)
from wcrpc.infrastructure.persistence.json_order_store import JsonOrderStore
from wcrpc.infrastructure.persistence.json_status_vocabulary import (
    JsonStatusVocabulary,
)
from wcrpc.infrastructure.transport.endpoint import XmlRpcEndpoint


def order_store(settings: Settings) -> JsonOrderStore:
    return JsonOrderStore(settings.data_dir / "orders.json")


def identity_provider(settings: Settings) -> JsonIdentityProvider:
    return JsonIdentityProvider(settings.data_dir / "users.json")


def status_vocabulary(settings: Settings) -> JsonStatusVocabulary:
    return JsonStatusVocabulary(settings.data_dir / "statuses.json")


def handlers(store: OrderStore, vocabulary: StatusVocabulary) -> dict[str, Handler]:
    """The registration table: published method name -> handler."""
    return {
        "updateOrderTracking": UpdateOrderTrackingHandler(store, vocabulary).handle,
        "updateOrderStatus": UpdateOrderStatusHandler(store, vocabulary).handle,
    }


def build_endpoint(
    settings: Settings,
    store: OrderStore,
    identities: IdentityProvider,
    vocabulary: StatusVocabulary,
    host_methods: Mapping[str, Any] | None = None,
) -> XmlRpcEndpoint:
    notifier = CallNotifier()
    notifier.subscribe(log_call)

    dispatcher = RequestDispatcher(
        handlers(store, vocabulary),
        identities,
        notifier=notifier,
        namespace=settings.namespace,
        required_capability=settings.required_capability,
    )
    registrar = MethodRegistrar(settings.namespace)
    methods = registrar.merge(
        host_methods or {},
        registrar.build(dispatcher.handler_names, dispatcher.dispatch),
    )
    return XmlRpcEndpoint(methods)


def endpoint(settings: Settings) -> XmlRpcEndpoint:
    return build_endpoint(
        settings,
        order_store(settings),
        identity_provider(settings),
        status_vocabulary(settings),
    )
