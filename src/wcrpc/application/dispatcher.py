"""Request dispatcher.

Every registered method lands here. A call is handled in four steps, each
returning an Outcome that is checked before moving on:

1. authenticate the ``username``/``password`` pair,
2. make sure the identity holds the required capability,
3. resolve ``<namespace>.<method>`` to a registered handler,
4. notify listeners and run the handler.

No handler code runs unless steps 1 and 2 succeeded, and no exception
leaves ``handle``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from wcrpc.application.dto import CallRequest
from wcrpc.application.events import CallNotifier
from wcrpc.application.outcome import Failure, Outcome, Success
from wcrpc.application.registrar import DEFAULT_NAMESPACE
from wcrpc.domain.exceptions import (
    AuthorizationError,
    MethodNotAllowedError,
    RpcError,
)
from wcrpc.domain.model.value_objects import Identity
from wcrpc.domain.repository.identity_provider import IdentityProvider

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Any]

DEFAULT_CAPABILITY = "edit_posts"


class RequestDispatcher:

    def __init__(
        self,
        handlers: Mapping[str, Handler],
        identity_provider: IdentityProvider,
        notifier: CallNotifier | None = None,
        namespace: str = DEFAULT_NAMESPACE,
        required_capability: str = DEFAULT_CAPABILITY,
    ) -> None:
        self._handlers = dict(handlers)
        self._identity_provider = identity_provider
        self._notifier = notifier or CallNotifier()
        self._namespace = namespace
        self._required_capability = required_capability

    @property
    def handler_names(self) -> list[str]:
        return sorted(self._handlers)

    def dispatch(self, method_name: str, params: Mapping[str, Any]) -> Outcome:
        """Entry point handed to the transport for every registered name."""
        return self.handle(CallRequest(method_name, params))

    def handle(self, call: CallRequest) -> Outcome:
        outcome = self._authenticate(call)
        if outcome.ok:
            outcome = self._authorize(outcome.value)
        if outcome.ok:
            outcome = self._resolve(call.method_name)
        if outcome.ok:
            outcome = self._invoke(outcome.value, call)

        if outcome.ok:
            logger.info("%s succeeded", call.method_name)
        else:
            logger.warning(
                "%s failed: [%s] %s", call.method_name, outcome.code, outcome.message
            )
        return outcome

    # --- Steps ----------------------------------------------------------------

    def _authenticate(self, call: CallRequest) -> Outcome:
        return _capture(self._identity_provider.authenticate, call.username, call.password)

    def _authorize(self, identity: Identity) -> Outcome:
        if not identity.has_capability(self._required_capability):
            return Failure.from_error(
                AuthorizationError("You are not allowed access to details about orders.")
            )
        return Success(identity)

    def _resolve(self, method_name: str) -> Outcome:
        namespace, _, name = method_name.partition(".")
        handler = self._handlers.get(name) if namespace == self._namespace else None
        if handler is None:
            requested = name or method_name
            return Failure.from_error(
                MethodNotAllowedError(f'Method "{requested}" not allowed')
            )
        return Success(handler)

    def _invoke(self, handler: Handler, call: CallRequest) -> Outcome:
        def run() -> Any:
            self._notifier.notify(call.method_name)
            return handler(call.params)

        return _capture(run)


def _capture(func: Callable[..., Any], *args: Any) -> Outcome:
    """Run *func*, turning its result or error into an Outcome."""
    try:
        return Success(func(*args))
    except RpcError as exc:
        return Failure.from_error(exc)
    except Exception as exc:
        logger.exception("Unexpected error while handling XML-RPC call")
        return Failure(code=500, message=f"Internal error: {exc}")
