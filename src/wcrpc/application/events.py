"""Call notifications.

Listeners are told the full method name of every call that passed
authentication, just before its handler runs. Return values are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

CallListener = Callable[[str], None]


class CallNotifier:

    def __init__(self) -> None:
        self._listeners: list[CallListener] = []

    def subscribe(self, listener: CallListener) -> None:
        self._listeners.append(listener)

    def notify(self, method_name: str) -> None:
        for listener in self._listeners:
            listener(method_name)


def log_call(method_name: str) -> None:
    logger.info("xmlrpc_call %s", method_name)
