"""XML-RPC endpoint: the object the standard-library server dispatches to.

It owns the merged method table. Entry points are called with the method
name and the caller's struct; a ``Failure`` outcome is raised as an
XML-RPC fault carrying the same code and message.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from xmlrpc.client import Fault

from wcrpc.application.outcome import Failure, Success
from wcrpc.application.registrar import EntryPoint

logger = logging.getLogger(__name__)

# Codes from the XML-RPC fault code interoperability list.
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class XmlRpcEndpoint:

    def __init__(self, methods: Mapping[str, EntryPoint]) -> None:
        self._methods = dict(methods)

    def _listMethods(self) -> list[str]:
        return sorted(self._methods)

    def _dispatch(self, method: str, params: tuple[Any, ...]) -> Any:
        entry_point = self._methods.get(method)
        if entry_point is None:
            logger.warning("Unknown XML-RPC method %s", method)
            raise Fault(
                METHOD_NOT_FOUND,
                f"server error. requested method {method} does not exist.",
            )

        result = entry_point(method, _single_struct(method, params))

        if isinstance(result, Failure):
            raise Fault(result.code, result.message)
        if isinstance(result, Success):
            return result.value
        return result


def _single_struct(method: str, params: tuple[Any, ...]) -> Mapping[str, Any]:
    """Unwrap the one struct argument every method takes."""
    if not params:
        return {}
    if len(params) == 1 and isinstance(params[0], Mapping):
        return params[0]
    raise Fault(INVALID_PARAMS, f"{method} expects a single struct parameter")
