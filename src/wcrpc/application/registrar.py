"""Builds the XML-RPC method table.

Handlers are registered explicitly by name. Each one is published as
``<namespace>.<name>`` and every published name points at the same
dispatch entry point, which looks the handler up again from the name the
transport reports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "wc"

EntryPoint = Callable[[str, Mapping[str, Any]], Any]


class MethodRegistrar:

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        if not namespace or "." in namespace:
            raise ValueError(f"Invalid method namespace {namespace!r}")
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def qualified_name(self, name: str) -> str:
        return f"{self._namespace}.{name}"

    def build(self, names: list[str], entry_point: EntryPoint) -> dict[str, EntryPoint]:
        """Map ``<namespace>.<name>`` to *entry_point* for every name."""
        return {self.qualified_name(name): entry_point for name in sorted(names)}

    def merge(
        self,
        host_methods: Mapping[str, Any],
        methods: Mapping[str, EntryPoint],
    ) -> dict[str, Any]:
        """Return a new table holding *host_methods* plus *methods*.

        Entries of *host_methods* under other names are left untouched.
        """
        merged = dict(host_methods)
        for name, entry_point in methods.items():
            if name in merged and merged[name] is not entry_point:
                logger.warning("Replacing existing XML-RPC method %s", name)
            merged[name] = entry_point
            logger.debug("Registered XML-RPC method %s", name)
        return merged
