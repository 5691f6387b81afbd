"""Data Transfer Objects: plain containers that cross layer boundaries.

A CallRequest carries one inbound XML-RPC call from the transport to the
dispatcher. It is built once per call and never modified afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# Returned by every handler on success.
SUCCESS = "OK"


@dataclass(frozen=True)
class CallRequest:
    """Input: the full method name and the caller's parameter struct."""

    method_name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # copy, then expose read-only
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def username(self) -> str | None:
        return self.params.get("username")

    @property
    def password(self) -> str | None:
        return self.params.get("password")
