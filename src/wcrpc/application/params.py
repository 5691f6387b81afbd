"""Helpers for reading the raw parameter struct of a call."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from wcrpc.domain.exceptions import ValidationError

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_FALSY_STRINGS = {"", "0"}


def require_params(params: Mapping[str, Any], *names: str) -> None:
    """Raise ValidationError naming the first parameter that is not set.

    A parameter counts as set when present and not None; empty strings are
    accepted.
    """
    for name in names:
        if params.get(name) is None:
            raise ValidationError(f'Missing required parameter, "{name}"')


def optional_param(params: Mapping[str, Any], name: str) -> Any | None:
    """Return the parameter, or None when it is missing or empty."""
    value = params.get(name)
    if value is None or value == "":
        return None
    return value


def is_test_mode(params: Mapping[str, Any]) -> bool:
    value = params.get("test_mode")
    if isinstance(value, str):
        return value.strip() not in _FALSY_STRINGS
    return bool(value)


def clean_text(value: Any) -> str:
    """Strip markup and collapse whitespace before a value is stored."""
    text = _TAG_RE.sub("", str(value))
    return _WHITESPACE_RE.sub(" ", text).strip()
