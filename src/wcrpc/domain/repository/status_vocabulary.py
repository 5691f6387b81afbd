"""Abstract source of the valid order statuses.

The set is configurable by the shop, so callers must fetch it on every
use instead of caching it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StatusVocabulary(ABC):

    @abstractmethod
    def list_valid_statuses(self) -> set[str]:
        """Return every status an order may currently be moved to."""
