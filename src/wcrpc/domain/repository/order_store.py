"""Abstract store for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The shop platform owns the orders; concrete stores
(JSON, in-memory) live in the infrastructure layer or in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wcrpc.domain.model.order import Order


class OrderStore(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_by_custom_number(self, order_number: str) -> Order | None:
        """Return the single published order whose custom order number
        equals *order_number*, or None."""

    @abstractmethod
    def update_metadata(self, order_id: int, values: dict[str, str | int]) -> None:
        """Write *values* onto the order's metadata."""

    @abstractmethod
    def transition_status(self, order_id: int, new_status: str, note: str = "") -> None:
        """Move the order to *new_status*, attaching *note* to the change."""
