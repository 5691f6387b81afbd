"""Order aggregate.

A minimal stand-in for the order record owned by the shop. The service never
creates orders on behalf of callers; it only reads them, writes tracking
metadata and moves them between statuses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from wcrpc.domain.exceptions import ValidationError

# Metadata key holding the caller-visible order number.
CUSTOM_ORDER_NUMBER_KEY = "_order_number"


@dataclass(frozen=True)
class OrderNote:
    """A note attached to the order history."""

    text: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Order:
    """Aggregate root for shop orders.

    ``metadata`` is the free-form key/value store the shop keeps per order;
    tracking details and the custom order number live there.
    """

    id: int
    status: str
    published: bool = True
    metadata: dict[str, str | int] = field(default_factory=dict)
    notes: list[OrderNote] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def custom_order_number(self) -> str | None:
        value = self.metadata.get(CUSTOM_ORDER_NUMBER_KEY)
        return None if value is None else str(value)

    # --- Mutations ------------------------------------------------------------

    def update_metadata(self, values: dict[str, str | int]) -> None:
        """Set each key in *values*, replacing any previous value."""
        for key, value in values.items():
            if not key:
                raise ValidationError("Metadata key cannot be empty")
            self.metadata[key] = value

    def transition_to(self, new_status: str, note: str = "") -> bool:
        """Move the order to *new_status*, recording the change as a note.

        Returns False (and records nothing) when the order is already in
        that status.
        """
        if not new_status or not new_status.strip():
            raise ValidationError("Order status cannot be empty")
        if new_status == self.status:
            return False

        old_status = self.status
        self.status = new_status
        change = f"Order status changed from {old_status} to {new_status}."
        self.notes.append(OrderNote(f"{note.strip()} {change}".strip()))
        return True
