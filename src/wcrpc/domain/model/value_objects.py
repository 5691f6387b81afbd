"""Value Objects describing what a caller asked for.

They are immutable and are built from the raw call parameters once
validation has passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

from wcrpc.domain.exceptions import ValidationError

TRACKING_PROVIDER_KEY = "_tracking_provider"
TRACKING_NUMBER_KEY = "_tracking_number"
DATE_SHIPPED_KEY = "_date_shipped"
CUSTOM_TRACKING_PROVIDER_KEY = "_custom_tracking_provider"
CUSTOM_TRACKING_LINK_KEY = "_custom_tracking_link"


@dataclass(frozen=True)
class OrderReference:
    """Either a numeric order ID or a custom order number.

    The two cannot be told apart up front: ``"1001"`` may be an ID or a
    custom number, so resolution tries the ID first.
    """

    value: str

    def as_id(self) -> int | None:
        """Return the reference as an order ID, or None if it is not numeric."""
        candidate = self.value.strip()
        if candidate.isascii() and candidate.isdigit():
            return int(candidate)
        return None

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: str | int) -> OrderReference:
        return OrderReference(str(raw))


def parse_ship_date(raw: str) -> int:
    """Convert a ``YYYY-MM-DD`` date into a unix timestamp (UTC midnight)."""
    try:
        day = date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ValidationError(
            f'"{raw}" is not a valid shipping date, expected YYYY-MM-DD'
        ) from exc
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


@dataclass(frozen=True)
class TrackingUpdate:
    """Shipment tracking details to be written onto an order."""

    tracking_provider: str
    tracking_number: str
    date_shipped: int | None = None
    custom_tracking_provider: str | None = None
    custom_tracking_link: str | None = None

    def to_metadata(self) -> dict[str, str | int]:
        """Project onto order metadata.

        Provider and number are always written; the optional fields only
        when they were supplied.
        """
        metadata: dict[str, str | int] = {
            TRACKING_PROVIDER_KEY: self.tracking_provider,
            TRACKING_NUMBER_KEY: self.tracking_number,
        }
        if self.date_shipped is not None:
            metadata[DATE_SHIPPED_KEY] = self.date_shipped
        if self.custom_tracking_provider is not None:
            metadata[CUSTOM_TRACKING_PROVIDER_KEY] = self.custom_tracking_provider
        if self.custom_tracking_link is not None:
            metadata[CUSTOM_TRACKING_LINK_KEY] = self.custom_tracking_link
        return metadata


@dataclass(frozen=True)
class StatusUpdate:
    """A requested status transition with an optional note."""

    status: str
    message: str = ""

    def __post_init__(self) -> None:
        if not self.status.strip():
            raise ValidationError("Order status cannot be empty")


@dataclass(frozen=True)
class Identity:
    """An authenticated caller and the capabilities its role grants."""

    username: str
    capabilities: frozenset[str] = frozenset()

    def has_capability(self, name: str) -> bool:
        return name in self.capabilities
