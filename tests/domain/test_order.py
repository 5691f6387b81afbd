"""Unit tests for the Order aggregate."""

import pytest

from wcrpc.domain.exceptions import ValidationError
from wcrpc.domain.model.order import CUSTOM_ORDER_NUMBER_KEY, Order


def _make_order(status: str = "processing") -> Order:
    return Order(id=1, status=status)


class TestOrderMetadata:

    def test_update_sets_values(self):
        order = _make_order()
        order.update_metadata({"_tracking_number": "1Z999", "_date_shipped": 1705276800})
        assert order.metadata == {"_tracking_number": "1Z999", "_date_shipped": 1705276800}

    def test_update_replaces_existing_value(self):
        order = _make_order()
        order.update_metadata({"_tracking_number": "A"})
        order.update_metadata({"_tracking_number": "B"})
        assert order.metadata["_tracking_number"] == "B"

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError, match="Metadata key"):
            _make_order().update_metadata({"": "x"})

    def test_custom_order_number_read_from_metadata(self):
        order = _make_order()
        assert order.custom_order_number is None
        order.update_metadata({CUSTOM_ORDER_NUMBER_KEY: 5001})
        assert order.custom_order_number == "5001"


class TestOrderStatusTransition:

    def test_transition_changes_status_and_records_note(self):
        order = _make_order("processing")
        assert order.transition_to("completed", "Shipped via UPS.") is True
        assert order.status == "completed"
        assert order.notes[-1].text == (
            "Shipped via UPS. Order status changed from processing to completed."
        )

    def test_transition_without_message(self):
        order = _make_order("pending")
        order.transition_to("on-hold")
        assert order.notes[-1].text == "Order status changed from pending to on-hold."

    def test_same_status_is_a_no_op(self):
        order = _make_order("completed")
        assert order.transition_to("completed", "again") is False
        assert order.notes == []

    def test_blank_status_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            _make_order().transition_to("  ")
