"""Integration tests for the UpdateOrderTracking use case."""

import pytest

from wcrpc.application.update_order_tracking import UpdateOrderTrackingHandler
from wcrpc.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeOrderStore, FakeStatusVocabulary, make_order


def _setup(*orders):
    store = FakeOrderStore(list(orders) or [make_order(123)])
    handler = UpdateOrderTrackingHandler(store, FakeStatusVocabulary())
    return store, handler


def _params(**overrides):
    params = {
        "username": "u",
        "password": "p",
        "order_number": "123",
        "tracking_provider": "ups",
        "tracking_number": "1Z999",
    }
    params.update(overrides)
    return params


class TestUpdateOrderTrackingHappyPath:

    def test_writes_provider_and_number(self):
        store, handler = _setup()

        assert handler.handle(_params()) == "OK"

        order = store.get_by_id(123)
        assert order.metadata == {"_tracking_provider": "ups", "_tracking_number": "1Z999"}
        assert order.status == "processing"

    def test_optional_fields_written_when_supplied(self):
        store, handler = _setup()

        handler.handle(
            _params(
                tracking_provider="",
                date_shipped="2024-01-15",
                custom_tracking_provider="Local Courier",
                custom_tracking_link="https://courier.example/t/1Z999",
            )
        )

        metadata = store.get_by_id(123).metadata
        assert metadata["_date_shipped"] == 1705276800
        assert metadata["_custom_tracking_provider"] == "Local Courier"
        assert metadata["_custom_tracking_link"] == "https://courier.example/t/1Z999"

    def test_empty_optional_fields_not_written(self):
        store, handler = _setup()
        handler.handle(_params(date_shipped="", custom_tracking_link=""))
        assert "_date_shipped" not in store.get_by_id(123).metadata
        assert "_custom_tracking_link" not in store.get_by_id(123).metadata

    def test_epoch_ship_date_written(self):
        store, handler = _setup()
        handler.handle(_params(date_shipped="1970-01-01"))
        assert store.get_by_id(123).metadata["_date_shipped"] == 0

    def test_values_are_cleaned(self):
        store, handler = _setup()
        handler.handle(_params(tracking_number="  <b>1Z   999</b> "))
        assert store.get_by_id(123).metadata["_tracking_number"] == "1Z 999"

    def test_resolves_custom_order_number(self):
        store, handler = _setup(make_order(42, number="WC-1001"))
        handler.handle(_params(order_number="WC-1001"))
        assert store.get_by_id(42).metadata["_tracking_number"] == "1Z999"

    def test_order_status_also_applied(self):
        store, handler = _setup()
        handler.handle(_params(order_status="completed", message="Shipped."))

        order = store.get_by_id(123)
        assert order.status == "completed"
        assert store.transitions == [("transition_status", 123, "completed", "Shipped.")]


class TestUpdateOrderTrackingTestMode:

    def test_test_mode_writes_nothing(self):
        store, handler = _setup()
        assert handler.handle(_params(test_mode=True, order_status="completed")) == "OK"
        assert store.writes == []

    def test_test_mode_still_resolves_order(self):
        _, handler = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle(_params(order_number="999", test_mode=True))


class TestUpdateOrderTrackingValidation:

    @pytest.mark.parametrize("missing", ["order_number", "tracking_provider", "tracking_number"])
    def test_missing_required_param_rejected(self, missing):
        store, handler = _setup()
        params = _params()
        del params[missing]

        with pytest.raises(ValidationError, match=f'"{missing}"') as exc_info:
            handler.handle(params)

        assert exc_info.value.code == 500
        assert store.writes == []

    def test_unknown_order_rejected(self):
        store, handler = _setup()
        with pytest.raises(EntityNotFoundError, match='"999"') as exc_info:
            handler.handle(_params(order_number="999"))
        assert exc_info.value.code == 404
        assert store.writes == []

    def test_invalid_status_rejected_before_any_write(self):
        store, handler = _setup()
        with pytest.raises(ValidationError, match='"shipped" is not a valid order status'):
            handler.handle(_params(order_status="shipped"))
        assert store.writes == []

    def test_invalid_ship_date_rejected_before_any_write(self):
        store, handler = _setup()
        with pytest.raises(ValidationError, match="shipping date"):
            handler.handle(_params(date_shipped="next tuesday"))
        assert store.writes == []
