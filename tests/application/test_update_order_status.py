"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from wcrpc.application.update_order_status import UpdateOrderStatusHandler
from wcrpc.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeOrderStore, FakeStatusVocabulary, make_order


def _setup(status: str = "processing", vocabulary=None):
    store = FakeOrderStore([make_order(123, status=status, number="WC-1001")])
    handler = UpdateOrderStatusHandler(store, vocabulary or FakeStatusVocabulary())
    return store, handler


def _params(**overrides):
    params = {"username": "u", "password": "p", "order_number": "123", "order_status": "completed"}
    params.update(overrides)
    return params


class TestUpdateOrderStatusHappyPath:

    def test_status_changed(self):
        store, handler = _setup()

        assert handler.handle(_params(message="Delivered")) == "OK"

        order = store.get_by_id(123)
        assert order.status == "completed"
        assert "Delivered" in order.notes[-1].text
        assert store.transitions == [("transition_status", 123, "completed", "Delivered")]

    def test_by_custom_order_number(self):
        store, handler = _setup()
        handler.handle(_params(order_number="WC-1001", order_status="on-hold"))
        assert store.get_by_id(123).status == "on-hold"

    def test_second_identical_update_does_not_transition(self):
        store, handler = _setup()
        handler.handle(_params())
        handler.handle(_params())
        assert len(store.transitions) == 1

    def test_already_current_status_is_a_no_op(self):
        store, handler = _setup(status="completed")
        assert handler.handle(_params()) == "OK"
        assert store.writes == []

    def test_status_added_to_vocabulary_is_accepted(self):
        vocabulary = FakeStatusVocabulary()
        store, handler = _setup(vocabulary=vocabulary)
        vocabulary.statuses.add("shipped")
        handler.handle(_params(order_status="shipped"))
        assert store.get_by_id(123).status == "shipped"


class TestUpdateOrderStatusTestMode:

    def test_test_mode_writes_nothing(self):
        store, handler = _setup()
        assert handler.handle(_params(test_mode=True)) == "OK"
        assert store.get_by_id(123).status == "processing"
        assert store.writes == []

    def test_test_mode_string_false_is_not_test_mode(self):
        store, handler = _setup()
        handler.handle(_params(test_mode="0"))
        assert store.get_by_id(123).status == "completed"


class TestUpdateOrderStatusValidation:

    @pytest.mark.parametrize("missing", ["order_number", "order_status"])
    def test_missing_required_param_rejected(self, missing):
        store, handler = _setup()
        params = _params()
        del params[missing]

        with pytest.raises(ValidationError, match=f'"{missing}"') as exc_info:
            handler.handle(params)

        assert exc_info.value.code == 500
        assert store.writes == []

    def test_invalid_status_rejected(self):
        store, handler = _setup()
        with pytest.raises(ValidationError, match='"shipped" is not a valid') as exc_info:
            handler.handle(_params(order_status="shipped"))
        assert exc_info.value.code == 500
        assert store.get_by_id(123).status == "processing"

    def test_unknown_order_rejected(self):
        _, handler = _setup()
        with pytest.raises(EntityNotFoundError, match='"999"') as exc_info:
            handler.handle(_params(order_number="999"))
        assert exc_info.value.code == 404

    @pytest.mark.parametrize("reference", ["", "   ", "²"])
    def test_unresolvable_reference_not_found(self, reference):
        store, handler = _setup()
        with pytest.raises(EntityNotFoundError, match="not found") as exc_info:
            handler.handle(_params(order_number=reference))
        assert exc_info.value.code == 404
        assert store.writes == []
