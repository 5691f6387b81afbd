"""Unit tests for the status transition domain service."""

import pytest

from wcrpc.domain.exceptions import ValidationError
from wcrpc.domain.model.value_objects import StatusUpdate
from wcrpc.domain.service.status_transition_service import StatusTransitionService
from tests.fakes import FakeOrderStore, FakeStatusVocabulary, make_order


def _setup(status: str = "processing"):
    order = make_order(1, status=status)
    store = FakeOrderStore([order])
    vocabulary = FakeStatusVocabulary()
    return order, store, vocabulary, StatusTransitionService(store, vocabulary)


class TestValidate:

    def test_known_status_accepted(self):
        _, _, _, svc = _setup()
        svc.validate("completed")

    def test_unknown_status_rejected(self):
        _, _, _, svc = _setup()
        with pytest.raises(ValidationError, match='"shipped" is not a valid order status.'):
            svc.validate("shipped")

    def test_vocabulary_fetched_on_every_check(self):
        _, _, vocabulary, svc = _setup()
        svc.validate("completed")
        vocabulary.statuses.add("shipped")
        svc.validate("shipped")
        assert vocabulary.calls == 2


class TestApply:

    def test_different_status_transitions(self):
        order, store, _, svc = _setup("processing")
        assert svc.apply(order, StatusUpdate("completed", "done")) is True
        assert store.transitions == [("transition_status", 1, "completed", "done")]
        assert order.status == "completed"

    def test_same_status_skips_store(self):
        order, store, _, svc = _setup("completed")
        assert svc.apply(order, StatusUpdate("completed")) is False
        assert store.writes == []
