"""JSON-file-backed implementation of OrderStore."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from wcrpc.domain.exceptions import EntityNotFoundError
from wcrpc.domain.model.order import CUSTOM_ORDER_NUMBER_KEY, Order, OrderNote
from wcrpc.domain.repository.order_store import OrderStore


class JsonOrderStore(OrderStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderStore interface -------------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_by_custom_number(self, order_number: str) -> Order | None:
        for raw in self._load_raw():
            if not raw.get("published", True):
                continue
            value = raw.get("metadata", {}).get(CUSTOM_ORDER_NUMBER_KEY)
            if value is not None and str(value) == order_number:
                return self._to_domain(raw)
        return None

    def update_metadata(self, order_id: int, values: dict[str, str | int]) -> None:
        order = self._require(order_id)
        order.update_metadata(values)
        self.save(order)

    def transition_status(self, order_id: int, new_status: str, note: str = "") -> None:
        order = self._require(order_id)
        if order.transition_to(new_status, note):
            self.save(order)

    # --- Housekeeping ---------------------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    def _require(self, order_id: int) -> Order:
        order = self.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "status": order.status,
            "published": order.published,
            "created_at": order.created_at.isoformat(),
            "metadata": dict(order.metadata),
            "notes": [
                {"text": note.text, "created_at": note.created_at.isoformat()}
                for note in order.notes
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=raw["id"],
            status=raw["status"],
            published=raw.get("published", True),
            metadata=dict(raw.get("metadata", {})),
            notes=[
                OrderNote(n["text"], datetime.fromisoformat(n["created_at"]))
                for n in raw.get("notes", [])
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
