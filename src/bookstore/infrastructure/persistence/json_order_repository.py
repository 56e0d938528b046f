"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from bookstore.domain.model.order import Order, OrderItem
from bookstore.domain.model.value_objects import Money, Quantity
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_id(self._file.read())

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_by_order_number(self, order_number: str) -> Order | None:
        for raw in self._file.read():
            if raw["order_number"] == order_number:
                return self._to_domain(raw)
        return None

    def list_by_user(self, user_id: int) -> list[Order]:
        return [o for o in self.list_all() if o.user_id == user_id]

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, order: Order) -> None:
        def upsert(records: list[dict]) -> None:
            # ID is assigned under the file lock so concurrent checkouts
            # never share one.
            if order.id is None:
                order.id = self._next_id(records)
            for i, raw in enumerate(records):
                if raw["id"] == order.id:
                    records[i] = self._to_raw(order)
                    return
            records.append(self._to_raw(order))

        self._file.update(upsert)

    def delete(self, order_id: int) -> bool:
        def remove(records: list[dict]) -> bool:
            before = len(records)
            records[:] = [r for r in records if r["id"] != order_id]
            return len(records) != before

        return self._file.update(remove)

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        return max((r["id"] for r in records), default=0) + 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "user_id": order.user_id,
            "order_date": order.order_date.isoformat(),
            "payment_reference": order.payment_reference,
            "total_price": str(order.total_price.amount),
            "items": [
                {
                    "book_id": item.book_id,
                    "title": item.title,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                book_id=i["book_id"],
                title=i["title"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            user_id=raw["user_id"],
            items=items,
            payment_reference=raw.get("payment_reference", ""),
            order_date=datetime.fromisoformat(raw["order_date"]),
        )
