"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from pathlib import Path

from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CartRepository interface ---------------------------------------------

    def get(self, user_id: int) -> ShoppingCart | None:
        for raw in self._file.read():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def save(self, cart: ShoppingCart) -> None:
        def upsert(records: list[dict]) -> None:
            for i, raw in enumerate(records):
                if raw["user_id"] == cart.user_id:
                    records[i] = self._to_raw(cart)
                    return
            records.append(self._to_raw(cart))

        self._file.update(upsert)

    def delete(self, user_id: int) -> None:
        def remove(records: list[dict]) -> None:
            records[:] = [r for r in records if r["user_id"] != user_id]

        self._file.update(remove)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: ShoppingCart) -> dict:
        return {
            "user_id": cart.user_id,
            "items": [
                {"book_id": item.book_id, "quantity": item.quantity.value}
                for item in cart.items()
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> ShoppingCart:
        cart = ShoppingCart(user_id=raw["user_id"])
        for item in raw["items"]:
            cart.put(item["book_id"], item["quantity"])
        return cart
