"""Shopping cart aggregate: one per user, keyed by book."""

from __future__ import annotations

from dataclasses import dataclass, field

from bookstore.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartItem:
    book_id: int
    quantity: Quantity


@dataclass
class ShoppingCart:
    """The books a single user has selected, at most one line per book."""

    user_id: int
    lines: dict[int, CartItem] = field(default_factory=dict)

    def put(self, book_id: int, quantity: int) -> CartItem:
        """Insert or replace the line for *book_id*."""
        item = CartItem(book_id=book_id, quantity=Quantity(quantity))
        self.lines[book_id] = item
        return item

    def remove(self, book_id: int) -> bool:
        return self.lines.pop(book_id, None) is not None

    def clear(self) -> None:
        self.lines.clear()

    def items(self) -> list[CartItem]:
        return sorted(self.lines.values(), key=lambda item: item.book_id)

    def demand(self) -> dict[int, int]:
        """book_id -> requested quantity."""
        return {item.book_id: item.quantity.value for item in self.lines.values()}

    @property
    def is_empty(self) -> bool:
        return not self.lines
