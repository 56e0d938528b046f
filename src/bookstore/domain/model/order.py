"""Order aggregate.

An Order is written once, after payment and stock reservation have both
succeeded.  Its items are snapshots: later catalogue edits never change
what a customer was charged.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderItem:
    """Title and price of a book as they were at purchase time."""

    book_id: int
    title: str
    quantity: Quantity
    unit_price: Money  # copied from the Book, never referenced

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def snapshot(book: Book, quantity: int) -> OrderItem:
        return OrderItem(
            book_id=book.id,
            title=book.title,
            quantity=Quantity(quantity),
            unit_price=book.price,
        )


def generate_order_number() -> str:
    """Unique, human-readable order number, e.g. ``ORD-20261019-3F9A1C2B``."""
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    return f"ORD-{today}-{uuid.uuid4().hex[:8].upper()}"


@dataclass
class Order:
    """Aggregate root for a completed purchase.

    Use ``Order.create()`` for new orders.  The ``__init__`` is kept simple
    so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: int | None
    order_number: str
    user_id: int
    items: list[OrderItem]
    payment_reference: str = ""
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        user_id: int,
        items: list[OrderItem],
        payment_reference: str,
        order_number: str | None = None,
    ) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        book_ids = [item.book_id for item in items]
        if len(set(book_ids)) != len(book_ids):
            raise ValidationError("Order contains the same book more than once")
        return Order(
            id=None,
            order_number=order_number or generate_order_number(),
            user_id=user_id,
            items=list(items),
            payment_reference=payment_reference,
        )

    @property
    def total_price(self) -> Money:
        total = Money.zero()
        for item in self.items:
            total = total + item.line_total
        return total

    @property
    def quantities(self) -> dict[int, int]:
        return {item.book_id: item.quantity.value for item in self.items}
