"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.book import Book
from bookstore.domain.model.order import Order


@dataclass(frozen=True)
class BookDTO:
    id: int
    title: str
    author: str
    price: str  # formatted, e.g. "$9.99"
    physical_copies: int
    sold_copies: int

    @staticmethod
    def from_book(book: Book) -> BookDTO:
        return BookDTO(
            id=book.id,
            title=book.title,
            author=book.author,
            price=str(book.price),
            physical_copies=book.physical_copies,
            sold_copies=book.sold_copies,
        )


@dataclass(frozen=True)
class CartLineDTO:
    book_id: int
    title: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    user_id: int
    lines: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class PaymentDetails:
    """Input: card fields as typed by the shopper."""

    card_number: str
    card_holder_name: str
    expiry_date: str
    cvv: str


@dataclass(frozen=True)
class OrderItemDTO:
    book_id: int
    title: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a persisted order, with everything an export needs."""

    id: int
    order_number: str
    user_id: int
    order_date: str
    items: list[OrderItemDTO]
    total_price: str
    payment_reference: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,
            user_id=order.user_id,
            order_date=order.order_date.strftime("%Y-%m-%d %H:%M UTC"),
            items=[
                OrderItemDTO(
                    book_id=item.book_id,
                    title=item.title,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total_price=str(order.total_price),
            payment_reference=order.payment_reference,
        )
