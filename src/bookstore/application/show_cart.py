"""Application service: Show Cart use case (query).

Prices shown here are current catalogue prices; the order placed at
checkout snapshots whatever the price is at that moment.
"""

from __future__ import annotations

from bookstore.application.dto import CartDTO, CartLineDTO
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository

UNAVAILABLE = "(no longer available)"


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, book_repo: BookRepository) -> None:
        self._cart_repo = cart_repo
        self._book_repo = book_repo

    def handle(self, user_id: int) -> CartDTO:
        cart = self._cart_repo.get(user_id)
        lines: list[CartLineDTO] = []
        total = Money.zero()

        for item in cart.items() if cart is not None else []:
            book = self._book_repo.get_by_id(item.book_id)
            qty = item.quantity.value
            if book is None:
                lines.append(CartLineDTO(item.book_id, UNAVAILABLE, qty, "-", "-"))
                continue
            line_total = book.price * qty
            total = total + line_total
            lines.append(
                CartLineDTO(
                    book_id=book.id,
                    title=book.title,
                    quantity=qty,
                    unit_price=str(book.price),
                    line_total=str(line_total),
                )
            )

        return CartDTO(user_id=user_id, lines=lines, total=str(total))
