"""Application service: Add To Cart use case.

Sets (not increments) the quantity of a book in the user's cart.  The
stock check made here is only a hint; checkout makes the binding one.
"""

from __future__ import annotations

from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.service.book_ledger import BookLedger
from bookstore.domain.service.cart_session import CartSession


class AddToCartHandler:

    def __init__(self, cart_repo: CartRepository, ledger: BookLedger) -> None:
        self._cart_repo = cart_repo
        self._ledger = ledger

    def handle(self, user_id: int, book_id: int, quantity: int) -> None:
        session = CartSession(user_id, self._cart_repo, self._ledger)
        session.add_or_update(book_id, quantity)
