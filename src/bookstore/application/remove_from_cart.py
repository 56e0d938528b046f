"""Application service: Remove From Cart use case."""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.service.book_ledger import BookLedger
from bookstore.domain.service.cart_session import CartSession


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository, ledger: BookLedger) -> None:
        self._cart_repo = cart_repo
        self._ledger = ledger

    def handle(self, user_id: int, book_id: int) -> None:
        session = CartSession(user_id, self._cart_repo, self._ledger)
        if book_id not in session.demand():
            raise EntityNotFoundError(f"Book #{book_id} is not in the cart")
        session.remove(book_id)
