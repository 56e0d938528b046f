"""Application service: Clear Cart use case (e.g. on logout)."""

from __future__ import annotations

from bookstore.domain.repository.cart_repository import CartRepository


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: int) -> None:
        self._cart_repo.delete(user_id)
