"""Application service: List Orders use case (query)."""

from __future__ import annotations

from bookstore.application.dto import OrderDTO
from bookstore.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: int | None = None) -> list[OrderDTO]:
        """A user's order history, or every order when *user_id* is None."""
        if user_id is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_by_user(user_id)
        return [OrderDTO.from_order(o) for o in orders]
