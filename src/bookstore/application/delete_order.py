"""Application service: Delete Order use case (admin).

Removes the order record only.  Stock and sold counters are untouched:
the copies were sold.
"""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.repository.order_repository import OrderRepository


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        if not self._order_repo.delete(order_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
