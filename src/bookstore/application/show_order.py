"""Application service: Show Order use case (query)."""

from __future__ import annotations

from bookstore.application.dto import OrderDTO
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_ref: int | str) -> OrderDTO:
        """Look an order up by numeric ID or by order number."""
        if isinstance(order_ref, int):
            order = self._order_repo.get_by_id(order_ref)
        else:
            order = self._order_repo.get_by_order_number(order_ref)
        if order is None:
            raise EntityNotFoundError(f"Order {order_ref} not found")
        return OrderDTO.from_order(order)
