"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Return an order by its order number, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[Order]:
        """Return a user's orders, oldest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order, assigning its ID.

        Raises PersistenceError if the store cannot complete the write.
        """

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Remove an order.  Returns False if it did not exist."""
