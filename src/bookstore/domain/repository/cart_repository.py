"""Abstract repository for ShoppingCart records, keyed by user."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.cart import ShoppingCart


class CartRepository(ABC):

    @abstractmethod
    def get(self, user_id: int) -> ShoppingCart | None:
        """Return the persisted cart for a user, or None."""

    @abstractmethod
    def save(self, cart: ShoppingCart) -> None:
        """Persist a new or updated cart."""

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the persisted cart for a user, if any."""
