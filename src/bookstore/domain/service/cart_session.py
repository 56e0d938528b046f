"""Domain service: a user's cart, kept in step with the cart store.

Stock checks made here are advisory.  Two users may both add the last
copy of a book to their carts; only one of them will get it at checkout,
when the reservation is made.
"""

from __future__ import annotations

import structlog

from bookstore.domain.exceptions import InsufficientStockError, ValidationError
from bookstore.domain.model.cart import CartItem, ShoppingCart
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.service.book_ledger import BookLedger

logger = structlog.get_logger(__name__)


class CartSession:

    def __init__(self, user_id: int, cart_repo: CartRepository, ledger: BookLedger) -> None:
        self._cart_repo = cart_repo
        self._ledger = ledger
        self._cart = ShoppingCart(user_id=user_id)
        self.sync_from_store()

    @property
    def user_id(self) -> int:
        return self._cart.user_id

    def add_or_update(self, book_id: int, quantity: int) -> CartItem:
        """Set the quantity of *book_id* in the cart and persist the cart."""
        if not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Quantity must be a positive integer")
        available = self._ledger.get_available(book_id)
        if quantity > available:
            raise InsufficientStockError(
                book_id,
                available,
                f"Only {available} copies of book #{book_id} available, "
                f"cannot add {quantity} to the cart",
            )
        item = self._cart.put(book_id, quantity)
        self._cart_repo.save(self._cart)
        logger.debug("cart_updated", user_id=self.user_id, book_id=book_id, quantity=quantity)
        return item

    def remove(self, book_id: int) -> None:
        if self._cart.remove(book_id):
            self._cart_repo.save(self._cart)

    def items(self) -> list[CartItem]:
        return self._cart.items()

    def demand(self) -> dict[int, int]:
        return self._cart.demand()

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def clear(self) -> None:
        """Empty the cart both here and in the store."""
        self._cart.clear()
        self._cart_repo.delete(self.user_id)

    def sync_from_store(self) -> None:
        """Replace the in-memory view with the persisted cart."""
        stored = self._cart_repo.get(self.user_id)
        self._cart = stored if stored is not None else ShoppingCart(user_id=self.user_id)
