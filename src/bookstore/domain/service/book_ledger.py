"""Domain service: Book Ledger.

The ledger is the only writer of ``physical_copies`` and ``sold_copies``.
Every mutation is a single call to one of the repository's atomic stock
primitives, so there is never a gap between checking availability and
changing it.
"""

from __future__ import annotations

import structlog

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.repository.book_repository import BookRepository

logger = structlog.get_logger(__name__)


class BookLedger:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def get_available(self, book_id: int) -> int:
        """Current physical copies of a book; no side effect."""
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{book_id} not found")
        return book.physical_copies

    def sold(self, book_id: int) -> int:
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{book_id} not found")
        return book.sold_copies

    def try_reduce(self, book_id: int, quantity: int) -> bool:
        """Take *quantity* copies out of stock if that many are on hand.

        Returns False, with no mutation, when stock is insufficient.
        """
        _check_quantity(quantity)
        reduced = self._book_repo.decrement_if_available(book_id, quantity)
        if reduced is None:
            raise EntityNotFoundError(f"Book #{book_id} not found")
        if not reduced:
            logger.debug("stock_reduce_refused", book_id=book_id, quantity=quantity)
        return reduced

    def increase(self, book_id: int, quantity: int) -> None:
        """Put copies back into stock (compensation for a reservation)."""
        _check_quantity(quantity)
        if not self._book_repo.increment_physical(book_id, quantity):
            raise EntityNotFoundError(f"Book #{book_id} not found")

    def record_sold(self, book_id: int, quantity: int) -> None:
        _check_quantity(quantity)
        if not self._book_repo.increment_sold(book_id, quantity):
            raise EntityNotFoundError(f"Book #{book_id} not found")

    def set_stock(self, book_id: int, copies: int) -> None:
        """Administrative stock level, e.g. after a stock count or delivery."""
        _check_quantity(copies)
        if not self._book_repo.set_physical(book_id, copies):
            raise EntityNotFoundError(f"Book #{book_id} not found")
        logger.info("stock_set", book_id=book_id, copies=copies)


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(f"Quantity must be an integer, got {type(quantity).__name__}")
    if quantity < 0:
        raise ValidationError(f"Quantity cannot be negative, got {quantity}")
