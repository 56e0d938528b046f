"""Application service: Set Stock use case (admin)."""

from __future__ import annotations

from bookstore.domain.service.book_ledger import BookLedger


class SetStockHandler:

    def __init__(self, ledger: BookLedger) -> None:
        self._ledger = ledger

    def handle(self, book_id: int, copies: int) -> None:
        """Set the number of physical copies on hand for a book."""
        self._ledger.set_stock(book_id, copies)
