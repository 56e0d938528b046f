"""Abstract repository for the Book aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Besides plain reads and catalogue writes it exposes the
stock primitives the BookLedger is built on; each of them must be atomic
with respect to concurrent callers touching the same book.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.book import Book


class BookRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique book ID."""

    @abstractmethod
    def get_by_id(self, book_id: int) -> Book | None:
        """Return a snapshot of a book, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book in the catalogue, ordered by ID."""

    @abstractmethod
    def add(self, book: Book) -> None:
        """Insert a new book including its initial stock counters."""

    @abstractmethod
    def update_details(self, book: Book) -> None:
        """Persist title, author and price.  Stock counters are left alone."""

    @abstractmethod
    def delete(self, book_id: int) -> bool:
        """Remove a book.  Returns False if it did not exist."""

    # --- Stock primitives -----------------------------------------------------

    @abstractmethod
    def decrement_if_available(self, book_id: int, quantity: int) -> bool | None:
        """Atomically subtract *quantity* from physical copies if enough remain.

        Returns True on success, False (with no change) when stock is
        insufficient, and None when the book does not exist.
        """

    @abstractmethod
    def increment_physical(self, book_id: int, quantity: int) -> bool:
        """Atomically add to physical copies.  False if the book does not exist."""

    @abstractmethod
    def increment_sold(self, book_id: int, quantity: int) -> bool:
        """Atomically add to sold copies.  False if the book does not exist."""

    @abstractmethod
    def set_physical(self, book_id: int, copies: int) -> bool:
        """Overwrite physical copies.  False if the book does not exist."""
