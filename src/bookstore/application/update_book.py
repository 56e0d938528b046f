"""Application service: Update Book use case."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository


class UpdateBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(
        self,
        book_id: int,
        title: str | None = None,
        author: str | None = None,
        price: str | None = None,
    ) -> BookDTO:
        """Edit a book's catalogue details.

        This does NOT affect any existing orders: they captured a
        title and price snapshot at checkout time.
        """
        if title is None and author is None and price is None:
            raise ValidationError("Nothing to update")

        book = self._book_repo.get_by_id(book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{book_id} not found")

        book.update_details(
            title=title,
            author=author,
            price=Money.of(price) if price is not None else None,
        )
        self._book_repo.update_details(book)
        return BookDTO.from_book(book)
