"""Application service: Add Book use case."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository


class AddBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, title: str, author: str, price: str, copies: int = 0) -> BookDTO:
        """Add a new book to the catalogue with an initial stock level."""
        if copies < 0:
            raise ValidationError("Initial copies cannot be negative")
        book = Book.create(
            book_id=self._book_repo.next_id(),
            title=title,
            author=author,
            price=Money.of(price),
            physical_copies=copies,
        )
        self._book_repo.add(book)
        return BookDTO.from_book(book)
