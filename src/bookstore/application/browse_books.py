"""Application services: catalogue queries."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.repository.book_repository import BookRepository

TOP_BOOKS_LIMIT = 5


class ListBooksHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self) -> list[BookDTO]:
        return [BookDTO.from_book(b) for b in self._book_repo.list_all()]


class SearchBooksHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, keyword: str) -> list[BookDTO]:
        """Books whose title contains *keyword*, ignoring case."""
        needle = keyword.strip().lower()
        return [
            BookDTO.from_book(b)
            for b in self._book_repo.list_all()
            if needle in b.title.lower()
        ]


class TopBooksHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, limit: int = TOP_BOOKS_LIMIT) -> list[BookDTO]:
        """Best sellers by sold copies; ties keep catalogue order."""
        books = sorted(self._book_repo.list_all(), key=lambda b: -b.sold_copies)
        return [BookDTO.from_book(b) for b in books[:limit]]
