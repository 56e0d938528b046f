"""Application service: Delete Book use case.

Orders that already contain the book keep their snapshot.  Carts that
still hold it will fail at checkout with a not-found error.
"""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.repository.book_repository import BookRepository


class DeleteBookHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self, book_id: int) -> None:
        if not self._book_repo.delete(book_id):
            raise EntityNotFoundError(f"Book #{book_id} not found")
