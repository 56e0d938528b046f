"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.repository.book_repository import BookRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    book_id: int
    title: str
    physical: int
    sold: int


class ShowInventoryHandler:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def handle(self) -> list[InventoryLineDTO]:
        return [
            InventoryLineDTO(
                book_id=book.id,
                title=book.title,
                physical=book.physical_copies,
                sold=book.sold_copies,
            )
            for book in self._book_repo.list_all()
        ]
