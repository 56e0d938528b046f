"""JSON-file-backed implementation of BookRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.infrastructure.persistence.json_file import JsonFile


class JsonBookRepository(BookRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- BookRepository interface ---------------------------------------------

    def next_id(self) -> int:
        records = self._file.read()
        return max((r["id"] for r in records), default=0) + 1

    def get_by_id(self, book_id: int) -> Book | None:
        for raw in self._file.read():
            if raw["id"] == book_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Book]:
        return sorted((self._to_domain(r) for r in self._file.read()), key=lambda b: b.id)

    def add(self, book: Book) -> None:
        def insert(records: list[dict]) -> None:
            if any(r["id"] == book.id for r in records):
                raise ValidationError(f"Book #{book.id} already exists")
            records.append(self._to_raw(book))

        self._file.update(insert)

    def update_details(self, book: Book) -> None:
        def apply(raw: dict) -> None:
            raw["title"] = book.title
            raw["author"] = book.author
            raw["price"] = str(book.price.amount)

        self._modify(book.id, apply)

    def delete(self, book_id: int) -> bool:
        def remove(records: list[dict]) -> bool:
            for i, raw in enumerate(records):
                if raw["id"] == book_id:
                    del records[i]
                    return True
            return False

        return self._file.update(remove)

    # --- Stock primitives -----------------------------------------------------

    def decrement_if_available(self, book_id: int, quantity: int) -> bool | None:
        def decrement(records: list[dict]) -> bool | None:
            raw = self._find(records, book_id)
            if raw is None:
                return None
            if raw["physical_copies"] < quantity:
                return False
            raw["physical_copies"] -= quantity
            return True

        return self._file.update(decrement)

    def increment_physical(self, book_id: int, quantity: int) -> bool:
        def apply(raw: dict) -> None:
            raw["physical_copies"] += quantity

        return self._modify(book_id, apply)

    def increment_sold(self, book_id: int, quantity: int) -> bool:
        def apply(raw: dict) -> None:
            raw["sold_copies"] += quantity

        return self._modify(book_id, apply)

    def set_physical(self, book_id: int, copies: int) -> bool:
        def apply(raw: dict) -> None:
            raw["physical_copies"] = copies

        return self._modify(book_id, apply)

    # --- Helpers --------------------------------------------------------------

    def _modify(self, book_id: int, apply) -> bool:
        def run(records: list[dict]) -> bool:
            raw = self._find(records, book_id)
            if raw is None:
                return False
            apply(raw)
            return True

        return self._file.update(run)

    @staticmethod
    def _find(records: list[dict], book_id: int) -> dict | None:
        for raw in records:
            if raw["id"] == book_id:
                return raw
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(book: Book) -> dict:
        return {
            "id": book.id,
            "title": book.title,
            "author": book.author,
            "price": str(book.price.amount),
            "physical_copies": book.physical_copies,
            "sold_copies": book.sold_copies,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Book:
        return Book(
            id=raw["id"],
            title=raw["title"],
            author=raw["author"],
            price=Money(Decimal(raw["price"])),
            physical_copies=raw.get("physical_copies", 0),
            sold_copies=raw.get("sold_copies", 0),
        )
