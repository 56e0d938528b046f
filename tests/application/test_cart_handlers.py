"""Integration tests for the cart use cases."""

import pytest

from bookstore.application.add_to_cart import AddToCartHandler
from bookstore.application.clear_cart import ClearCartHandler
from bookstore.application.remove_from_cart import RemoveFromCartHandler
from bookstore.application.show_cart import UNAVAILABLE, ShowCartHandler
from bookstore.domain.exceptions import EntityNotFoundError, InsufficientStockError
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.book_ledger import BookLedger
from tests.fakes import FakeBookRepository, FakeCartRepository


def _setup():
    book_repo = FakeBookRepository([
        Book(id=1, title="Dune", author="Frank Herbert", price=Money.of("9.99"),
             physical_copies=5),
        Book(id=2, title="Emma", author="Jane Austen", price=Money.of("5.00"),
             physical_copies=1),
    ])
    cart_repo = FakeCartRepository()
    ledger = BookLedger(book_repo)
    return book_repo, cart_repo, ledger


class TestShowCart:

    def test_lines_and_total(self):
        book_repo, cart_repo, ledger = _setup()
        add = AddToCartHandler(cart_repo, ledger)
        add.handle(user_id=3, book_id=2, quantity=1)
        add.handle(user_id=3, book_id=1, quantity=2)

        dto = ShowCartHandler(cart_repo, book_repo).handle(3)

        assert [(line.title, line.quantity, line.line_total) for line in dto.lines] == [
            ("Dune", 2, "$19.98"),
            ("Emma", 1, "$5.00"),
        ]
        assert dto.total == "$24.98"

    def test_empty_cart(self):
        book_repo, cart_repo, _ = _setup()
        dto = ShowCartHandler(cart_repo, book_repo).handle(3)
        assert dto.lines == []
        assert dto.total == "$0.00"

    def test_deleted_book_shown_as_unavailable(self):
        book_repo, cart_repo, ledger = _setup()
        AddToCartHandler(cart_repo, ledger).handle(user_id=3, book_id=1, quantity=1)
        book_repo.delete(1)

        dto = ShowCartHandler(cart_repo, book_repo).handle(3)

        assert dto.lines[0].title == UNAVAILABLE
        assert dto.total == "$0.00"


class TestChangeCart:

    def test_add_beyond_stock(self):
        _, cart_repo, ledger = _setup()
        with pytest.raises(InsufficientStockError):
            AddToCartHandler(cart_repo, ledger).handle(user_id=3, book_id=2, quantity=2)

    def test_remove(self):
        _, cart_repo, ledger = _setup()
        AddToCartHandler(cart_repo, ledger).handle(user_id=3, book_id=1, quantity=1)
        RemoveFromCartHandler(cart_repo, ledger).handle(user_id=3, book_id=1)
        assert cart_repo.get(3).is_empty

    def test_remove_missing_line(self):
        _, cart_repo, ledger = _setup()
        with pytest.raises(EntityNotFoundError, match="not in the cart"):
            RemoveFromCartHandler(cart_repo, ledger).handle(user_id=3, book_id=1)

    def test_clear(self):
        _, cart_repo, ledger = _setup()
        AddToCartHandler(cart_repo, ledger).handle(user_id=3, book_id=1, quantity=1)
        ClearCartHandler(cart_repo).handle(3)
        assert cart_repo.get(3) is None
