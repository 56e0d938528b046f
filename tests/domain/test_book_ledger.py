"""Unit tests for the BookLedger domain service."""

import pytest

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.book_ledger import BookLedger
from tests.fakes import FakeBookRepository


def _ledger(physical: int = 5, sold: int = 0) -> tuple[BookLedger, FakeBookRepository]:
    repo = FakeBookRepository([
        Book(id=1, title="Dune", author="Frank Herbert", price=Money.of("9.99"),
             physical_copies=physical, sold_copies=sold),
    ])
    return BookLedger(repo), repo


class TestTryReduce:

    def test_reduces_when_enough_stock(self):
        ledger, repo = _ledger(physical=5)
        assert ledger.try_reduce(1, 3) is True
        assert repo.get_by_id(1).physical_copies == 2

    def test_reduce_to_exactly_zero(self):
        ledger, repo = _ledger(physical=5)
        assert ledger.try_reduce(1, 5) is True
        assert ledger.get_available(1) == 0

    def test_refuses_without_mutation_when_short(self):
        ledger, repo = _ledger(physical=2)
        assert ledger.try_reduce(1, 3) is False
        assert repo.get_by_id(1).physical_copies == 2

    def test_unknown_book(self):
        ledger, _ = _ledger()
        with pytest.raises(EntityNotFoundError, match="#99"):
            ledger.try_reduce(99, 1)

    def test_negative_quantity_rejected_before_store(self):
        ledger, repo = _ledger()
        with pytest.raises(ValidationError, match="cannot be negative"):
            ledger.try_reduce(1, -1)
        assert repo.decrement_calls == []


class TestIncreaseAndRecordSold:

    def test_increase_adds_back(self):
        ledger, _ = _ledger(physical=2)
        ledger.increase(1, 3)
        assert ledger.get_available(1) == 5

    def test_record_sold_only_touches_sold(self):
        ledger, _ = _ledger(physical=2, sold=4)
        ledger.record_sold(1, 3)
        assert ledger.sold(1) == 7
        assert ledger.get_available(1) == 2

    def test_negative_record_sold_rejected(self):
        ledger, _ = _ledger(sold=4)
        with pytest.raises(ValidationError):
            ledger.record_sold(1, -2)
        assert ledger.sold(1) == 4

    def test_increase_unknown_book(self):
        ledger, _ = _ledger()
        with pytest.raises(EntityNotFoundError):
            ledger.increase(42, 1)


class TestSetStock:

    def test_sets_absolute_level(self):
        ledger, _ = _ledger(physical=2)
        ledger.set_stock(1, 20)
        assert ledger.get_available(1) == 20

    def test_negative_level_rejected(self):
        ledger, _ = _ledger(physical=2)
        with pytest.raises(ValidationError):
            ledger.set_stock(1, -5)
        assert ledger.get_available(1) == 2
