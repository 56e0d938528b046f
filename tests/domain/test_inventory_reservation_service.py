"""Unit tests for the InventoryReservationService domain service."""

import threading

import pytest

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.reservation import (
    Rejected,
    ReservationEntry,
    ReservationRequest,
    Reserved,
)
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.book_ledger import BookLedger
from bookstore.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from tests.fakes import FakeBookRepository


def _make_store(*specs: tuple[int, int]) -> FakeBookRepository:
    """Create repo with (book_id, physical_copies) tuples."""
    return FakeBookRepository([
        Book(id=book_id, title=f"Book {book_id}", author="A. Writer",
             price=Money.of("10.00"), physical_copies=copies)
        for book_id, copies in specs
    ])


def _service(repo: FakeBookRepository) -> InventoryReservationService:
    return InventoryReservationService(BookLedger(repo))


class TestReservationRequest:

    def test_entries_sorted_by_book_id(self):
        request = ReservationRequest.of({3: 1, 1: 2, 2: 5})
        assert [e.book_id for e in request.entries] == [1, 2, 3]

    def test_empty_demand_rejected(self):
        with pytest.raises(ValidationError, match="at least one book"):
            ReservationRequest.of({})

    @pytest.mark.parametrize("qty", [0, -1, True, 1.5])
    def test_non_positive_quantity_rejected(self, qty):
        with pytest.raises(ValidationError, match="positive integer"):
            ReservationRequest.of({1: qty})


class TestReserve:

    def test_reserves_all_items(self):
        repo = _make_store((1, 5), (2, 4))
        result = _service(repo).reserve(ReservationRequest.of({1: 3, 2: 4}))

        assert isinstance(result, Reserved)
        assert result.entries == (ReservationEntry(1, 3), ReservationEntry(2, 4))
        assert repo.get_by_id(1).physical_copies == 2
        assert repo.get_by_id(2).physical_copies == 0

    def test_all_or_nothing(self):
        """A (stock 5) and B (stock 0) for (3, 1): A untouched, B rejected."""
        repo = _make_store((1, 5), (2, 0))
        result = _service(repo).reserve(ReservationRequest.of({1: 3, 2: 1}))

        assert result == Rejected(book_id=2, available=0)
        assert repo.get_by_id(1).physical_copies == 5
        assert repo.get_by_id(2).physical_copies == 0

    def test_rejection_reports_first_failing_book(self):
        repo = _make_store((1, 1), (2, 0), (3, 0))
        result = _service(repo).reserve(ReservationRequest.of({3: 1, 2: 1, 1: 1}))
        assert isinstance(result, Rejected)
        assert result.book_id == 2
        assert repo.get_by_id(1).physical_copies == 1

    def test_books_visited_in_ascending_order(self):
        repo = _make_store((1, 9), (5, 9), (7, 9))
        _service(repo).reserve(ReservationRequest.of({7: 1, 1: 1, 5: 1}))
        assert [book_id for book_id, _ in repo.decrement_calls] == [1, 5, 7]

    def test_unknown_book_compensates_and_raises(self):
        repo = _make_store((1, 5))
        with pytest.raises(EntityNotFoundError):
            _service(repo).reserve(ReservationRequest.of({1: 2, 9: 1}))
        assert repo.get_by_id(1).physical_copies == 5


class TestRevertAndFinalize:

    def test_revert_restores_exact_stock(self):
        repo = _make_store((1, 5))
        svc = _service(repo)
        result = svc.reserve(ReservationRequest.of({1: 3}))
        assert repo.get_by_id(1).physical_copies == 2

        svc.revert(result.entries)

        assert repo.get_by_id(1).physical_copies == 5
        assert repo.get_by_id(1).sold_copies == 0

    def test_finalize_does_not_double_deduct(self):
        repo = _make_store((1, 5))
        svc = _service(repo)
        result = svc.reserve(ReservationRequest.of({1: 3}))

        svc.finalize(result.entries)

        assert repo.get_by_id(1).physical_copies == 2
        assert repo.get_by_id(1).sold_copies == 3


class TestConcurrentReservations:

    def test_no_oversell_under_contention(self):
        repo = _make_store((1, 10))
        svc = _service(repo)
        results: list = []
        results_lock = threading.Lock()
        start = threading.Barrier(20)

        def shopper(qty: int) -> None:
            start.wait()
            result = svc.reserve(ReservationRequest.of({1: qty}))
            with results_lock:
                results.append((qty, result))

        threads = [threading.Thread(target=shopper, args=(1 + i % 3,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        reserved = sum(qty for qty, r in results if isinstance(r, Reserved))
        assert reserved <= 10
        assert repo.get_by_id(1).physical_copies == 10 - reserved
        assert repo.get_by_id(1).physical_copies >= 0

    def test_overlapping_multi_book_requests_stay_consistent(self):
        repo = _make_store((1, 15), (2, 15))
        svc = _service(repo)
        outcomes: list = []
        lock = threading.Lock()

        def shopper(demand: dict[int, int]) -> None:
            for _ in range(10):
                result = svc.reserve(ReservationRequest.of(demand))
                with lock:
                    outcomes.append((demand, result))

        threads = [
            threading.Thread(target=shopper, args=({1: 1, 2: 2},)),
            threading.Thread(target=shopper, args=({2: 1, 1: 2},)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        taken = {1: 0, 2: 0}
        for demand, result in outcomes:
            if isinstance(result, Reserved):
                for book_id, qty in demand.items():
                    taken[book_id] += qty
        assert repo.get_by_id(1).physical_copies == 15 - taken[1]
        assert repo.get_by_id(2).physical_copies == 15 - taken[2]
        assert taken[1] <= 15 and taken[2] <= 15
