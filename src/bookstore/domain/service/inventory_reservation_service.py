"""Domain service: Inventory Reservation.

Reserves stock for several books at once, all or nothing.  Each book is
taken with one atomic conditional decrement; if a later book cannot be
satisfied, the books already taken by this request are put back before
the failure is reported.  The service holds no lock of its own, so
reservations over disjoint books never wait on each other.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from bookstore.domain.model.reservation import (
    Rejected,
    ReservationEntry,
    ReservationRequest,
    ReservationResult,
    Reserved,
)
from bookstore.domain.service.book_ledger import BookLedger

logger = structlog.get_logger(__name__)


class InventoryReservationService:

    def __init__(self, ledger: BookLedger) -> None:
        self._ledger = ledger

    def reserve(self, request: ReservationRequest) -> ReservationResult:
        """Reserve every entry of *request* or none of them.

        Entries are visited in ascending book ID.  On the first refusal
        the entries already reduced are increased again in reverse order
        and ``Rejected`` names the refused book.
        """
        reduced: list[ReservationEntry] = []
        refused: ReservationEntry | None = None
        try:
            for entry in request.entries:
                if not self._ledger.try_reduce(entry.book_id, entry.quantity):
                    refused = entry
                    break
                reduced.append(entry)
        except Exception:
            # e.g. a book deleted mid-request: put back what was taken
            self._compensate(reduced)
            raise

        if refused is None:
            logger.debug("reservation_made", books=[e.book_id for e in reduced])
            return Reserved(entries=tuple(reduced))

        self._compensate(reduced)
        available = self._ledger.get_available(refused.book_id)
        logger.info(
            "reservation_rejected",
            book_id=refused.book_id,
            requested=refused.quantity,
            available=available,
            compensated=len(reduced),
        )
        return Rejected(book_id=refused.book_id, available=available)

    def revert(self, entries: Iterable[ReservationEntry]) -> None:
        """Give back a successful reservation abandoned by a later step."""
        entries = list(entries)
        for entry in entries:
            self._ledger.increase(entry.book_id, entry.quantity)
        logger.info("reservation_reverted", books=[e.book_id for e in entries])

    def finalize(self, entries: Iterable[ReservationEntry]) -> None:
        """Record a reservation as sold.

        Physical stock was reduced when the reservation was made; only the
        sold counter moves here.
        """
        for entry in entries:
            self._ledger.record_sold(entry.book_id, entry.quantity)

    def _compensate(self, reduced: list[ReservationEntry]) -> None:
        for entry in reversed(reduced):
            self._ledger.increase(entry.book_id, entry.quantity)
