"""Reservation value objects.

A ReservationRequest is built once per checkout attempt.  Reserving it
yields either ``Reserved`` (whose entries are the token needed to later
finalize or revert the reservation) or ``Rejected``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from bookstore.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ReservationEntry:
    book_id: int
    quantity: int


@dataclass(frozen=True)
class ReservationRequest:
    """Demand for several books, held in ascending ``book_id`` order.

    Every request walks its books in the same order, so two requests
    sharing books always contend for them in the same sequence.
    """

    entries: tuple[ReservationEntry, ...]

    @staticmethod
    def of(demand: Mapping[int, int]) -> ReservationRequest:
        """Build a request from a demand map (book_id -> quantity)."""
        if not demand:
            raise ValidationError("Reservation request must contain at least one book")
        entries = []
        for book_id in sorted(demand):
            qty = demand[book_id]
            if not isinstance(qty, int) or isinstance(qty, bool) or qty <= 0:
                raise ValidationError(
                    f"Reservation quantity for book #{book_id} must be a positive integer"
                )
            entries.append(ReservationEntry(book_id=book_id, quantity=qty))
        return ReservationRequest(entries=tuple(entries))


@dataclass(frozen=True)
class Reserved:
    """All entries were reserved; physical stock is already reduced."""

    entries: tuple[ReservationEntry, ...]


@dataclass(frozen=True)
class Rejected:
    """The first book that could not be reserved and its last-known stock."""

    book_id: int
    available: int


ReservationResult = Reserved | Rejected
