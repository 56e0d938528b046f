"""Domain service: Checkout saga.

One saga instance drives one checkout attempt through

    IDLE -> VALIDATING_PAYMENT -> RESERVING -> PERSISTING -> FINALIZING -> COMPLETED

and can end in ABORTED from VALIDATING_PAYMENT, RESERVING or PERSISTING.
Once stock has been reserved the attempt either completes or reverts the
reservation; it is never left half-applied.  Nothing is retried here.
"""

from __future__ import annotations

from enum import Enum

import structlog

from bookstore.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    PersistenceError,
    ValidationError,
)
from bookstore.domain.model.book import Book
from bookstore.domain.model.order import Order, OrderItem
from bookstore.domain.model.payment import PaymentAttempt, PaymentConfirmation
from bookstore.domain.model.reservation import Rejected, ReservationRequest, Reserved
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.domain.service.cart_session import CartSession
from bookstore.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from bookstore.domain.service.payment_validator import PaymentGateway

logger = structlog.get_logger(__name__)


class CheckoutState(Enum):
    IDLE = "IDLE"
    VALIDATING_PAYMENT = "VALIDATING_PAYMENT"
    RESERVING = "RESERVING"
    PERSISTING = "PERSISTING"
    FINALIZING = "FINALIZING"
    COMPLETED = "COMPLETED"
    ABORTED = "ABORTED"


class AbortReason(Enum):
    PAYMENT_REJECTED = "PAYMENT_REJECTED"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    BOOK_NOT_FOUND = "BOOK_NOT_FOUND"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


class CheckoutSaga:
    """Sequences payment, reservation, order persistence and finalization."""

    def __init__(
        self,
        cart: CartSession,
        book_repo: BookRepository,
        order_repo: OrderRepository,
        reservations: InventoryReservationService,
        gateway: PaymentGateway,
    ) -> None:
        self._cart = cart
        self._book_repo = book_repo
        self._order_repo = order_repo
        self._reservations = reservations
        self._gateway = gateway

        self.state = CheckoutState.IDLE
        self.abort_reason: AbortReason | None = None
        self.order: Order | None = None

    def run(self, attempt: PaymentAttempt) -> Order:
        """Check out the cart, returning the persisted order.

        Raises PaymentRejectedError, InsufficientStockError,
        EntityNotFoundError or PersistenceError after moving to ABORTED.
        """
        if self.state is not CheckoutState.IDLE:
            raise ValidationError(
                f"Checkout already ran (state {self.state.value})"
            )
        demand = self._cart.demand()
        if not demand:
            raise ValidationError("Cart is empty")
        log = logger.bind(user_id=self._cart.user_id)

        # 1. Payment
        self.state = CheckoutState.VALIDATING_PAYMENT
        try:
            confirmation = self._gateway.authorize(attempt)
        except DomainException:
            self._abort(log, AbortReason.PAYMENT_REJECTED)
            raise

        # 2. Reservation
        self.state = CheckoutState.RESERVING
        books = self._resolve_books(demand, log)
        try:
            result = self._reservations.reserve(ReservationRequest.of(demand))
        except EntityNotFoundError:
            self._abort(log, AbortReason.BOOK_NOT_FOUND)
            raise
        if isinstance(result, Rejected):
            self._abort(log, AbortReason.INSUFFICIENT_STOCK, book_id=result.book_id)
            raise InsufficientStockError(
                result.book_id,
                result.available,
                f"Insufficient stock for '{books[result.book_id].title}' "
                f"(need {demand[result.book_id]}, have {result.available} available)",
            )

        # 3. Order
        self.state = CheckoutState.PERSISTING
        order = self._persist_order(books, demand, confirmation, result, log)

        # 4. Sold counters and cart
        self.state = CheckoutState.FINALIZING
        self.order = order
        try:
            self._reservations.finalize(result.entries)
            self._cart.clear()
        except Exception as exc:
            # Order is saved and stock reduced; the sale stands.
            log.error(
                "checkout_finalize_failed",
                order_number=order.order_number,
                order_id=order.id,
                error=str(exc),
            )
            raise

        self.state = CheckoutState.COMPLETED
        log.info(
            "checkout_completed",
            order_number=order.order_number,
            total=str(order.total_price),
        )
        return order

    def _resolve_books(self, demand: dict[int, int], log) -> dict[int, Book]:
        books: dict[int, Book] = {}
        for book_id in sorted(demand):
            book = self._book_repo.get_by_id(book_id)
            if book is None:
                self._abort(log, AbortReason.BOOK_NOT_FOUND, book_id=book_id)
                raise EntityNotFoundError(f"Book #{book_id} in cart no longer exists")
            books[book_id] = book
        return books

    def _persist_order(
        self,
        books: dict[int, Book],
        demand: dict[int, int],
        confirmation: PaymentConfirmation,
        reservation: Reserved,
        log,
    ) -> Order:
        try:
            order = Order.create(
                user_id=self._cart.user_id,
                items=[OrderItem.snapshot(books[b], demand[b]) for b in sorted(demand)],
                payment_reference=confirmation.token,
            )
            self._order_repo.save(order)
        except Exception as exc:
            self._reservations.revert(reservation.entries)
            self._abort(log, AbortReason.PERSISTENCE_FAILURE, error=str(exc))
            if isinstance(exc, PersistenceError):
                raise
            raise PersistenceError(f"Could not save order: {exc}") from exc
        return order

    def _abort(self, log, reason: AbortReason, **details) -> None:
        self.state = CheckoutState.ABORTED
        self.abort_reason = reason
        log.warning("checkout_aborted", reason=reason.value, **details)
