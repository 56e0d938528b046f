"""Application service: Checkout use case.

Builds a CheckoutSaga for the user's cart and runs it.  The saga raises a
typed DomainException when the attempt is aborted; ``retryable`` on that
exception tells the caller whether trying again may help.
"""

from __future__ import annotations

from bookstore.application.dto import OrderDTO, PaymentDetails
from bookstore.domain.model.payment import PaymentAttempt
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.domain.service.book_ledger import BookLedger
from bookstore.domain.service.cart_session import CartSession
from bookstore.domain.service.checkout_saga import CheckoutSaga
from bookstore.domain.service.inventory_reservation_service import (
    InventoryReservationService,
)
from bookstore.domain.service.payment_validator import PaymentGateway


class CheckoutHandler:

    def __init__(
        self,
        book_repo: BookRepository,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        gateway: PaymentGateway,
    ) -> None:
        self._book_repo = book_repo
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._gateway = gateway
        self._ledger = BookLedger(book_repo)
        self._reservations = InventoryReservationService(self._ledger)

    def handle(self, user_id: int, payment: PaymentDetails) -> OrderDTO:
        saga = CheckoutSaga(
            cart=CartSession(user_id, self._cart_repo, self._ledger),
            book_repo=self._book_repo,
            order_repo=self._order_repo,
            reservations=self._reservations,
            gateway=self._gateway,
        )
        attempt = PaymentAttempt(
            card_number=payment.card_number.replace(" ", ""),
            card_holder_name=payment.card_holder_name.strip(),
            expiry_date=payment.expiry_date.strip(),
            cvv=payment.cvv.strip(),
        )
        order = saga.run(attempt)
        return OrderDTO.from_order(order)
