"""Payment validation and the simulated authorization step.

The three ``validate_*`` functions are pure: each returns ``None`` when
the field is valid, or a message describing what is wrong with it.
"""

from __future__ import annotations

import itertools
import re
import threading
import time
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone

import structlog

from bookstore.domain.exceptions import PaymentRejectedError
from bookstore.domain.model.payment import PaymentAttempt, PaymentConfirmation

logger = structlog.get_logger(__name__)

_CARD_NUMBER = re.compile(r"\d{16}", re.ASCII)
_EXPIRY = re.compile(r"(\d{2})/(\d{2})", re.ASCII)
_CVV = re.compile(r"\d{3}", re.ASCII)


def validate_card_number(card_number: str | None) -> str | None:
    if not card_number:
        return "Card number cannot be empty."
    if not _CARD_NUMBER.fullmatch(card_number):
        return "Card number must be 16 digits."
    return None


def validate_expiry_date(expiry_date: str | None, today: date | None = None) -> str | None:
    """Expiry must be ``MM/yy`` and not earlier than the current month."""
    if not expiry_date:
        return "Expiry date cannot be empty."
    match = _EXPIRY.fullmatch(expiry_date)
    if match is None or not 1 <= int(match.group(1)) <= 12:
        return "Expiry date format must be MM/yy."
    month, year = int(match.group(1)), 2000 + int(match.group(2))
    today = today or date.today()
    if (year, month) < (today.year, today.month):
        return "Expiry date must be in the future."
    return None


def validate_cvv(cvv: str | None) -> str | None:
    if not cvv:
        return "CVV cannot be empty."
    if not _CVV.fullmatch(cvv):
        return "CVV must be 3 digits."
    return None


def validate_payment(attempt: PaymentAttempt, today: date | None = None) -> list[str]:
    """Every problem with *attempt*; empty when all fields are valid."""
    problems = [
        validate_card_number(attempt.card_number),
        validate_expiry_date(attempt.expiry_date, today),
        validate_cvv(attempt.cvv),
    ]
    return [p for p in problems if p is not None]


class PaymentGateway(ABC):
    """Authorizes a payment attempt or raises PaymentRejectedError."""

    @abstractmethod
    def authorize(self, attempt: PaymentAttempt) -> PaymentConfirmation:
        ...


class SimulatedPaymentGateway(PaymentGateway):
    """Stand-in gateway: authorizes every attempt whose fields validate.

    Tokens look like ``PAY-<epoch millis>-<counter>``; the counter makes
    them unique even when two attempts land in the same millisecond.
    """

    def __init__(self, today: date | None = None) -> None:
        self._today = today
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def authorize(self, attempt: PaymentAttempt) -> PaymentConfirmation:
        problems = validate_payment(attempt, self._today)
        if problems:
            logger.info(
                "payment_rejected",
                card=attempt.masked_card_number,
                reasons=problems,
            )
            raise PaymentRejectedError(problems)

        with self._lock:
            seq = next(self._counter)
        token = f"PAY-{int(time.time() * 1000)}-{seq:06d}"
        logger.info("payment_authorized", card=attempt.masked_card_number, token=token)
        return PaymentConfirmation(token=token, authorized_at=datetime.now(timezone.utc))
