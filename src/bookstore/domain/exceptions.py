"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

``retryable`` separates infrastructure failures (worth retrying) from
business rejections (the caller must correct the input first).
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    retryable = False


class ValidationError(DomainException):
    """A business rule or invariant was violated, or an argument is malformed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(ValidationError):
    """Not enough physical copies of a book to satisfy a request."""

    def __init__(self, book_id: int, available: int, message: str | None = None) -> None:
        self.book_id = book_id
        self.available = available
        super().__init__(
            message or f"Insufficient stock for book #{book_id} ({available} available)"
        )


class PaymentRejectedError(DomainException):
    """Payment details failed validation or authorization."""

    def __init__(self, reasons: list[str]) -> None:
        self.reasons = list(reasons)
        super().__init__("Payment rejected: " + "; ".join(self.reasons))


class PersistenceError(DomainException):
    """The backing store could not complete a read or write."""

    retryable = True
