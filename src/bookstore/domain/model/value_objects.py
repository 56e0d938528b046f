"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from bookstore.domain.exceptions import ValidationError

_CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative monetary amount, always held to the cent.

    Book prices and order totals are both Money; using Decimal keeps
    ``2 x 9.99`` equal to exactly ``19.98``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(f"Price cannot be negative, got {self.amount}")
        object.__setattr__(self, "amount", self.amount.quantize(_CENT, ROUND_HALF_UP))

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce user input (``"9.99"``, ``9.99``, ``10``) to Money."""
        try:
            return Money(Decimal(str(amount).strip().lstrip("$")))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer number of copies."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
