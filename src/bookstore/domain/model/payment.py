"""Payment value objects.  Card details are validated and discarded."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PaymentAttempt:
    card_number: str = field(repr=False)
    card_holder_name: str
    expiry_date: str = field(repr=False)
    cvv: str = field(repr=False)

    @property
    def masked_card_number(self) -> str:
        return "*" * 12 + self.card_number[-4:] if len(self.card_number) >= 4 else "****"


@dataclass(frozen=True)
class PaymentConfirmation:
    token: str
    authorized_at: datetime
