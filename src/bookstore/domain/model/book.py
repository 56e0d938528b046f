"""Book aggregate.

A book carries catalogue details (title, author, price) that admins edit
freely, and two stock counters that only the BookLedger may change.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.value_objects import Money


@dataclass
class Book:
    """A title in the catalogue together with its stock counters.

    Invariants:
    - ``physical_copies`` is always >= 0
    - ``sold_copies`` is always >= 0 and never decreases

    Repositories hand out copies of this object; assigning to the stock
    fields of such a copy changes nothing in the store.
    """

    id: int
    title: str
    author: str
    price: Money
    physical_copies: int = 0
    sold_copies: int = 0

    def __post_init__(self) -> None:
        if self.physical_copies < 0:
            raise ValidationError("Physical copies cannot be negative")
        if self.sold_copies < 0:
            raise ValidationError("Sold copies cannot be negative")

    @staticmethod
    def create(
        book_id: int,
        title: str,
        author: str,
        price: Money,
        physical_copies: int = 0,
    ) -> Book:
        """Create a new catalogue entry, enforcing all invariants."""
        if not title or not title.strip():
            raise ValidationError("Book title is required")
        if not author or not author.strip():
            raise ValidationError("Book author is required")
        return Book(
            id=book_id,
            title=title.strip(),
            author=author.strip(),
            price=price,
            physical_copies=physical_copies,
        )

    def update_details(
        self,
        title: str | None = None,
        author: str | None = None,
        price: Money | None = None,
    ) -> None:
        """Edit catalogue details.

        Orders already placed keep the title and price they were
        created with.
        """
        if title is not None:
            if not title.strip():
                raise ValidationError("Book title is required")
            self.title = title.strip()
        if author is not None:
            if not author.strip():
                raise ValidationError("Book author is required")
            self.author = author.strip()
        if price is not None:
            self.price = price
