"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Repositories are built
once per process so every caller shares the same file locks.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from bookstore.domain.service.book_ledger import BookLedger
from bookstore.domain.service.payment_validator import SimulatedPaymentGateway
from bookstore.infrastructure.persistence.json_book_repository import JsonBookRepository
from bookstore.infrastructure.persistence.json_cart_repository import JsonCartRepository
from bookstore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    """``BOOKSTORE_DATA_DIR`` if set, otherwise ``<repo>/data``."""
    override = os.environ.get("BOOKSTORE_DATA_DIR")
    return Path(override).expanduser() if override else _DEFAULT_DATA_DIR


@lru_cache(maxsize=None)
def _book_repository(directory: Path) -> JsonBookRepository:
    return JsonBookRepository(directory / "books.json")


@lru_cache(maxsize=None)
def _cart_repository(directory: Path) -> JsonCartRepository:
    return JsonCartRepository(directory / "carts.json")


@lru_cache(maxsize=None)
def _order_repository(directory: Path) -> JsonOrderRepository:
    return JsonOrderRepository(directory / "orders.json")


def book_repository() -> JsonBookRepository:
    return _book_repository(data_dir())


def cart_repository() -> JsonCartRepository:
    return _cart_repository(data_dir())


def order_repository() -> JsonOrderRepository:
    return _order_repository(data_dir())


def book_ledger() -> BookLedger:
    return BookLedger(book_repository())


@lru_cache(maxsize=None)
def payment_gateway() -> SimulatedPaymentGateway:
    return SimulatedPaymentGateway()
