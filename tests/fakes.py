"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy
import threading
from dataclasses import replace

from bookstore.domain.exceptions import PersistenceError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.model.order import Order
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.repository.order_repository import OrderRepository


class FakeBookRepository(BookRepository):
    """Stock primitives run under one lock per book."""

    def __init__(self, books: list[Book] | None = None) -> None:
        self._store: dict[int, Book] = {}
        self._locks: dict[int, threading.Lock] = {}
        self.decrement_calls: list[tuple[int, int]] = []
        for b in books or []:
            self.add(b)

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def get_by_id(self, book_id: int) -> Book | None:
        book = self._store.get(book_id)
        return replace(book) if book is not None else None

    def list_all(self) -> list[Book]:
        return [replace(self._store[k]) for k in sorted(self._store)]

    def add(self, book: Book) -> None:
        if book.id in self._store:
            raise ValidationError(f"Book #{book.id} already exists")
        self._store[book.id] = replace(book)
        self._locks[book.id] = threading.Lock()

    def update_details(self, book: Book) -> None:
        stored = self._store[book.id]
        with self._locks[book.id]:
            stored.title, stored.author, stored.price = book.title, book.author, book.price

    def delete(self, book_id: int) -> bool:
        return self._store.pop(book_id, None) is not None

    def decrement_if_available(self, book_id: int, quantity: int) -> bool | None:
        self.decrement_calls.append((book_id, quantity))
        if book_id not in self._store:
            return None
        with self._locks[book_id]:
            book = self._store[book_id]
            if book.physical_copies < quantity:
                return False
            book.physical_copies -= quantity
            return True

    def increment_physical(self, book_id: int, quantity: int) -> bool:
        if book_id not in self._store:
            return False
        with self._locks[book_id]:
            self._store[book_id].physical_copies += quantity
        return True

    def increment_sold(self, book_id: int, quantity: int) -> bool:
        if book_id not in self._store:
            return False
        with self._locks[book_id]:
            self._store[book_id].sold_copies += quantity
        return True

    def set_physical(self, book_id: int, copies: int) -> bool:
        if book_id not in self._store:
            return False
        with self._locks[book_id]:
            self._store[book_id].physical_copies = copies
        return True


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[int, ShoppingCart] = {}

    def get(self, user_id: int) -> ShoppingCart | None:
        cart = self._store.get(user_id)
        return copy.deepcopy(cart) if cart is not None else None

    def save(self, cart: ShoppingCart) -> None:
        self._store[cart.user_id] = copy.deepcopy(cart)

    def delete(self, user_id: int) -> None:
        self._store.pop(user_id, None)


class FakeOrderRepository(OrderRepository):
    """Set ``fail_saves`` to make ``save`` raise PersistenceError."""

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.fail_saves = False

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def get_by_order_number(self, order_number: str) -> Order | None:
        for order in self._store.values():
            if order.order_number == order_number:
                return order
        return None

    def list_by_user(self, user_id: int) -> list[Order]:
        return [o for o in self._store.values() if o.user_id == user_id]

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if self.fail_saves:
            raise PersistenceError("order store unavailable")
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order

    def delete(self, order_id: int) -> bool:
        return self._store.pop(order_id, None) is not None
