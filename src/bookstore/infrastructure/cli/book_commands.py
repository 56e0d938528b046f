"""CLI commands for the book catalogue and stock."""

from __future__ import annotations

import click

from bookstore.application.add_book import AddBookHandler
from bookstore.application.browse_books import (
    ListBooksHandler,
    SearchBooksHandler,
    TopBooksHandler,
)
from bookstore.application.delete_book import DeleteBookHandler
from bookstore.application.dto import BookDTO
from bookstore.application.set_stock import SetStockHandler
from bookstore.application.show_inventory import ShowInventoryHandler
from bookstore.application.update_book import UpdateBookHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import book_ledger, book_repository
from bookstore.infrastructure.cli.errors import to_click_error


def _display_books(books: list[BookDTO]) -> None:
    if not books:
        click.echo("No books found.")
        return

    click.echo(f"{'ID':<5} {'Title':<30} {'Author':<20} {'Price':>8} {'Stock':>6} {'Sold':>6}")
    click.echo("-" * 80)
    for b in books:
        click.echo(
            f"{b.id:<5} {b.title[:30]:<30} {b.author[:20]:<20} "
            f"{b.price:>8} {b.physical_copies:>6} {b.sold_copies:>6}"
        )


@click.command("add")
@click.option("--title", required=True, help="Book title.")
@click.option("--author", required=True, help="Author name.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
@click.option("--copies", default=0, type=int, show_default=True, help="Initial physical copies.")
def book_add(title: str, author: str, price: str, copies: int) -> None:
    """Add a new book to the catalogue."""
    handler = AddBookHandler(book_repo=book_repository())

    try:
        dto = handler.handle(title=title, author=author, price=price, copies=copies)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Book #{dto.id} '{dto.title}' added at {dto.price} ({dto.physical_copies} copies)")


@click.command("list")
def book_list() -> None:
    """List every book with its stock."""
    _display_books(ListBooksHandler(book_repo=book_repository()).handle())


@click.command("search")
@click.argument("keyword")
def book_search(keyword: str) -> None:
    """Find books whose title contains KEYWORD."""
    _display_books(SearchBooksHandler(book_repo=book_repository()).handle(keyword))


@click.command("top")
@click.option("--limit", default=5, type=int, show_default=True, help="How many books to show.")
def book_top(limit: int) -> None:
    """Show the best-selling books."""
    _display_books(TopBooksHandler(book_repo=book_repository()).handle(limit))


@click.command("update")
@click.option("--id", "book_id", required=True, type=int, help="Book ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--author", default=None, help="New author.")
@click.option("--price", default=None, help="New price (e.g. 12.00).")
def book_update(book_id: int, title: str | None, author: str | None, price: str | None) -> None:
    """Edit a book's title, author or price."""
    handler = UpdateBookHandler(book_repo=book_repository())

    try:
        dto = handler.handle(book_id=book_id, title=title, author=author, price=price)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Book #{dto.id} updated: '{dto.title}' by {dto.author} at {dto.price}")


@click.command("delete")
@click.option("--id", "book_id", required=True, type=int, help="Book ID.")
def book_delete(book_id: int) -> None:
    """Remove a book from the catalogue."""
    try:
        DeleteBookHandler(book_repo=book_repository()).handle(book_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Book #{book_id} deleted.")


@click.command("stock")
@click.option("--id", "book_id", required=True, type=int, help="Book ID.")
@click.option("--copies", required=True, type=int, help="Physical copies on hand.")
def book_stock(book_id: int, copies: int) -> None:
    """Set the physical stock level of a book."""
    try:
        SetStockHandler(ledger=book_ledger()).handle(book_id, copies)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Stock for book #{book_id} set to {copies}")


@click.command("inventory")
def book_inventory() -> None:
    """Show physical and sold copies per book."""
    lines = ShowInventoryHandler(book_repo=book_repository()).handle()
    if not lines:
        click.echo("No books found.")
        return

    click.echo(f"{'ID':<5} {'Title':<30} {'Stock':>6} {'Sold':>6}")
    click.echo("-" * 50)
    for line in lines:
        click.echo(f"{line.book_id:<5} {line.title[:30]:<30} {line.physical:>6} {line.sold:>6}")
