"""CLI commands for a user's shopping cart."""

from __future__ import annotations

import click

from bookstore.application.add_to_cart import AddToCartHandler
from bookstore.application.clear_cart import ClearCartHandler
from bookstore.application.remove_from_cart import RemoveFromCartHandler
from bookstore.application.show_cart import ShowCartHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import book_ledger, book_repository, cart_repository
from bookstore.infrastructure.cli.errors import to_click_error

user_option = click.option("--user", "user_id", required=True, type=int, help="User ID.")


@click.command("add")
@user_option
@click.option("--book", "book_id", required=True, type=int, help="Book ID.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Copies wanted.")
def cart_add(user_id: int, book_id: int, quantity: int) -> None:
    """Put a book in the cart, or change its quantity."""
    handler = AddToCartHandler(cart_repo=cart_repository(), ledger=book_ledger())

    try:
        handler.handle(user_id=user_id, book_id=book_id, quantity=quantity)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Cart of user {user_id}: book #{book_id} x {quantity}")


@click.command("remove")
@user_option
@click.option("--book", "book_id", required=True, type=int, help="Book ID.")
def cart_remove(user_id: int, book_id: int) -> None:
    """Take a book out of the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository(), ledger=book_ledger())

    try:
        handler.handle(user_id=user_id, book_id=book_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Book #{book_id} removed from the cart of user {user_id}")


@click.command("show")
@user_option
def cart_show(user_id: int) -> None:
    """Show the cart with current prices."""
    dto = ShowCartHandler(cart_repo=cart_repository(), book_repo=book_repository()).handle(user_id)

    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Book':<6} {'Title':<30} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*64}")
    for line in dto.lines:
        click.echo(
            f"  {line.book_id:<6} {line.title[:30]:<30} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Cart Total':<42} {dto.total:>21}")


@click.command("clear")
@user_option
def cart_clear(user_id: int) -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle(user_id)
    click.echo(f"Cart of user {user_id} cleared.")
