"""CLI commands for checkout and orders."""

from __future__ import annotations

import click

from bookstore.application.checkout import CheckoutHandler
from bookstore.application.delete_order import DeleteOrderHandler
from bookstore.application.dto import OrderDTO, PaymentDetails
from bookstore.application.list_orders import ListOrdersHandler
from bookstore.application.show_order import ShowOrderHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import (
    book_repository,
    cart_repository,
    order_repository,
    payment_gateway,
)
from bookstore.infrastructure.cli.errors import to_click_error


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (#{dto.id}, user {dto.user_id})")
    click.echo(f"Placed:  {dto.order_date}")
    click.echo(f"Payment: {dto.payment_reference}")
    click.echo()
    click.echo(f"  {'Title':<30} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*57}")
    for item in dto.items:
        click.echo(
            f"  {item.title[:30]:<30} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Order Total':<35} {dto.total_price:>22}")


@click.command("checkout")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.option("--card-number", required=True, help="16-digit card number.")
@click.option("--card-holder", required=True, help="Name on the card.")
@click.option("--expiry", required=True, help="Expiry date as MM/yy.")
@click.option("--cvv", required=True, help="3-digit security code.")
def checkout(user_id: int, card_number: str, card_holder: str, expiry: str, cvv: str) -> None:
    """Pay for the cart and place an order."""
    handler = CheckoutHandler(
        book_repo=book_repository(),
        cart_repo=cart_repository(),
        order_repo=order_repository(),
        gateway=payment_gateway(),
    )
    payment = PaymentDetails(
        card_number=card_number,
        card_holder_name=card_holder,
        expiry_date=expiry,
        cvv=cvv,
    )

    try:
        dto = handler.handle(user_id, payment)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Checkout complete.")
    _display_order(dto)


@click.command("show")
@click.argument("order_ref")
def order_show(order_ref: str) -> None:
    """Show an order by numeric ID or order number."""
    ref: int | str = int(order_ref) if order_ref.isdigit() else order_ref

    try:
        dto = ShowOrderHandler(order_repo=order_repository()).handle(ref)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, type=int, help="Only this user's orders.")
def order_list(user_id: int | None) -> None:
    """List orders, all of them or one user's history."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<5} {'Order Number':<22} {'User':>6} {'Placed':<20} {'Total':>10}")
    click.echo("-" * 67)
    for o in orders:
        click.echo(
            f"{o.id:<5} {o.order_number:<22} {o.user_id:>6} {o.order_date:<20} {o.total_price:>10}"
        )


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order record (admin)."""
    try:
        DeleteOrderHandler(order_repo=order_repository()).handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order #{order_id} deleted.")
