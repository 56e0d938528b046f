import click

from bookstore.infrastructure.cli.book_commands import (
    book_add,
    book_delete,
    book_inventory,
    book_list,
    book_search,
    book_stock,
    book_top,
    book_update,
)
from bookstore.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
)
from bookstore.infrastructure.cli.order_commands import (
    checkout,
    order_delete,
    order_list,
    order_show,
)
from bookstore.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Bookstore — catalogue, carts and checkout"""
    configure_logging()


@cli.group()
def book() -> None:
    """Manage the catalogue and stock."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Browse and administer orders."""


# Register subcommands
cli.add_command(checkout)
book.add_command(book_add)
book.add_command(book_delete)
book.add_command(book_inventory)
book.add_command(book_list)
book.add_command(book_search)
book.add_command(book_stock)
book.add_command(book_top)
book.add_command(book_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
