"""Map domain exceptions to CLI errors."""

from __future__ import annotations

import click

from bookstore.domain.exceptions import DomainException


def to_click_error(exc: DomainException) -> click.ClickException:
    if exc.retryable:
        return click.ClickException(f"{exc} — temporary failure, please retry.")
    return click.ClickException(str(exc))
