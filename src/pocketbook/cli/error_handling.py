"""CLI error handling and request context helpers."""

import click

from pocketbook.database.base import Database
from pocketbook.domain.errors import DomainError, UnauthorizedError, unauthorized


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def require_user(ctx: click.Context) -> tuple[Database, str]:
    """Return the database and the authenticated user ID, or exit.

    Commands call this before touching any service so that a missing identity
    is rejected up front.
    """
    user_id = ctx.obj.get("user_id")
    if not user_id:
        handle_domain_error(ctx, UnauthorizedError(unauthorized()))
    return ctx.obj["db"], user_id
