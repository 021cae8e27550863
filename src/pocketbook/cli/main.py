"""Main CLI entry point."""

import click
from pocketbook.config import get_settings
from pocketbook.database.factories import create_sqlite_database
from pocketbook.logging_setup import configure_logging

# Import and register all commands at module level
from pocketbook.cli.commands import (
    account,
    category,
    transaction,
    summary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides POCKETBOOK_DB_PATH environment variable)",
    envvar="POCKETBOOK_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    help="Authenticated user ID (overrides POCKETBOOK_USER_ID environment variable)",
    envvar="POCKETBOOK_USER_ID",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. INFO or DEBUG (overrides POCKETBOOK_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str | None, log_level: str | None):
    """Pocketbook - personal finance ledger.

    Keep accounts, categories and transactions per user and show a dashboard
    summary of income, expenses and spending by category.
    """
    ctx.ensure_object(dict)
    settings = get_settings()
    configure_logging(log_level or settings.log_level)

    ctx.obj["user_id"] = user_id or settings.user_id

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
category.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
