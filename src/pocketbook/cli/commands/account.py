"""Account management commands."""

import click
from pocketbook.cli.account_resolution import resolve_account_or_exit
from pocketbook.cli.error_handling import handle_domain_error, require_user
from pocketbook.domain.account import AccountService


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.pass_context
def create_account(ctx, name: str):
    """Create a new account.

    Examples:
        pocketbook account create "Wallet"
        pocketbook account create "Checking"
    """
    db, user_id = require_user(ctx)
    service = AccountService(db)

    try:
        account_id = service.create_account(user_id=user_id, name=name)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{name.strip()}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List your accounts."""
    db, user_id = require_user(ctx)
    service = AccountService(db)

    accounts = service.list_accounts(user_id)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 40)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.name}")


@account_group.command("rename")
@click.argument("account", metavar="ACCOUNT")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_account(ctx, account: str, new_name: str) -> None:
    """Rename an account.

    ACCOUNT can be an account name or ID.

    Examples:
        pocketbook account rename "Wallet" "Cash"
        pocketbook account rename 1 "Checking"
    """
    db, user_id = require_user(ctx)
    service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, service, user_id, account)

    try:
        service.rename_account(user_id=user_id, account_id=account_id, name=new_name)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed account to '{new_name.strip()}'")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account and all of its transactions.

    ACCOUNT can be an account name or ID.

    Examples:
        pocketbook account delete "Wallet"
        pocketbook account delete 1 --yes
    """
    db, user_id = require_user(ctx)
    service = AccountService(db)
    account_id = resolve_account_or_exit(ctx, service, user_id, account)
    account_obj = service.get_account(user_id, account_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}' (ID: {account_id}) "
        "and its transactions?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(user_id, account_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted account '{account_obj.name}'")


@account_group.command("bulk-delete")
@click.argument("account_ids", nargs=-1, type=int, required=True)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def bulk_delete_accounts(ctx, account_ids: tuple[int, ...], yes: bool) -> None:
    """Delete several accounts by ID.

    Example:
        pocketbook account bulk-delete 1 2 3 --yes
    """
    db, user_id = require_user(ctx)
    service = AccountService(db)

    if not yes and not click.confirm(f"Delete {len(account_ids)} account(s) and their transactions?"):
        click.echo("Deletion cancelled.")
        return

    deleted = service.delete_accounts(user_id, list(account_ids))
    click.echo(f"Deleted {len(deleted)} account(s)")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
