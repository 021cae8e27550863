"""Transaction management commands."""

import click
from pocketbook.cli.account_resolution import resolve_account_or_exit
from pocketbook.cli.date_filters import PERIOD_CHOICES, resolve_cli_date_range
from pocketbook.cli.error_handling import handle_domain_error, require_user
from pocketbook.domain.account import AccountService
from pocketbook.domain.category import CategoryService
from pocketbook.domain.transaction import TransactionService
from pocketbook.utils.amount_parser import (
    convert_amount_to_miliunits,
    format_miliunits,
    parse_amount,
)
from pocketbook.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--date",
    "txn_date",
    default="today",
    show_default=True,
    help="Transaction date (dd-MM-yyyy, YYYY-MM-DD or 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Amount, negative for expenses (e.g., -12.50)")
@click.option("--payee", required=True, help="Payee")
@click.option("--category", help="Category name or ID")
@click.option("--notes", help="Notes")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    txn_date: str,
    amount: str,
    payee: str,
    category: str | None,
    notes: str | None,
):
    """Add a transaction.

    Examples:
        pocketbook transaction add --account Wallet --amount -12.50 --payee "Bakery" --category Food
        pocketbook transaction add --account 1 --date 01-03-2024 --amount 2500 --payee "Employer"
    """
    db, user_id = require_user(ctx)
    transaction_service = TransactionService(db)
    account_service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, account_service, user_id, account)

    try:
        parsed_date = parse_date(txn_date)
        miliunits = convert_amount_to_miliunits(parse_amount(amount))
        category_id = None
        if category:
            category_id = CategoryService(db).resolve_category(user_id, category)

        transaction_id = transaction_service.create_transaction(
            user_id=user_id,
            account_id=account_id,
            date=parsed_date,
            amount=miliunits,
            payee=payee,
            category_id=category_id,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Amount: {format_miliunits(miliunits)}")
    click.echo(f"  Payee: {payee.strip()}")
    if category:
        click.echo(f"  Category: {category}")


@transaction_group.command("list")
@click.option("--account", help="Account name or ID")
@click.option("--from", "start_date", help="Start date (dd-MM-yyyy)")
@click.option("--to", "end_date", help="End date (dd-MM-yyyy)")
@click.option("--period", type=click.Choice(PERIOD_CHOICES), help="Named period")
@click.pass_context
def list_transactions(
    ctx,
    account: str | None,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
):
    """List transactions, newest first."""
    db, user_id = require_user(ctx)
    transaction_service = TransactionService(db)
    account_service = AccountService(db)

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, account_service, user_id, account)

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    transactions = transaction_service.list_transactions(
        user_id=user_id, start_date=start, end_date=end, account_id=account_id
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    accounts = {acc.id: acc.name for acc in account_service.list_accounts(user_id)}
    categories = {cat.id: cat.name for cat in CategoryService(db).list_categories(user_id)}

    click.echo(
        f"{'ID':>5}  {'Date':<10}  {'Account':<15}  {'Category':<15}  {'Payee':<20}  {'Amount':>12}"
    )
    click.echo("-" * 87)
    for txn in transactions:
        category_name = categories.get(txn.category_id, "") if txn.category_id else ""
        click.echo(
            f"{txn.id:>5}  {txn.date.isoformat():<10}  {accounts.get(txn.account_id, ''):<15.15}  "
            f"{category_name:<15.15}  {txn.payee:<20.20}  {format_miliunits(txn.amount):>12}"
        )


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show one transaction."""
    db, user_id = require_user(ctx)
    txn = TransactionService(db).get_transaction(user_id, transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    account = AccountService(db).get_account(user_id, txn.account_id)
    click.echo(f"Transaction {txn.id}")
    click.echo(f"  Account: {account.name if account else txn.account_id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_miliunits(txn.amount)}")
    click.echo(f"  Payee: {txn.payee}")
    if txn.category_id is not None:
        category = CategoryService(db).get_category(user_id, txn.category_id)
        click.echo(f"  Category: {category.name if category else txn.category_id}")
    if txn.notes:
        click.echo(f"  Notes: {txn.notes}")


@transaction_group.command("edit")
@click.argument("transaction_id", type=int)
@click.option("--account", help="Account name or ID")
@click.option("--date", "txn_date", help="Transaction date")
@click.option("--amount", help="Amount, negative for expenses")
@click.option("--payee", help="Payee")
@click.option("--category", help="Category name or ID, or empty string to clear")
@click.option("--notes", help="Notes")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: int,
    account: str | None,
    txn_date: str | None,
    amount: str | None,
    payee: str | None,
    category: str | None,
    notes: str | None,
) -> None:
    """Edit a transaction.

    Updates only the fields that are provided. Use --category "" to clear the category.

    Examples:
        pocketbook transaction edit 1 --amount -75.00
        pocketbook transaction edit 1 --category ""
    """
    db, user_id = require_user(ctx)
    transaction_service = TransactionService(db)

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), user_id, account)

    try:
        parsed_date = parse_date(txn_date) if txn_date is not None else None
        miliunits = None
        if amount is not None:
            miliunits = convert_amount_to_miliunits(parse_amount(amount))

        category_id = None
        clear_category = category == ""
        if category:
            category_id = CategoryService(db).resolve_category(user_id, category)

        transaction_service.update_transaction(
            user_id=user_id,
            transaction_id=transaction_id,
            account_id=account_id,
            date=parsed_date,
            amount=miliunits,
            payee=payee,
            category_id=category_id,
            notes=notes,
            clear_category=clear_category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction."""
    db, user_id = require_user(ctx)
    try:
        TransactionService(db).delete_transaction(user_id, transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("bulk-delete")
@click.argument("transaction_ids", nargs=-1, type=int, required=True)
@click.pass_context
def bulk_delete_transactions(ctx, transaction_ids: tuple[int, ...]) -> None:
    """Delete several transactions by ID."""
    db, user_id = require_user(ctx)
    deleted = TransactionService(db).delete_transactions(user_id, list(transaction_ids))
    click.echo(f"Deleted {len(deleted)} transaction(s)")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
