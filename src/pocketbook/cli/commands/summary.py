"""Dashboard summary command."""

import json

import click
from pocketbook.cli.account_resolution import resolve_account_or_exit
from pocketbook.cli.date_filters import PERIOD_CHOICES, resolve_cli_date_range
from pocketbook.cli.error_handling import handle_domain_error, require_user
from pocketbook.domain.account import AccountService
from pocketbook.domain.entities import SummaryPayload
from pocketbook.domain.reporting import ReportingEngine
from pocketbook.utils.amount_parser import format_miliunits
from pocketbook.utils.date_parser import format_summary_date, parse_summary_date


def _format_change(change: float) -> str:
    return f"{change:+.1f}%"


def _display_summary(payload: SummaryPayload) -> None:
    """Render the summary as text."""
    click.echo(
        f"{'Remaining':<12} {format_miliunits(payload.remaining_amount):>16} "
        f"{_format_change(payload.remaining_change):>10}"
    )
    click.echo(
        f"{'Income':<12} {format_miliunits(payload.income_amount):>16} "
        f"{_format_change(payload.income_change):>10}"
    )
    click.echo(
        f"{'Expenses':<12} {format_miliunits(payload.expenses_amount):>16} "
        f"{_format_change(payload.expenses_change):>10}"
    )

    click.echo("\nSpending by category:")
    if not payload.categories:
        click.echo("  (none)")
    for share in payload.categories:
        click.echo(f"  {share.name:<30} {format_miliunits(share.value):>16}")

    click.echo("\nDaily activity:")
    if not payload.days:
        click.echo("  (none)")
    for point in payload.days:
        click.echo(
            f"  {format_summary_date(point.date)} "
            f"{format_miliunits(point.income):>14} {format_miliunits(point.expenses):>14}"
        )


@click.command("summary")
@click.option("--from", "start_date", help="Start date (dd-MM-yyyy), default 30 days ago")
@click.option("--to", "end_date", help="End date (dd-MM-yyyy), default today")
@click.option("--period", type=click.Choice(PERIOD_CHOICES), help="Named period")
@click.option("--account", help="Limit the summary to one account (name or ID)")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def summary(
    ctx,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    account: str | None,
    as_json: bool,
):
    """Show the dashboard summary.

    Income, expenses and remaining balance for the period, each with the
    percentage change against the preceding period of the same length, the
    top three spending categories plus "Other", and a day-by-day series.

    Examples:
        pocketbook summary
        pocketbook summary --from 01-03-2024 --to 31-03-2024 --account Wallet
        pocketbook summary --period last-month --json
    """
    db, user_id = require_user(ctx)

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), user_id, account)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period=period,
        parser=parse_summary_date,
    )

    try:
        payload = ReportingEngine(db).compute_summary(
            user_id=user_id, account_id=account_id, date_from=start, date_to=end
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(json.dumps({"data": payload.to_dict()}, indent=2))
        return

    click.echo(
        f"\nSummary {format_summary_date(payload.period.start)} to "
        f"{format_summary_date(payload.period.end)}"
    )
    click.echo("-" * 40)
    _display_summary(payload)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
