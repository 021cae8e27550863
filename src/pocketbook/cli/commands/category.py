"""Category management commands."""

import click
from pocketbook.cli.error_handling import handle_domain_error, require_user
from pocketbook.domain.category import CategoryService


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List your categories."""
    db, user_id = require_user(ctx)
    service = CategoryService(db)

    categories = service.list_categories(user_id)
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.name} (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new category."""
    db, user_id = require_user(ctx)
    service = CategoryService(db)

    try:
        category_id = service.create_category(user_id=user_id, name=name)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


@category_group.command("rename")
@click.argument("category")
@click.argument("new_name")
@click.pass_context
def rename_category(ctx, category: str, new_name: str):
    """Rename a category. CATEGORY can be a name or ID."""
    db, user_id = require_user(ctx)
    service = CategoryService(db)

    try:
        category_id = service.resolve_category(user_id, category)
        service.rename_category(user_id, category_id, new_name)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed category to '{new_name.strip()}'")


@category_group.command("delete")
@click.argument("category")
@click.pass_context
def delete_category(ctx, category: str):
    """Delete a category. Its transactions become uncategorized."""
    db, user_id = require_user(ctx)
    service = CategoryService(db)

    try:
        category_id = service.resolve_category(user_id, category)
        service.delete_category(user_id, category_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted category '{category}'")


@category_group.command("bulk-delete")
@click.argument("category_ids", nargs=-1, type=int, required=True)
@click.pass_context
def bulk_delete_categories(ctx, category_ids: tuple[int, ...]):
    """Delete several categories by ID."""
    db, user_id = require_user(ctx)
    service = CategoryService(db)

    deleted = service.delete_categories(user_id, list(category_ids))
    click.echo(f"Deleted {len(deleted)} categor{'y' if len(deleted) == 1 else 'ies'}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
