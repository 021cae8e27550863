"""Tests for category service and commands."""

from datetime import date

import pytest
from pocketbook.cli.main import cli
from pocketbook.domain.errors import ConflictError, NotFoundError, ValidationError

from conftest import USER_ID, OTHER_USER_ID


def test_create_category(category_service):
    category_id = category_service.create_category(USER_ID, "Food")

    category = category_service.get_category(USER_ID, category_id)
    assert category.name == "Food"
    assert category.user_id == USER_ID


def test_create_category_validation(category_service):
    with pytest.raises(ValidationError):
        category_service.create_category(USER_ID, "")

    category_service.create_category(USER_ID, "Food")
    with pytest.raises(ConflictError):
        category_service.create_category(USER_ID, "Food")


def test_categories_are_per_user(category_service):
    category_service.create_category(USER_ID, "Food")
    category_service.create_category(OTHER_USER_ID, "Food")
    category_service.create_category(OTHER_USER_ID, "Travel")

    assert [cat.name for cat in category_service.list_categories(USER_ID)] == ["Food"]


def test_resolve_category_by_name_or_id(category_service, sample_categories):
    food_id = sample_categories["Food"]

    assert category_service.resolve_category(USER_ID, "Food") == food_id
    assert category_service.resolve_category(USER_ID, str(food_id)) == food_id
    with pytest.raises(NotFoundError):
        category_service.resolve_category(OTHER_USER_ID, "Food")


def test_rename_category(category_service, sample_categories):
    category_service.rename_category(USER_ID, sample_categories["Food"], "Groceries")

    assert category_service.get_category(USER_ID, sample_categories["Food"]).name == "Groceries"
    with pytest.raises(ConflictError):
        category_service.rename_category(USER_ID, sample_categories["Rent"], "Groceries")


def test_delete_category_keeps_transactions(
    category_service, transaction_service, sample_categories, add_transaction
):
    txn_id = add_transaction(-1_000, date(2024, 3, 1), sample_categories["Food"])

    category_service.delete_category(USER_ID, sample_categories["Food"])

    txn = transaction_service.get_transaction(USER_ID, txn_id)
    assert txn is not None
    assert txn.category_id is None
    with pytest.raises(NotFoundError):
        category_service.delete_category(USER_ID, sample_categories["Food"])


def test_bulk_delete_categories(category_service, sample_categories):
    ids = [sample_categories["Food"], sample_categories["Rent"]]

    assert category_service.delete_categories(USER_ID, ids) == sorted(ids)
    assert len(category_service.list_categories(USER_ID)) == 3


def test_category_list_command(cli_runner, cli_args, sample_categories):
    result = cli_runner.invoke(cli, cli_args + ["category", "list"])

    assert result.exit_code == 0
    assert f"Food (ID: {sample_categories['Food']})" in result.output


def test_category_list_command_empty(cli_runner, cli_args):
    result = cli_runner.invoke(cli, cli_args + ["category", "list"])

    assert result.exit_code == 0
    assert "No categories found" in result.output


def test_category_create_command(cli_runner, cli_args):
    result = cli_runner.invoke(cli, cli_args + ["category", "create", "Food"])

    assert result.exit_code == 0
    assert "Created category 'Food'" in result.output


def test_category_rename_and_delete_commands(cli_runner, cli_args, sample_categories):
    result = cli_runner.invoke(cli, cli_args + ["category", "rename", "Food", "Groceries"])
    assert result.exit_code == 0
    assert "Renamed category to 'Groceries'" in result.output

    result = cli_runner.invoke(cli, cli_args + ["category", "delete", "Groceries"])
    assert result.exit_code == 0
    assert "Deleted category 'Groceries'" in result.output


def test_category_delete_unknown_command(cli_runner, cli_args):
    result = cli_runner.invoke(cli, cli_args + ["category", "delete", "Nope"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_category_bulk_delete_command(cli_runner, cli_args, sample_categories):
    result = cli_runner.invoke(
        cli,
        cli_args
        + ["category", "bulk-delete", str(sample_categories["Food"]), str(sample_categories["Rent"])],
    )

    assert result.exit_code == 0
    assert "Deleted 2 categories" in result.output
