"""Category management commands."""

from typing import Annotated

import typer

from yawmak.services.category_service import CategoryService
from yawmak.services.config_service import get_storage_context
from yawmak.utils.ui.formatters import format_names_table, format_success

from .decorators import command_wrapper

app = typer.Typer()


def _service() -> CategoryService:
    return CategoryService(get_storage_context().category_repository)


@app.command("add-category")
@command_wrapper
def add_category(
    name: Annotated[str, typer.Argument(help="The name of the category.")],
) -> None:
    """Adds a new category."""
    _service().add_category(name)
    format_success(f"Category '{name.strip()}' added")


@app.command("delete-category")
@command_wrapper
def delete_category(
    name: Annotated[str, typer.Argument(help="The name of the category.")],
) -> None:
    """Deletes a category that no task uses."""
    _service().delete_category(name)
    format_success(f"Category '{name}' deleted")


@app.command("list-categories")
@command_wrapper
def list_categories() -> None:
    """Lists all categories."""
    format_names_table("Category", _service().list_categories())
