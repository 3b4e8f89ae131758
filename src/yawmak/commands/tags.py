"""Tag management commands."""

from typing import Annotated

import typer

from yawmak.services.config_service import get_storage_context
from yawmak.services.tag_service import TagService
from yawmak.utils.ui.formatters import format_names_table, format_success

from .decorators import command_wrapper

app = typer.Typer()


def _service() -> TagService:
    return TagService(get_storage_context().tag_repository)


@app.command("add-tag")
@command_wrapper
def add_tag(
    name: Annotated[str, typer.Argument(help="The name of the tag.")],
) -> None:
    """Adds a new tag."""
    _service().add_tag(name)
    format_success(f"Tag '{name.strip()}' added")


@app.command("delete-tag")
@command_wrapper
def delete_tag(
    name: Annotated[str, typer.Argument(help="The name of the tag.")],
) -> None:
    """Deletes a tag that no task uses."""
    _service().delete_tag(name)
    format_success(f"Tag '{name}' deleted")


@app.command("list-tags")
@command_wrapper
def list_tags() -> None:
    """Lists all tags."""
    format_names_table("Tag", _service().list_tags())
