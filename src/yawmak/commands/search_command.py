"""Command 'search' of yawmak"""

from typing import Annotated

import typer

from yawmak.services.config_service import get_storage_context
from yawmak.services.task_service import TaskService
from yawmak.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import OutputFormat, resolve_output

app = typer.Typer()


@app.command("search")
@command_wrapper
def search_command(
    query: Annotated[str, typer.Argument(help="The search query.")],
    output: Annotated[
        OutputFormat | None, typer.Option("--output", "-o", help="Output format")
    ] = None,
) -> None:
    """Searches tasks by name, category, or tags (case-sensitive)."""
    task_service = TaskService(get_storage_context().task_repository)
    results = task_service.search_tasks(query)
    format_output(results, resolve_output(output), show_completion_date=True)
