"""Command 'list' of yawmak"""

from typing import Annotated

import typer

from yawmak.services.config_service import get_storage_context
from yawmak.services.task_service import TaskService
from yawmak.utils.ui.formatters import format_error, format_output

from .decorators import command_wrapper
from .utils import OutputFormat, resolve_output

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_command(
    done_only: Annotated[
        bool, typer.Option("--done-only", help="Lists only completed tasks.")
    ] = False,
    undone_only: Annotated[
        bool,
        typer.Option("--undone-only", help="Lists only open tasks (the default)."),
    ] = False,
    all_tasks: Annotated[
        bool, typer.Option("--all", "-a", help="Lists open and completed tasks.")
    ] = False,
    output: Annotated[
        OutputFormat | None, typer.Option("--output", "-o", help="Output format")
    ] = None,
) -> None:
    """Lists open todos; --done-only lists completed ones, --all lists both."""
    if sum((done_only, undone_only, all_tasks)) > 1:
        format_error("Use only one of --done-only, --undone-only and --all")
        raise typer.Exit(1)

    if all_tasks:
        done = None
    else:
        done = done_only

    task_service = TaskService(get_storage_context().task_repository)
    tasks = task_service.list_tasks(done=done)
    format_output(
        tasks,
        resolve_output(output),
        show_completion_date=done is not False,
    )
