"""Command 'update' of yawmak"""

from typing import Annotated

import typer

from yawmak.services.config_service import get_storage_context
from yawmak.services.task_service import TaskService
from yawmak.utils.ui.formatters import format_error, format_success

from .decorators import command_wrapper
from .utils import parse_date

app = typer.Typer()


@app.command("update")
@command_wrapper
def update_command(
    task_id: Annotated[
        int, typer.Argument(metavar="ID", help="The ID of the todo task to update.")
    ],
    task: Annotated[
        str | None, typer.Option("--task", help="The new task description.")
    ] = None,
    due_date: Annotated[
        str | None,
        typer.Option(
            "--due-date",
            help="The new due date for the task in YYYY-MM-DD format.",
            callback=parse_date,
        ),
    ] = None,
    category: Annotated[
        str | None, typer.Option("--category", help="The new category of the task.")
    ] = None,
    tags: Annotated[
        list[str] | None,
        typer.Option(
            "--tags", help="New tags (replace the current ones); repeat or comma-separate."
        ),
    ] = None,
    priority: Annotated[
        int | None, typer.Option("--priority", help="The new priority of the task.")
    ] = None,
    undone: Annotated[
        bool, typer.Option("--undone", help="Marks the task as not done.")
    ] = False,
) -> None:
    """Updates an existing todo task's details."""
    requested = [task, due_date, category, priority]
    if all(value is None for value in requested) and not tags and not undone:
        format_error("No updates specified")
        raise typer.Exit(1)

    task_service = TaskService(get_storage_context().task_repository)
    updated = task_service.update_task(
        task_id,
        name=task,
        category=category,
        tags=tags,
        due_date=due_date,
        priority=priority,
        undone=undone,
    )
    format_success(f"Updated task {updated.id}: {updated.name}")
