"""Command 'add' of yawmak"""

from datetime import date
from typing import Annotated

import typer

from yawmak.services.config_service import get_config_service, get_storage_context
from yawmak.services.task_service import TaskService
from yawmak.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import parse_date

app = typer.Typer()


@app.command("add")
@command_wrapper
def add_command(
    task: Annotated[str, typer.Argument(help="The task description.")],
    due_date: Annotated[
        str | None,
        typer.Argument(
            help="The due date for the task in YYYY-MM-DD format.",
            callback=parse_date,
            show_default=False,
        ),
    ] = None,
    due_date_opt: Annotated[
        str | None,
        typer.Option(
            "--due-date",
            help="Due date in YYYY-MM-DD format (alternative to the argument).",
            callback=parse_date,
        ),
    ] = None,
    category: Annotated[
        str | None,
        typer.Option("--category", help="The category of the task."),
    ] = None,
    tags: Annotated[
        list[str] | None,
        typer.Option(
            "--tags",
            help="Tags for the task; repeat the option or separate with commas.",
        ),
    ] = None,
    priority: Annotated[
        int | None, typer.Option("--priority", help="Priority of the task.")
    ] = None,
) -> None:
    """Adds a new todo task with an optional due date, category, tags, and priority."""
    defaults = get_config_service().config.tasks
    due: date | None = due_date or due_date_opt

    task_service = TaskService(get_storage_context().task_repository)
    created = task_service.add_task(
        task,
        category=category if category is not None else defaults.default_category,
        tags=tags or [],
        due_date=due,
        priority=priority if priority is not None else defaults.default_priority,
    )
    format_success(f"Added task {created.id}: {created.name}")
