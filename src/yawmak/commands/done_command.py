"""Command 'done' of yawmak"""

from typing import Annotated

import typer

from yawmak.services.config_service import get_storage_context
from yawmak.services.task_service import TaskService
from yawmak.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("done")
@command_wrapper
def done_command(
    task_id: Annotated[int, typer.Argument(metavar="ID", help="The ID of the todo task.")],
) -> None:
    """Marks a todo task as done."""
    task_service = TaskService(get_storage_context().task_repository)
    task = task_service.complete_task(task_id)

    name = task.name
    if len(name) > 60:
        name = name[:57] + "..."

    format_success(f"✓ Completed: {name}")
    format_info(f"To undo: yawmak update {task_id} --undone")
