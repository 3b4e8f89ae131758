"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from yawmak.models import Task
from yawmak.utils.ui.console import get_console

console = get_console()

TASK_COLUMNS = ["ID", "Name", "Category", "Tags", "Due Date", "Done", "Priority"]


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return escape(", ".join(str(v) for v in value))
    if value is None:
        return ""
    return escape(str(value))


def format_tasks_table(tasks: list[Task], show_completion_date: bool = False) -> None:
    """Render tasks as an aligned table."""
    table = Table(show_header=True, header_style="bold magenta")
    for column in TASK_COLUMNS:
        justify = "right" if column in ("ID", "Priority") else "left"
        table.add_column(column, justify=justify)
    if show_completion_date:
        table.add_column("Completion Date")

    for task in tasks:
        row = [
            str(task.id),
            escape(task.name),
            _cell(task.category),
            _cell(task.tags),
            _cell(task.due_date),
            _cell(task.done),
            str(task.priority),
        ]
        if show_completion_date:
            row.append(_cell(task.completion_date))
        table.add_row(*row)

    console.print(table)
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")


def format_names_table(title: str, names: list[str]) -> None:
    """Render a single-column table (categories, tags)."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column(title)
    for name in names:
        table.add_row(escape(name))
    console.print(table)


def tasks_to_data(tasks: list[Task]) -> list[dict[str, Any]]:
    """Plain, JSON-compatible representation of tasks."""
    return [task.model_dump(mode="json") for task in tasks]


def format_output(
    data: Any,
    output_format: str = "table",
    show_completion_date: bool = False,
) -> None:
    """Format and display tasks (or plain data) in the requested format."""
    if output_format in ("json", "yaml"):
        if isinstance(data, list) and data and isinstance(data[0], Task):
            data = tasks_to_data(data)
        if output_format == "json":
            print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
        else:
            print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, list) and all(isinstance(item, Task) for item in data):
        format_tasks_table(data, show_completion_date=show_completion_date)
    else:
        console.print(data)


def format_error(message: str, hint: str | None = None) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]", highlight=False)


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}", highlight=False)


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}", highlight=False)


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}", highlight=False)
