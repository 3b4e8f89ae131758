"""Command 'import' of yawmak"""

from pathlib import Path
from typing import Annotated

import typer

from yawmak.models import DataFormat, ImportStrategy
from yawmak.services.config_service import get_storage_context
from yawmak.services.data_service import DataService
from yawmak.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer()


@app.command("import")
@command_wrapper
def import_command(
    fmt: Annotated[
        DataFormat,
        typer.Argument(
            metavar="FORMAT",
            help="The format of the file to import.",
            case_sensitive=False,
        ),
    ],
    file: Annotated[Path, typer.Argument(help="The path of the file to import.")],
    strategy: Annotated[
        ImportStrategy,
        typer.Argument(
            help=(
                "skip: keep existing tasks, remove: load under new ids, "
                "upsert: replace tasks with the same id."
            ),
            case_sensitive=False,
        ),
    ],
) -> None:
    """Imports todos from a JSON, CSV, Parquet, or Excel file."""
    data_service = DataService(get_storage_context().data_repository)
    result = data_service.import_data(fmt, file, strategy)

    format_success(f"Imported {result.tasks_written} task(s) from {file}")
    skipped = result.rows_read - result.tasks_written
    if skipped:
        format_warning(f"{skipped} row(s) were not written")
