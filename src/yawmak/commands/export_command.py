"""Command 'export' of yawmak"""

from pathlib import Path
from typing import Annotated

import typer

from yawmak.models import DataFormat
from yawmak.services.config_service import get_storage_context
from yawmak.services.data_service import DataService
from yawmak.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("export")
@command_wrapper
def export_command(
    fmt: Annotated[
        DataFormat,
        typer.Argument(
            metavar="FORMAT", help="The export format.", case_sensitive=False
        ),
    ],
    file: Annotated[Path, typer.Argument(help="The path of the output file.")],
) -> None:
    """Exports all todos to a JSON, CSV, Parquet, or Excel file."""
    data_service = DataService(get_storage_context().data_repository)
    count = data_service.export_data(fmt, file)
    format_success(f"Exported {count} task(s) to {file}")
