"""Main entry point for yawmak."""

from typing import Annotated

import typer

from yawmak import __version__
from yawmak.commands import (
    add_command,
    categories,
    completion_command,
    done_command,
    export_command,
    import_command,
    list_command,
    search_command,
    tags,
    update_command,
)
from yawmak.services.config_service import get_config_service
from yawmak.utils.logger import get_logger
from yawmak.utils.typer_helpers import SuggestingGroup
from yawmak.utils.ui.console import get_console

app = typer.Typer(
    name="yawmak",
    cls=SuggestingGroup,
    help="Yet another way to manage and keep your todos.",
    no_args_is_help=True,
)

console = get_console()

COMMAND_MODULES = [
    add_command,
    list_command,
    done_command,
    update_command,
    search_command,
    categories,
    tags,
    import_command,
    export_command,
    completion_command,
]

# Each module owns a small Typer app; its commands are exposed at the top level
for module in COMMAND_MODULES:
    app.registered_commands.extend(module.app.registered_commands)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]yawmak[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.callback()
def main_callback(
    db: Annotated[
        str | None,
        typer.Option(
            "--db",
            envvar="YAWMAK_DB",
            help="Database file to use instead of the configured one.",
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Manages your todos."""
    get_logger()
    get_config_service().set_db_override(db)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
