"""Command 'completion' of yawmak"""

from enum import Enum
from typing import Annotated

import click
import typer
from click.shell_completion import get_completion_class
from typer.completion import completion_init

from .decorators import command_wrapper

# Registers Typer's shell classes (including powershell) with click
completion_init()

app = typer.Typer()

PROG_NAME = "yawmak"
COMPLETE_VAR = "_YAWMAK_COMPLETE"


class Shell(str, Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"


@app.command("completion")
@command_wrapper
def completion_command(
    shell: Annotated[
        Shell,
        typer.Argument(help="The shell to generate the completion script for."),
    ],
) -> None:
    """Prints a shell completion script to stdout."""
    root = click.get_current_context().find_root().command
    completion_class = get_completion_class(shell.value)
    script = completion_class(root, {}, PROG_NAME, COMPLETE_VAR).source()
    typer.echo(script)
