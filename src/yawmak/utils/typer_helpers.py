"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from rich.markup import escape
from typer.core import TyperGroup

from yawmak.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, commands: list[str]) -> list[str]:
    """Known command names that look like ``attempted``, best match first."""
    return get_close_matches(
        attempted, sorted(commands), n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF
    )


class SuggestingGroup(TyperGroup):
    """Command group that proposes close matches for mistyped commands.

    ``yawmak lsit`` prints "Did you mean this? list" and exits with code 1.
    Without a close match click's usual usage error is raised.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            suggestions = suggest_commands(args[0], list(self.commands))
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f"[red]Error:[/red] unknown command {escape(repr(args[0]))} "
                f"for {ctx.info_name!r}",
                highlight=False,
            )
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(f"\n[yellow]{heading}[/yellow]")
            for suggestion in suggestions:
                console.print(f"    {suggestion}")
            raise typer.Exit(1) from e
