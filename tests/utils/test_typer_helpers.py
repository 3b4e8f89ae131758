"""Tests for SuggestingGroup and command suggestions."""

import typer
from typer.testing import CliRunner

from yawmak.utils.typer_helpers import SuggestingGroup, suggest_commands

runner = CliRunner()

app = typer.Typer(cls=SuggestingGroup)


@app.command("list")
def list_cmd() -> None:
    typer.echo("listing")


@app.command("list-tags")
def list_tags_cmd() -> None:
    typer.echo("tags")


def test_suggest_commands():
    assert suggest_commands("lsit", ["list", "done", "search"]) == ["list"]
    assert suggest_commands("zzz", ["list", "done"]) == []


def test_suggestion_printed():
    result = runner.invoke(app, ["lst"])
    assert result.exit_code == 1
    assert "Did you mean this?" in result.output
    assert "list" in result.output


def test_several_suggestions():
    result = runner.invoke(app, ["list-tag"])
    assert result.exit_code == 1
    assert "Did you mean one of these?" in result.output


def test_no_close_match_is_usage_error():
    result = runner.invoke(app, ["qwerty"])
    assert result.exit_code == 2
    assert "Did you mean" not in result.output


def test_known_command_runs():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "listing" in result.output
