"""Tests for output formatters."""

import json
from datetime import date

import yaml

from yawmak.models import Task
from yawmak.utils.ui.formatters import (
    format_error,
    format_names_table,
    format_output,
    format_success,
    format_tasks_table,
    tasks_to_data,
)

TASKS = [
    Task(id=1, name="Write report", category="Work", tags=["q4"], priority=2),
    Task(
        id=2,
        name="Buy milk",
        done=True,
        completion_date=date(2026, 10, 1),
    ),
]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class TestTasksTable:
    def test_columns_and_rows(self, capsys):
        format_tasks_table(TASKS)
        out = capsys.readouterr().out
        for header in ("ID", "Name", "Tags", "Priority"):
            assert header in out
        assert "Write report" in out
        assert "Buy milk" in out
        assert "Completion" not in out

    def test_completion_date_column(self, capsys):
        format_tasks_table(TASKS, show_completion_date=True)
        out = capsys.readouterr().out
        assert "2026-10-01" in out

    def test_empty(self, capsys):
        format_tasks_table([])
        assert "No tasks found" in capsys.readouterr().out

    def test_markup_is_not_interpreted(self, capsys):
        format_tasks_table([Task(id=3, name="[bold]literal[/bold] :fire:")])
        out = capsys.readouterr().out
        assert "[bold]literal[/bold]" in out
        assert ":fire:" in out


def test_names_table(capsys):
    format_names_table("Category", ["Home", "Work"])
    out = capsys.readouterr().out
    assert "Category" in out
    assert "Home" in out


# ---------------------------------------------------------------------------
# format_output
# ---------------------------------------------------------------------------


class TestFormatOutput:
    def test_json(self, capsys):
        format_output(TASKS, "json")
        data = json.loads(capsys.readouterr().out)
        assert data == tasks_to_data(TASKS)
        assert data[1]["completion_date"] == "2026-10-01"

    def test_yaml(self, capsys):
        format_output(TASKS, "yaml")
        data = yaml.safe_load(capsys.readouterr().out)
        assert data[0]["name"] == "Write report"
        assert data[0]["tags"] == ["q4"]

    def test_empty_json(self, capsys):
        format_output([], "json")
        assert json.loads(capsys.readouterr().out) == []

    def test_table_default(self, capsys):
        format_output(TASKS)
        assert "Write report" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def test_error_with_hint(capsys):
    format_error("Task not found: 1", "Run 'yawmak list' to see the available ids.")
    out = capsys.readouterr().out
    assert "Error: Task not found: 1" in out
    assert "yawmak list" in out


def test_success(capsys):
    format_success("Added task 1: [x]")
    assert "Success: Added task 1: [x]" in capsys.readouterr().out
