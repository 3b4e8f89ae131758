"""Shared helpers for command modules."""

from datetime import date, datetime
from enum import Enum

import typer

from yawmak.services.config_service import get_config_service

DATE_FORMAT = "%Y-%m-%d"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def parse_date(value: str | None) -> date | None:
    """Typer callback turning ``YYYY-MM-DD`` text into a date."""
    if value is None:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise typer.BadParameter("Invalid date format. Please use YYYY-MM-DD.") from e


def resolve_output(output: OutputFormat | None) -> str:
    """Explicit --output wins over the configured default."""
    if output is not None:
        return output.value
    return get_config_service().config.output.format
