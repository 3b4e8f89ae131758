"""Application errors.

Every failure that reaches the command layer is a ``YawmakError`` carrying an
``ErrorKind``. Commands render the kind's hint instead of inspecting message
text.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import duckdb


class ErrorKind(str, Enum):
    """Categories of failure surfaced to the user."""

    DATABASE = "database"
    IO = "io"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    IN_USE = "in_use"
    INVALID_INPUT = "invalid_input"


HINTS = {
    ErrorKind.DATABASE: "The database reported an error. Check the logs for details.",
    ErrorKind.IO: "File not found or not readable. Check the path and try again.",
    ErrorKind.NOT_FOUND: "Run 'yawmak list' to see the available ids.",
    ErrorKind.ALREADY_EXISTS: "This item already exists. Please check your input.",
    ErrorKind.IN_USE: "Item is still in use. Ensure it is not linked to any task.",
    ErrorKind.INVALID_INPUT: "Run the command with --help to see the expected input.",
}


class YawmakError(Exception):
    """Error with a structured kind and a user-facing hint."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.DATABASE):
        super().__init__(message)
        self.kind = kind

    @property
    def hint(self) -> str:
        return HINTS[self.kind]


class NotFoundError(YawmakError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.NOT_FOUND)


class AlreadyExistsError(YawmakError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.ALREADY_EXISTS)


class InUseError(YawmakError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.IN_USE)


class InvalidInputError(YawmakError):
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID_INPUT)


def classify(error: BaseException) -> ErrorKind:
    """Map a driver or OS exception to an error kind."""
    if isinstance(error, YawmakError):
        return error.kind
    if isinstance(error, duckdb.ConstraintException):
        return ErrorKind.ALREADY_EXISTS
    if isinstance(error, (duckdb.IOException, OSError)):
        return ErrorKind.IO
    if isinstance(error, duckdb.InvalidInputException):
        return ErrorKind.INVALID_INPUT
    return ErrorKind.DATABASE


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise DuckDB and OS errors as ``YawmakError``.

    Args:
        action: Short description of the operation, used as message prefix
    """
    try:
        yield
    except YawmakError:
        raise
    except (duckdb.Error, OSError) as e:
        raise YawmakError(f"{action}: {e}", classify(e)) from e
