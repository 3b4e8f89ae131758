"""Decorators for command functions."""

import functools
import logging
import time
from collections.abc import Callable

import typer

from yawmak.errors import YawmakError
from yawmak.utils.logger import get_logger
from yawmak.utils.ui.formatters import format_error


def _fail(logger: logging.Logger, cmd: str, start: float, reason: str, **kwargs) -> None:
    logger.error(
        "command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, reason, **kwargs
    )


def command_wrapper(func: Callable):
    """Wrap a command with logging and error reporting.

    ``YawmakError`` is printed with the hint for its kind; any other exception
    is logged with its traceback and reported as unexpected. Both exit with
    code 1. ``typer.Exit`` raised by the command passes through.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        logger.debug("arguments for %s: %r", cmd, kwargs)

        try:
            result = func(*args, **kwargs)
        except typer.Exit:
            raise
        except YawmakError as e:
            _fail(logger, cmd, start, f"[{e.kind.value}] {e}")
            format_error(str(e), e.hint)
            raise typer.Exit(code=1) from e
        except Exception as e:
            _fail(logger, cmd, start, repr(e), exc_info=True)
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=1) from e

        logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
        return result

    return wrapper
