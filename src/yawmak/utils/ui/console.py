"""Shared Rich console."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Console used for all user-facing output.

    Emoji codes are disabled so task text such as ``:fire:`` prints verbatim.
    """
    return Console(emoji=False)
