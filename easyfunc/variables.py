"""Inspecting and converting arbitrary values."""

from typing import Any

__all__ = ["boolval", "debug_zval_dump", "is_int"]


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def boolval(value: Any) -> bool:
    """Return False for the empty string and the integer 0, True for anything else."""
    if isinstance(value, str) and value == "":
        return False
    if _is_plain_int(value) and value == 0:
        return False
    return True


def debug_zval_dump(*args: Any) -> None:
    """Print the representation of each value on its own line."""
    for value in args:
        print(repr(value))


def is_int(value: Any) -> bool:
    """Return True if ``value`` is an integer (booleans excluded)."""
    return _is_plain_int(value)