"""Stripping characters from either end of a string."""

from enum import IntEnum
from typing import Optional

__all__ = ["TrimType", "trim_with", "trim", "ltrim", "rtrim"]

# Space, CR, LF, tab, vertical tab, NUL and the digit zero.
DEFAULT_CUTSET = " \r\n\t\v\x00" + "0"


class TrimType(IntEnum):
    """Which ends of a string a trim works on."""

    DEFAULT = 0
    LEFT = 1
    RIGHT = 2


def trim_with(trim_type: TrimType, text: str, cutset: Optional[str] = None) -> str:
    """Strip characters in ``cutset`` from the ends of ``text`` chosen by ``trim_type``.

    ``TrimType.DEFAULT`` strips both ends. With no cutset the default set of
    whitespace, NUL and ``"0"`` is used; an empty cutset strips nothing.
    """
    chars = DEFAULT_CUTSET if cutset is None else cutset
    if not chars:
        return text
    trim_type = TrimType(trim_type)
    if trim_type is TrimType.LEFT:
        return text.lstrip(chars)
    if trim_type is TrimType.RIGHT:
        return text.rstrip(chars)
    return text.strip(chars)


def trim(text: str, cutset: Optional[str] = None) -> str:
    """Strip characters in ``cutset`` from both ends of ``text``."""
    return trim_with(TrimType.DEFAULT, text, cutset)


def ltrim(text: str, cutset: Optional[str] = None) -> str:
    """Strip characters in ``cutset`` from the start of ``text``."""
    return trim_with(TrimType.LEFT, text, cutset)


def rtrim(text: str, cutset: Optional[str] = None) -> str:
    """Strip characters in ``cutset`` from the end of ``text``."""
    return trim_with(TrimType.RIGHT, text, cutset)