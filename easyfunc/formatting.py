"""Splitting, padding, repeating and re-casing strings."""

from enum import IntEnum

__all__ = ["PadType", "chunk_split", "str_pad", "str_repeat", "strrev", "ucwords"]


class PadType(IntEnum):
    """Which side of a string :func:`str_pad` pads."""

    LEFT = 0
    RIGHT = 1
    BOTH = 2


def chunk_split(body: str, chunk_length: int = 76, end: str = "\r\n") -> str:
    """Split ``body`` into chunks of ``chunk_length`` characters, each followed by ``end``.

    An empty ``end`` means ``"\\r\\n"`` and a zero length means 76.
    """
    if chunk_length < 0:
        raise ValueError("chunk_length must not be negative")
    end = end or "\r\n"
    chunk_length = chunk_length or 76
    if len(body) <= 1 or len(body) < chunk_length:
        return body + end
    return "".join(
        body[start:start + chunk_length] + end
        for start in range(0, len(body), chunk_length)
    )


def _cycle(pad_string: str, count: int) -> str:
    repeats = -(-count // len(pad_string))
    return (pad_string * repeats)[:count]


def str_pad(text: str, pad_length: int, pad_string: str = " ", pad_type: int = PadType.RIGHT) -> str:
    """Pad ``text`` to ``pad_length`` characters with repeats of ``pad_string``.

    An unknown ``pad_type`` leaves the text unchanged. ``BOTH`` puts the
    smaller half on the left.
    """
    missing = pad_length - len(text)
    if pad_length <= 0 or missing <= 0:
        return text
    try:
        kind = PadType(pad_type)
    except ValueError:
        return text
    if not pad_string:
        raise ValueError("pad_string must not be empty")
    if kind is PadType.LEFT:
        left, right = missing, 0
    elif kind is PadType.RIGHT:
        left, right = 0, missing
    else:
        left = missing // 2
        right = missing - left
    return _cycle(pad_string, left) + text + _cycle(pad_string, right)


def str_repeat(text: str, multiplier: int) -> str:
    """Return ``text`` repeated ``multiplier`` times, or ``""`` if it is not positive."""
    if multiplier <= 0:
        return ""
    return text * multiplier


def strrev(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def _is_separator(c: str) -> bool:
    if c.isascii():
        return not (c.isalnum() or c == "_")
    if c.isalpha() or c.isdecimal():
        return False
    return c.isspace()


def _titlecase(c: str) -> str:
    titled = c.title()
    return titled if len(titled) == 1 else c


def ucwords(text: str) -> str:
    """Upper-case the first letter of every word.

    A word begins after any character that is not a letter, digit or
    underscore (outside ASCII, only after whitespace).
    """
    out = []
    prev = " "
    for c in text:
        out.append(_titlecase(c) if _is_separator(prev) else c)
        prev = c
    return "".join(out)