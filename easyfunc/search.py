"""Locating substrings and characters inside strings."""

from typing import Optional, Union

__all__ = ["strchr", "strstr", "strpos", "strpbrk", "strrchr", "strcspn"]


def _split_at(haystack: str, needle: str, before_needle: bool) -> str:
    idx = haystack.find(needle)
    if idx == -1:
        return ""
    return haystack[:idx] if before_needle else haystack[idx:]


def strchr(haystack: str, needle: str, before_needle: bool = False) -> str:
    """Return ``haystack`` from the first ``needle`` on, or the part before it.

    Returns ``""`` if either string is empty or the needle is not found.
    """
    if not haystack or not needle:
        return ""
    return _split_at(haystack, needle, before_needle)


def strstr(haystack: str, needle: str, before_needle: bool = False) -> str:
    """Return ``haystack`` from the first ``needle`` on, or the part before it.

    Returns ``""`` if the needle is empty or not found.
    """
    if not needle:
        return ""
    return _split_at(haystack, needle, before_needle)


def strpos(haystack: str, needle: str, offset: int = 0) -> int:
    """Return the index of the first ``needle`` at or after ``offset``, or -1.

    A positive offset past the end of ``haystack`` raises ValueError.
    """
    if offset > len(haystack):
        raise ValueError("offset is beyond the end of the string")
    if offset > 0:
        haystack = haystack[offset:]
    idx = haystack.find(needle)
    if idx == -1:
        return -1
    return idx + offset


def strpbrk(haystack: str, char_list: str) -> Optional[str]:
    """Return ``haystack`` from the first occurrence of ``char_list`` on.

    ``char_list`` is searched for as a whole. Returns None when it is empty
    or does not occur.
    """
    if not char_list:
        return None
    idx = haystack.find(char_list)
    if idx == -1:
        return None
    return haystack[idx:]


def strrchr(char: Union[str, int], haystack: str) -> str:
    """Return ``haystack`` from the last occurrence of ``char`` on, or ``""``.

    ``char`` is a single character or a byte value.
    """
    if isinstance(char, int):
        char = chr(char)
    if len(char) != 1:
        raise ValueError("char must be a single character")
    idx = haystack.rfind(char)
    if idx == -1:
        return ""
    return haystack[idx:]


def strcspn(text: str, chars: str, offset: int = 0, length: Optional[int] = None) -> int:
    """Return the length of the leading part of a slice of ``text`` free of ``chars``.

    The slice starts at ``offset`` (counted from the end when negative) and
    covers ``length`` characters (up to that many from the end when negative).
    """
    size = len(text)
    if length is None:
        length = size
    if offset >= size:
        return 0
    if offset < 0:
        offset += size
        if offset < 0:
            raise ValueError("offset is before the start of the string")
    if length < 0:
        length = size + length - offset
    if length <= 0:
        return 0
    segment = text[offset:min(offset + length, size)]
    return next((i for i, c in enumerate(segment) if c in chars), len(segment))