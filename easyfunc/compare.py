"""String comparisons."""

__all__ = ["strcasecmp", "strncmp"]


def _chars_fold_equal(a: str, b: str) -> bool:
    return a == b or a.lower() == b.lower() or a.upper() == b.upper()


def strcasecmp(first: str, second: str) -> int:
    """Return 0 if the strings are equal ignoring case, otherwise 1."""
    if len(first) == len(second) and all(
        _chars_fold_equal(a, b) for a, b in zip(first, second)
    ):
        return 0
    return 1


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` bytes of two strings.

    The length is capped by the shorter string. Returns -1, 0 or 1.
    Raises ValueError if ``length`` is negative.
    """
    if length < 0:
        raise ValueError("length must be greater than or equal to 0")
    if length == 0:
        return 0
    left, right = first.encode("utf-8"), second.encode("utf-8")
    length = min(length, len(left), len(right))
    left, right = left[:length], right[:length]
    return (left > right) - (left < right)