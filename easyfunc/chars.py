"""Single-character conversions and simple digests of strings."""

import hashlib
import zlib

__all__ = ["char", "ordinal", "crc32", "md5_hex"]


def char(code: int) -> str:
    """Return the ASCII character for ``code``.

    Negative values have 256 added once, the result is reduced modulo 256
    (keeping the sign of the value, as a truncating remainder does), and
    anything that is NUL or outside the 7-bit ASCII range yields ``""``.
    A value that is still negative maps to the Unicode replacement character.
    """
    if code < 0:
        code += 256
    # Truncating remainder: the result takes the sign of the dividend.
    code = code - 256 * int(code / 256)
    if code == 0 or code > 127:
        return ""
    if code < 0:
        return "\ufffd"
    return chr(code)


def ordinal(text: str) -> int:
    """Return the code point of the first character of ``text``, or 0 if empty."""
    if not text:
        return 0
    return ord(text[0])


def crc32(text: str) -> int:
    """Return the IEEE CRC-32 checksum of the UTF-8 encoding of ``text``."""
    return zlib.crc32(text.encode("utf-8")) & 0xFFFFFFFF


def md5_hex(text: str) -> str:
    """Return the lower-case hexadecimal MD5 digest of the UTF-8 encoding of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()