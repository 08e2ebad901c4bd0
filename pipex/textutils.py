"""String helpers for splitting command lines and reading environment values."""

from itertools import takewhile, zip_longest

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = "\t\n\v\f\r "
_DIGITS = frozenset("0123456789")


def _until_nul(s):
    """Return the part of ``s`` before the first NUL character."""
    return s.split("\0", 1)[0]


def _wrap_int32(value):
    """Wrap ``value`` into the signed 32-bit range, two's complement style."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def split(s, sep):
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in s.split(sep) if word]


def atoi(s):
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit.  The result wraps to a 32-bit signed int.
    """
    text = _until_nul(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, text))
    return _wrap_int32(int(digits or "0") * sign)


def itoa(n):
    """Return the decimal representation of the 32-bit integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an int")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strtrim(s, charset):
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s, start, length):
    """Return at most ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if not s or start > len(s) or length == 0:
        return ""
    return s[start:start + length]


def strnstr(haystack, needle, n):
    """Find ``needle`` lying wholly within the first ``n`` characters.

    Returns the rest of ``haystack`` from the match onwards, ``haystack``
    itself when ``needle`` is empty, or ``None`` when there is no match.
    """
    if not needle:
        return haystack
    text = _until_nul(haystack)
    index = text.find(needle, 0, max(n, 0))
    if index < 0:
        return None
    return text[index:]


def strncmp(s1, s2, n):
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    left = _until_nul(s1)[:max(n, 0)]
    right = _until_nul(s2)[:max(n, 0)]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0