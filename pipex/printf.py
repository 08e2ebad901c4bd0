"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

import sys

from pipex.textutils import itoa

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT_MIN = -(2**31)


def _as_int(value, spec):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value):
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value):
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _pointer(value):
    if value is None:
        return "(nil)"
    if isinstance(value, bool) or not isinstance(value, int):
        address = id(value)
    else:
        address = value
    address &= _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _hex(value, spec):
    digits = f"{_as_int(value, spec) & _UINT_MASK:x}"
    return digits.upper() if spec == "X" else digits


_CONVERTERS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: itoa(_to_int32(_as_int(value, "d"))),
    "i": lambda value: itoa(_to_int32(_as_int(value, "i"))),
    "u": lambda value: str(_as_int(value, "u") & _UINT_MASK),
    "x": lambda value: _hex(value, "x"),
    "X": lambda value: _hex(value, "X"),
}


def format_string(fmt, *args):
    """Render ``fmt`` with ``args`` and return the resulting text.

    Unknown conversion characters are consumed and produce nothing; a lone
    ``%`` at the end of the format produces nothing.  Extra arguments are
    ignored; too few raise ``TypeError``.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(converter(value))
    return "".join(pieces)


def printf(fmt, *args, stream=None):
    """Write the formatted text to ``stream`` (stdout by default) and return its length."""
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)