"""ASCII character classification and integer/text conversion."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0 to 0x7F."""
    return 0x00 <= _code(c) <= 0x7F


def is_print(c: int | str) -> bool:
    """True for a printable ASCII code, 0x20 to 0x7E."""
    return 0x20 <= _code(c) <= 0x7E


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace (tab to carriage return, and space) and one sign are
    accepted; parsing stops at the first non-digit. Text with no digits gives
    0, and values outside the 32-bit range wrap around.
    """
    pos = 0
    while pos < len(text) and (text[pos] == " " or "\t" <= text[pos] <= "\r"):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap32(sign * value)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)