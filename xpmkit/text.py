"""String searching, comparison, bounded copying and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def _check_single(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError("expected a single character")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def find_char(text: str, ch: str) -> int:
    """Return the index of the first ``ch`` in ``text``, or -1.

    Searching for the NUL character gives the index of the end of the
    text, where a terminator would sit.
    """
    _check_single(ch)
    if ch == _NUL:
        return len(text)
    return text.find(ch)


def rfind_char(text: str, ch: str) -> int:
    """Return the index of the last ``ch`` in ``text``, or -1.

    Searching for the NUL character gives the index of the end of the text.
    """
    _check_single(ch)
    if ch == _NUL:
        return len(text)
    return text.rfind(ch)


def compare(first: str, second: str) -> int:
    """Compare two strings character by character.

    Returns the difference of the codes at the first position where they
    differ (the end of a string counts as code 0), or 0 when they are equal.
    """
    for index in range(max(len(first), len(second))):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or not a or not b:
            return a - b
    return 0


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, like :func:`compare`."""
    _check_non_negative(n=n)
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or not a or not b:
            return a - b
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters, empty when
    ``size`` is 0) and the full length of ``src``; a length of ``size`` or
    more means the copy was truncated.
    """
    _check_non_negative(size=size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without the bound: ``min(len(dst), size) + len(src)``.
    """
    _check_non_negative(size=size)
    dst_len = len(dst)
    result = dst
    if size != 0 and dst_len < size - 1:
        result = dst + src[: size - 1 - dst_len]
    return result, min(dst_len, size) + len(src)


def find_bounded(haystack: str, needle: str, length: int) -> int:
    """Return the index of ``needle`` lying wholly in the first ``length``
    characters of ``haystack``, or -1. An empty needle is found at 0."""
    _check_non_negative(length=length)
    if not needle:
        return 0
    return haystack[:length].find(needle)


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start:start + length]


def join(first: str | None, second: str | None) -> str:
    """Concatenate two strings; ``None`` counts as empty."""
    return (first or "") + (second or "")


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _check_single(sep)
    return [word for word in text.split(sep) if word]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call ``func(index, char)`` for every character in order.

    When ``func`` returns a string it replaces that character; ``None``
    keeps the character. Returns the resulting text.
    """
    chars = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        chars.append(char if replacement is None else replacement)
    return "".join(chars)