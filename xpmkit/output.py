"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c`` to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream``; ``None`` writes nothing."""
    if s:
        _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; ``None`` writes only the newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write the 32-bit signed integer ``n`` in decimal.

    Raises OverflowError when ``n`` does not fit in 32 bits.
    """
    put_str(itoa(n), stream)