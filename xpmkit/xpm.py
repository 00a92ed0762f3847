"""Reader for XPM images.

Pixels are 32-bit values in 0xAARRGGBB form. Transparent pixels (colour
``none``) have the value 0xFF000000.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .chars import atoi
from .colors import lookup_color
from .wordtab import find_substring, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_HEX_PREFIX = re.compile(r"\s*[+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major pixels, one 32-bit value each."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match image size")

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def color_key(chars: str) -> int:
    """Pack the characters of a colour code into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def text_to_rgb(name: str, suffix: str | None) -> int:
    """Resolve a colour specification to a 0xRRGGBB value.

    ``#`` followed by hex digits is read as a number. Otherwise ``name``
    (joined with ``suffix`` by a space, when given) is looked up in the
    colour table; unknown names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        if match is None:
            return 0
        value = max(_LONG_MIN, min(_LONG_MAX, int(match.group(), 16)))
        return _to_int32(value)
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _blank(text: str, start: int, length: int) -> str:
    end = start + length
    return text[:start] + " " * len(text[start:end]) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces.

    The length of the text is preserved. A line comment is blanked
    together with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find_substring(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find_substring(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text`` in order."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(rows: Iterator[str], what: str) -> str:
    line = next(rows, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of string lines."""
    rows = iter(lines)
    header = split_words(_next_line(rows, "header line"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour line")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line has no colour after 'c': {line!r}")
        suffix = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], suffix)
        key = color_key(line[:cpp])
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    row_length = width * cpp
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < row_length:
            raise XpmError(f"pixel row too short: {line!r}")
        for start in range(0, row_length, cpp):
            colour = palette.get(color_key(line[start:start + cpp]), 0)
            if colour == -1:
                colour = TRANSPARENT
            pixels.append(colour & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(extract_quoted_lines(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_bytes().decode("latin-1"))