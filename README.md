# xpmkit

`xpmkit` reads XPM pixmap images into plain Python objects. It looks up colour
names in the X11 colour table and comes with small helpers for text, bytes,
linked lists and reading lines.

## Installation

```
pip install xpmkit
```

## Loading an image

```python
from xpmkit.xpm import load_xpm, parse_xpm

image = load_xpm("icon.xpm")
print(image.width, image.height)
print(hex(image.pixel(0, 0)))

image = parse_xpm([
    "2 2 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
    "ba",
])
```

- `parse_xpm(lines)` takes the quoted strings of an XPM file, one per entry:
  the header (width, height, colour count, characters per pixel), the colour
  lines, then the pixel rows.
- `parse_xpm_text(text)` takes the whole file as text. It blanks out `/* */`
  and `//` comments outside quotes (`strip_comments`), pulls out the quoted
  strings (`extract_quoted_lines`) and parses them.
- `load_xpm(path)` reads a file as Latin-1 and calls `parse_xpm_text`.

The result is an `XpmImage` with `width`, `height` and a row-major tuple
`pixels`; `pixel(x, y)` returns one value and raises `IndexError` outside the
image. Each pixel is a 32-bit value. Colours resolve through `text_to_rgb`:
`#` followed by hex digits is read as a number, other names are looked up in
the colour table, and unknown names give `0`. The colour `None` is stored as
`0xFF000000`. Pixel codes that have no colour line also give `0`.

Missing lines, a header without four positive numbers, a colour line without
a `c` entry, or rows that are too short raise `XpmError` (a `ValueError`).

## Colour names

```python
from xpmkit.colors import lookup_color, color_names

lookup_color("Dodger Blue")   # 0x1e90ff
"gray50" in color_names()     # True
```

Lookup ignores case; `none` gives `-1`, and an unknown name raises `KeyError`.

## Helpers

- `xpmkit.wordtab`: `find_substring`, `find_unquoted` (skips text between
  double quotes) and `split_words` (splits on spaces and tabs).
- `xpmkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper` on characters or codes; `atoi` (32-bit, wrapping)
  and `itoa`.
- `xpmkit.text`: `find_char`, `rfind_char`, `compare`, `compare_n`,
  `bounded_copy`, `bounded_concat`, `find_bounded`, `substring`, `join`,
  `trim`, `split`, `map_indexed`, `iter_indexed`.
- `xpmkit.memory`: `fill`, `zero`, `allocate_zeroed`, `copy`, `move`,
  `find_byte` and `compare_bytes` on `bytearray` buffers.
- `xpmkit.linked`: a singly linked `LinkedList` of `Node` objects with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.
- `xpmkit.output`: `put_char`, `put_str`, `put_endl` and `put_number`, writing
  to a stream (standard output by default).
- `xpmkit.lines`: `LineReader` and `read_lines`, which read a text or binary
  stream line by line through a buffer of fixed size, keeping each newline.

## What it does not do

`xpmkit` only decodes images. It does not write XPM files, display images or
open windows, and it has no command-line program.