"""Reader for XPM pixmap images, with X11 colour names and small helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "colors",
    "linked",
    "lines",
    "memory",
    "output",
    "text",
    "wordtab",
    "xpm",
]