"""Source positions."""

from dronescript.text.text import TextPosition

__all__ = [
    "TextPosition",
]
