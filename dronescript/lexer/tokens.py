"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from dronescript.text import TextPosition


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    NEWLINE = 2  # statement separator

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 10
    NUMBER = 11

    # -------------------------
    # Keywords (case-insensitive)
    # -------------------------
    IF = 20
    THEN = 21
    ELSE = 22
    AND = 23
    OR = 24

    # -------------------------
    # Comparison operators
    # -------------------------
    LESS_THAN = 30  # <
    LESS_THAN_OR_EQUAL = 31  # <=
    GREATER_THAN = 32  # >
    GREATER_THAN_OR_EQUAL = 33  # >=
    EQUAL_EQUAL = 34  # ==
    NOT_EQUAL = 35  # !=

    # -------------------------
    # Punctuation
    # -------------------------
    LPAREN = 40  # (
    RPAREN = 41  # )
    COMMA = 42  # ,


KEYWORDS: Final[dict[str, TokenKind]] = {
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "else": TokenKind.ELSE,
    "and": TokenKind.AND,
    "or": TokenKind.OR,
}
"""Keyword spellings, lowercased. Lookups must lowercase the identifier first."""


def keyword_kind(text: str) -> TokenKind | None:
    """Return the keyword kind for `text` (any casing), or None for plain identifiers."""
    return KEYWORDS.get(text.lower())


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token."""

    kind: TokenKind
    text: str
    position: TextPosition

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __str__(self) -> str:
        display = self.text.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
        return f"{self.kind.name}({display!r}) at {self.position}"
