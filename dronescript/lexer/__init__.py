"""Lexer."""

from dronescript.lexer.lexer import Lexer, dump_tokens, tokenize
from dronescript.lexer.tokens import (
    KEYWORDS,
    Token,
    TokenKind,
    keyword_kind,
)

__all__ = [
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "keyword_kind",
    "tokenize",
]
