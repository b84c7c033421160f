"""Reusable list parse loop."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from dronescript.lexer import TokenKind
from dronescript.parser.parser import Parser, ParserProgress

T = TypeVar("T")


@dataclass(slots=True)
class ParseNodeList(Generic[T]):
    """Non-separated list parser with progress and recovery hooks."""

    is_at_list_end: Callable[[Parser], bool]
    parse_element: Callable[[Parser], T | None]
    recover: Callable[[Parser, T | None], bool]

    def parse_list(self, parser: Parser) -> list[T]:
        elements: list[T] = []
        progress = ParserProgress()

        while not parser.at(TokenKind.EOF) and not self.is_at_list_end(parser):
            progress.assert_progressing(parser)
            element = self.parse_element(parser)
            if element is not None:
                elements.append(element)
            if not self.recover(parser, element):
                break

        return elements
