"""High-level parse entrypoints for DroneScript source text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from dronescript.ast import Script
from dronescript.diagnostics import Diagnostic
from dronescript.lexer import Lexer, Token
from dronescript.parser.grammar import parse_script
from dronescript.parser.options import ParserOptions
from dronescript.parser.parsed_script import ParsedScript
from dronescript.parser.parser import Parser

if TYPE_CHECKING:
    from dronescript.pipeline import ScriptParseResult


def parse(tokens: Sequence[Token]) -> tuple[Script, list[Diagnostic]]:
    """Parse a token stream. Always returns a script, possibly partial."""
    parser = Parser(tokens)
    script = parse_script(parser)
    return script, parser.finish()


def parse_text(text: str) -> ParsedScript:
    lexer = Lexer(text)
    tokens = lexer.lex()
    script, parser_diagnostics = parse(tokens)
    return ParsedScript(
        script=script,
        tokens=tuple(tokens),
        lexer_diagnostics=tuple(lexer.diagnostics),
        parser_diagnostics=tuple(parser_diagnostics),
    )


def parse_result(text: str, options: ParserOptions | None = None) -> ScriptParseResult:
    from dronescript.pipeline import ScriptParseResult

    resolved_options = options or ParserOptions()
    return ScriptParseResult(
        source_text=text,
        parsed=parse_text(text),
        options=resolved_options,
    )
