"""Parse output carrier."""

from dataclasses import dataclass

from dronescript.ast import Script
from dronescript.diagnostics import Diagnostic, collect_diagnostics
from dronescript.lexer import Token


@dataclass(frozen=True, slots=True)
class ParsedScript:
    """Script plus the diagnostics of each front-end stage, kept apart."""

    script: Script
    tokens: tuple[Token, ...]
    lexer_diagnostics: tuple[Diagnostic, ...]
    parser_diagnostics: tuple[Diagnostic, ...]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return collect_diagnostics(self.lexer_diagnostics, self.parser_diagnostics)
