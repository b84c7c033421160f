"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dronescript.diagnostics import has_errors
from dronescript.parser.options import ParserOptions
from dronescript.parser.parsed_script import ParsedScript

if TYPE_CHECKING:
    from dronescript.ast import Script
    from dronescript.diagnostics import Diagnostic
    from dronescript.lexer import Token


@dataclass(slots=True)
class ScriptParseResult:
    """One parse of one source text, shared by check and tick runs."""

    source_text: str
    parsed: ParsedScript
    options: ParserOptions
    _validation_diagnostics: list[Diagnostic] | None = field(default=None, init=False, repr=False)

    @property
    def script(self) -> Script:
        return self.parsed.script

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.parsed.tokens

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def lexer_diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.parsed.lexer_diagnostics

    @property
    def parser_diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.parsed.parser_diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def validation_diagnostics(self) -> list[Diagnostic]:
        if self._validation_diagnostics is None:
            from dronescript.parser.validate import validate_script

            self._validation_diagnostics = validate_script(self.parsed.script, self.options)
        return list(self._validation_diagnostics)
