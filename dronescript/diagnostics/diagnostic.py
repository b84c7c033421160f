"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from dronescript.text import TextPosition

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser, validator and evaluator."""

    code: str
    message: str
    position: TextPosition
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column
