"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from dronescript.diagnostics import Diagnostic
from dronescript.evaluator import TickResult
from dronescript.pipeline.result import ScriptParseResult


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of parse plus validation checks from a shared parse result."""

    parse: ScriptParseResult
    diagnostics: list[Diagnostic]
    has_errors: bool


@dataclass(frozen=True, slots=True)
class TickRunResult:
    """Result of evaluating one tick from a shared parse result."""

    parse: ScriptParseResult
    tick: TickResult
    diagnostics: list[Diagnostic]

    @property
    def trace(self) -> tuple[str, ...]:
        return self.tick.trace
