"""Tick result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dronescript.ast import Command, format_command
from dronescript.diagnostics import Diagnostic
from dronescript.world import NameKind


class StatementKind(StrEnum):
    CONDITIONAL = "conditional"
    FALLBACK = "fallback"
    COMMAND = "command"


@dataclass(frozen=True, slots=True)
class ExecutedAction:
    """The one command that acted during a tick."""

    command: Command
    line: int
    via: StatementKind
    messages: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return format_command(self.command)


@dataclass(frozen=True, slots=True)
class EvaluationFailure:
    """A condition referenced a name the world state does not provide."""

    kind: NameKind
    name: str
    line: int
    diagnostic: Diagnostic


@dataclass(frozen=True, slots=True)
class TickResult:
    trace: tuple[str, ...]
    action: ExecutedAction | None = None
    failure: EvaluationFailure | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def executed(self) -> bool:
        return self.action is not None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    @property
    def command(self) -> Command | None:
        return self.action.command if self.action is not None else None
