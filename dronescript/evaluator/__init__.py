"""Tick evaluator and the command table it dispatches through."""

from dronescript.evaluator.commands import (
    CommandHandler,
    CommandOutcome,
    CommandRegistry,
    default_command_registry,
)
from dronescript.evaluator.evaluator import Evaluator, EvaluatorOptions, compare, run
from dronescript.evaluator.result import (
    EvaluationFailure,
    ExecutedAction,
    StatementKind,
    TickResult,
)

__all__ = [
    "CommandHandler",
    "CommandOutcome",
    "CommandRegistry",
    "EvaluationFailure",
    "Evaluator",
    "EvaluatorOptions",
    "ExecutedAction",
    "StatementKind",
    "TickResult",
    "compare",
    "default_command_registry",
    "run",
]
