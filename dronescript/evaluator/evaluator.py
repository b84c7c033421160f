"""Tree-walking evaluator: one tick selects at most one action."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import assert_never

from dronescript.ast import (
    Command,
    CommandStatement,
    ComparisonCondition,
    ComparisonOperator,
    Condition,
    ConditionalStatement,
    FallbackStatement,
    Identifier,
    LogicalCondition,
    LogicalOperator,
    NumberLiteral,
    QueryCondition,
    Script,
    Statement,
    format_argument,
    format_command,
    format_condition,
)
from dronescript.diagnostics import (
    EVAL_UNKNOWN_COMMAND,
    EVAL_UNKNOWN_QUERY,
    EVAL_UNKNOWN_VARIABLE,
    Diagnostic,
)
from dronescript.evaluator.commands import CommandRegistry, default_command_registry
from dronescript.evaluator.result import (
    EvaluationFailure,
    ExecutedAction,
    StatementKind,
    TickResult,
)
from dronescript.text import TextPosition
from dronescript.world import NameKind, UnknownNameError, WorldState, WorldStateReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EvaluatorOptions:
    """Numeric comparison policy."""

    equality_epsilon: float = 0.001

    def __post_init__(self) -> None:
        if self.equality_epsilon <= 0:
            raise ValueError("equality_epsilon must be positive")


class Evaluator:
    """Runs scripts against world states. Holds configuration only, never tick state."""

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        options: EvaluatorOptions | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_command_registry()
        self._options = options or EvaluatorOptions()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def options(self) -> EvaluatorOptions:
        return self._options

    def run(self, script: Script, state: WorldState) -> TickResult:
        return _Tick(self._registry, self._options, state).run(script)


def run(
    script: Script,
    state: WorldState,
    *,
    registry: CommandRegistry | None = None,
    options: EvaluatorOptions | None = None,
) -> TickResult:
    """Evaluate one tick of `script` against `state`."""
    return Evaluator(registry=registry, options=options).run(script, state)


@dataclass(frozen=True, slots=True)
class _StatementOutcome:
    ends_tick: bool
    action: ExecutedAction | None = None


_CONTINUE = _StatementOutcome(ends_tick=False)


class _Tick:
    """Per-call evaluation context; discarded when `run` returns."""

    def __init__(self, registry: CommandRegistry, options: EvaluatorOptions, state: WorldState) -> None:
        self._registry = registry
        self._options = options
        self._state = state
        self._trace: list[str] = []
        self._diagnostics: list[Diagnostic] = []

    def run(self, script: Script) -> TickResult:
        self._log(f"=== Executing script ({len(script)} statements) with {self._state} ===")

        for statement in script.statements:
            try:
                outcome = self._execute_statement(statement)
            except UnknownNameError as error:
                failure = self._failure(error, statement.line)
                self._log(f"--- Evaluation failed on line {statement.line}: {failure.diagnostic.message} ---")
                logger.info("Tick failed on line %d: %s", statement.line, failure.diagnostic.message)
                return self._result(failure=failure)

            if outcome.ends_tick:
                self._log("--- Execution complete (waiting for next tick) ---")
                if outcome.action is not None:
                    logger.debug("Tick executed %s from line %d", outcome.action.text, outcome.action.line)
                else:
                    logger.debug("Tick ended on line %d without an action", statement.line)
                return self._result(action=outcome.action)

        self._log("--- No command executed (end of script) ---")
        logger.debug("Tick ended without an action")
        return self._result()

    def _execute_statement(self, statement: Statement) -> _StatementOutcome:
        match statement:
            case ConditionalStatement(condition=condition, command=command, line=line):
                self._log(f"Evaluating: IF {format_condition(condition)}")
                if not self._evaluate_condition(condition, self._state):
                    self._log("  Condition FALSE")
                    return _CONTINUE
                self._log("  Condition TRUE")
                # A matched conditional ends the tick whether or not its command acted.
                executed = self._execute_command(command, line, StatementKind.CONDITIONAL)
                return _StatementOutcome(ends_tick=True, action=executed.action)
            case FallbackStatement(command=command, line=line):
                self._log(f"Executing: ELSE {format_command(command)}")
                return self._execute_command(command, line, StatementKind.FALLBACK)
            case CommandStatement(command=command, line=line):
                self._log(f"Executing: {format_command(command)}")
                return self._execute_command(command, line, StatementKind.COMMAND)
            case _:
                assert_never(statement)

    def _evaluate_condition(self, condition: Condition, state: WorldStateReader) -> bool:
        match condition:
            case ComparisonCondition():
                return self._evaluate_comparison(condition, state)
            case QueryCondition(name=name):
                result = state.get_bool(name)
                self._log(f"    Query: {name} = {result}")
                return result
            case LogicalCondition():
                return self._evaluate_logical(condition, state)
            case _:
                assert_never(condition)

    def _evaluate_comparison(self, comparison: ComparisonCondition, state: WorldStateReader) -> bool:
        left = state.get_number(comparison.left)
        match comparison.right:
            case NumberLiteral():
                right = comparison.right.value
            case Identifier(name=name):
                right = state.get_number(name)
            case _:
                assert_never(comparison.right)

        result = compare(left, comparison.operator, right, self._options.equality_epsilon)
        self._log(
            f"    Comparison: {comparison.left}({left:g}) {comparison.operator.value} "
            f"{format_argument(comparison.right)}({right:g}) = {result}"
        )
        return result

    def _evaluate_logical(self, logical: LogicalCondition, state: WorldStateReader) -> bool:
        left = self._evaluate_condition(logical.left, state)

        if logical.operator == LogicalOperator.AND and not left:
            self._log("    Logical: AND short-circuit (left is false)")
            return False
        if logical.operator == LogicalOperator.OR and left:
            self._log("    Logical: OR short-circuit (left is true)")
            return True

        # Past the short-circuit the result is whatever the right side says.
        right = self._evaluate_condition(logical.right, state)
        self._log(f"    Logical: {left} {logical.operator.value} {right} = {right}")
        return right

    def _execute_command(self, command: Command, line: int, via: StatementKind) -> _StatementOutcome:
        self._log(f"  -> Executing command: {format_command(command)}")

        handler = self._registry.lookup(command.name)
        if handler is None:
            self._log(f"    [Warning] Unknown command: {command.name}")
            logger.warning("Unknown command %r on line %d; no action this tick", command.name, line)
            self._diagnostics.append(
                EVAL_UNKNOWN_COMMAND.at(TextPosition(line, 1), message=f"Unknown command `{command.name}`.")
            )
            return _StatementOutcome(ends_tick=True)

        outcome = handler(command, self._state)
        for message in outcome.messages:
            self._log(f"    {message}")
        if not outcome.performed:
            self._log("    Command did not act")
            return _CONTINUE

        action = ExecutedAction(command=command, line=line, via=via, messages=outcome.messages)
        return _StatementOutcome(ends_tick=True, action=action)

    def _failure(self, error: UnknownNameError, line: int) -> EvaluationFailure:
        spec = EVAL_UNKNOWN_QUERY if error.kind == NameKind.QUERY else EVAL_UNKNOWN_VARIABLE
        diagnostic = spec.at(TextPosition(line, 1), message=f"Unknown {error.kind.value} `{error.name}`.")
        self._diagnostics.append(diagnostic)
        return EvaluationFailure(kind=error.kind, name=error.name, line=line, diagnostic=diagnostic)

    def _result(
        self,
        *,
        action: ExecutedAction | None = None,
        failure: EvaluationFailure | None = None,
    ) -> TickResult:
        return TickResult(
            trace=tuple(self._trace),
            action=action,
            failure=failure,
            diagnostics=tuple(self._diagnostics),
        )

    def _log(self, message: str) -> None:
        self._trace.append(message)


def compare(left: float, operator: ComparisonOperator, right: float, epsilon: float) -> bool:
    """Apply a comparison with float semantics; equality uses an absolute tolerance."""
    match operator:
        case ComparisonOperator.LESS_THAN:
            return left < right
        case ComparisonOperator.LESS_THAN_OR_EQUAL:
            return left <= right
        case ComparisonOperator.GREATER_THAN:
            return left > right
        case ComparisonOperator.GREATER_THAN_OR_EQUAL:
            return left >= right
        case ComparisonOperator.EQUAL:
            return abs(left - right) < epsilon
        case ComparisonOperator.NOT_EQUAL:
            return abs(left - right) >= epsilon
        case _:
            assert_never(operator)
