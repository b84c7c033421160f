"""Read-only traversals over parsed scripts."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias, assert_never

from dronescript.ast.model import (
    Command,
    ComparisonCondition,
    Condition,
    ConditionalStatement,
    Identifier,
    LogicalCondition,
    QueryCondition,
    Script,
)

ConditionTerm: TypeAlias = ComparisonCondition | QueryCondition


def iter_condition_terms(condition: Condition) -> Iterator[ConditionTerm]:
    """Yield comparison/query leaves left to right."""
    match condition:
        case ComparisonCondition() | QueryCondition():
            yield condition
        case LogicalCondition(left=left, right=right):
            yield from iter_condition_terms(left)
            yield from iter_condition_terms(right)
        case _:
            assert_never(condition)


def count_condition_terms(condition: Condition) -> int:
    return sum(1 for _ in iter_condition_terms(condition))


def iter_commands(script: Script) -> Iterator[tuple[int, Command]]:
    """Yield `(line, command)` for every statement."""
    for statement in script.statements:
        yield statement.line, statement.command


def iter_conditions(script: Script) -> Iterator[tuple[int, Condition]]:
    for statement in script.statements:
        if isinstance(statement, ConditionalStatement):
            yield statement.line, statement.condition


def referenced_queries(condition: Condition) -> list[str]:
    return [term.name for term in iter_condition_terms(condition) if isinstance(term, QueryCondition)]


def referenced_variables(condition: Condition) -> list[str]:
    names: list[str] = []
    for term in iter_condition_terms(condition):
        if not isinstance(term, ComparisonCondition):
            continue
        names.append(term.left)
        if isinstance(term.right, Identifier):
            names.append(term.right.name)
    return names
