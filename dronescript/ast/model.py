"""AST data model for DroneScript source."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class ComparisonOperator(StrEnum):
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    EQUAL = "=="
    NOT_EQUAL = "!="


class LogicalOperator(StrEnum):
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True, slots=True)
class Identifier:
    """Bare name leaf, e.g. `Uranium` in `mine_nearest(Uranium)`."""

    name: str


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Number leaf preserved as raw token text (`10`, `45.5`)."""

    raw_text: str

    @property
    def value(self) -> float:
        return float(self.raw_text)


@dataclass(frozen=True, slots=True)
class Command:
    """Command name plus ordered arguments, e.g. `goto_location(10, 20)`."""

    name: str
    arguments: tuple[CommandArgument, ...] = ()

    @property
    def normalized_name(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class ComparisonCondition:
    """Numeric comparison of a named variable against a literal or another variable."""

    left: str
    operator: ComparisonOperator
    right: ComparisonOperand


@dataclass(frozen=True, slots=True)
class QueryCondition:
    """Boolean world-state query, e.g. `cargo_full`."""

    name: str


@dataclass(frozen=True, slots=True)
class LogicalCondition:
    """AND/OR combination. Chains fold left: `A AND B OR C` is `(A AND B) OR C`."""

    left: Condition
    operator: LogicalOperator
    right: Condition


@dataclass(frozen=True, slots=True)
class ConditionalStatement:
    condition: Condition
    command: Command
    line: int


@dataclass(frozen=True, slots=True)
class FallbackStatement:
    """`ELSE command`; runs when nothing before it acted."""

    command: Command
    line: int


@dataclass(frozen=True, slots=True)
class CommandStatement:
    command: Command
    line: int


@dataclass(frozen=True, slots=True)
class Script:
    """Ordered statements. Order decides which action wins."""

    statements: tuple[Statement, ...] = ()

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)

    @property
    def is_empty(self) -> bool:
        return len(self.statements) == 0


CommandArgument: TypeAlias = Identifier | NumberLiteral
ComparisonOperand: TypeAlias = Identifier | NumberLiteral
Condition: TypeAlias = ComparisonCondition | QueryCondition | LogicalCondition
Statement: TypeAlias = ConditionalStatement | FallbackStatement | CommandStatement


__all__ = [
    "Command",
    "CommandArgument",
    "CommandStatement",
    "ComparisonCondition",
    "ComparisonOperand",
    "ComparisonOperator",
    "Condition",
    "ConditionalStatement",
    "FallbackStatement",
    "Identifier",
    "LogicalCondition",
    "LogicalOperator",
    "NumberLiteral",
    "QueryCondition",
    "Script",
    "Statement",
]
