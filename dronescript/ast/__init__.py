"""Typed AST for DroneScript."""

from dronescript.ast.format import (
    format_argument,
    format_command,
    format_condition,
    format_script,
    format_statement,
)
from dronescript.ast.model import (
    Command,
    CommandArgument,
    CommandStatement,
    ComparisonCondition,
    ComparisonOperand,
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
)
from dronescript.ast.walk import (
    ConditionTerm,
    count_condition_terms,
    iter_commands,
    iter_condition_terms,
    iter_conditions,
    referenced_queries,
    referenced_variables,
)

__all__ = [
    "Command",
    "CommandArgument",
    "CommandStatement",
    "ComparisonCondition",
    "ComparisonOperand",
    "ComparisonOperator",
    "Condition",
    "ConditionTerm",
    "ConditionalStatement",
    "FallbackStatement",
    "Identifier",
    "LogicalCondition",
    "LogicalOperator",
    "NumberLiteral",
    "QueryCondition",
    "Script",
    "Statement",
    "count_condition_terms",
    "format_argument",
    "format_command",
    "format_condition",
    "format_script",
    "format_statement",
    "iter_commands",
    "iter_condition_terms",
    "iter_conditions",
    "referenced_queries",
    "referenced_variables",
]
