"""Render AST nodes back to DroneScript text."""

from __future__ import annotations

from typing import assert_never

from dronescript.ast.model import (
    Command,
    CommandArgument,
    CommandStatement,
    ComparisonCondition,
    Condition,
    ConditionalStatement,
    FallbackStatement,
    Identifier,
    LogicalCondition,
    NumberLiteral,
    QueryCondition,
    Script,
    Statement,
)


def format_argument(argument: CommandArgument) -> str:
    match argument:
        case Identifier(name=name):
            return name
        case NumberLiteral(raw_text=raw_text):
            return raw_text
        case _:
            assert_never(argument)


def format_command(command: Command) -> str:
    if not command.arguments:
        return command.name
    arguments = ", ".join(format_argument(argument) for argument in command.arguments)
    return f"{command.name}({arguments})"


def format_condition(condition: Condition) -> str:
    """Format a condition as source text.

    Parsed conditions only nest on the left, so the output re-parses to the
    same tree. A hand-built logical node on the right is wrapped in parentheses,
    which the grammar does not accept; that form is for display only.
    """
    match condition:
        case ComparisonCondition(left=left, operator=operator, right=right):
            return f"{left} {operator.value} {format_argument(right)}"
        case QueryCondition(name=name):
            return name
        case LogicalCondition(left=left, operator=operator, right=right):
            right_text = format_condition(right)
            if isinstance(right, LogicalCondition):
                right_text = f"({right_text})"
            return f"{format_condition(left)} {operator.value} {right_text}"
        case _:
            assert_never(condition)


def format_statement(statement: Statement) -> str:
    match statement:
        case ConditionalStatement(condition=condition, command=command):
            return f"IF {format_condition(condition)} THEN {format_command(command)}"
        case FallbackStatement(command=command):
            return f"ELSE {format_command(command)}"
        case CommandStatement(command=command):
            return format_command(command)
        case _:
            assert_never(statement)


def format_script(script: Script) -> str:
    return "".join(f"{format_statement(statement)}\n" for statement in script.statements)
