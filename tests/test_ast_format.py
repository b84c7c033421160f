import pytest

from dronescript.ast import (
    Command,
    ComparisonCondition,
    ComparisonOperator,
    Identifier,
    LogicalCondition,
    LogicalOperator,
    NumberLiteral,
    QueryCondition,
    count_condition_terms,
    format_command,
    format_condition,
    format_script,
    iter_commands,
    referenced_queries,
    referenced_variables,
)
from dronescript.parser import parse_text

from tests._shared_cases import DEFENSIVE_MINER, VALID_CASES, ScriptCase


def test_format_command_with_and_without_arguments() -> None:
    assert format_command(Command("explore")) == "explore"
    assert format_command(Command("goto_location", (NumberLiteral("10"), NumberLiteral("20.5")))) == (
        "goto_location(10, 20.5)"
    )


def test_format_script_normalizes_layout() -> None:
    parsed = parse_text("if   battery<15 then goto_charger # low\n\n\nElse   explore()")

    assert format_script(parsed.script) == "IF battery < 15 THEN goto_charger\nELSE explore\n"


def test_format_defensive_miner_drops_comments() -> None:
    parsed = parse_text(DEFENSIVE_MINER)

    assert format_script(parsed.script) == "".join(
        line + "\n" for line in DEFENSIVE_MINER.splitlines() if not line.startswith("#")
    )


def test_right_nested_logical_is_parenthesized_for_display() -> None:
    condition = LogicalCondition(
        left=QueryCondition("a"),
        operator=LogicalOperator.AND,
        right=LogicalCondition(left=QueryCondition("b"), operator=LogicalOperator.OR, right=QueryCondition("c")),
    )

    assert format_condition(condition) == "a AND (b OR c)"


@pytest.mark.parametrize("case", VALID_CASES, ids=lambda case: case.name)
def test_formatted_script_reparses_to_same_tree(case: ScriptCase) -> None:
    first = parse_text(case.source).script

    reparsed = parse_text(format_script(first))

    assert reparsed.diagnostics == []
    assert [_shape(statement) for statement in reparsed.script] == [_shape(statement) for statement in first]


def test_condition_walks() -> None:
    condition = parse_text("IF battery < hp AND storm_active OR cargo > 3 THEN deposit").script.statements[0].condition

    assert count_condition_terms(condition) == 3
    assert referenced_queries(condition) == ["storm_active"]
    assert referenced_variables(condition) == ["battery", "hp", "cargo"]


def test_iter_commands_pairs_lines() -> None:
    script = parse_text("explore\n\nIF a THEN wait(1)\nELSE deposit").script

    assert [(line, command.name) for line, command in iter_commands(script)] == [
        (1, "explore"),
        (3, "wait"),
        (4, "deposit"),
    ]


def test_comparison_operand_leaves() -> None:
    condition = ComparisonCondition(left="hp", operator=ComparisonOperator.GREATER_THAN, right=Identifier("battery"))

    assert format_condition(condition) == "hp > battery"
    assert NumberLiteral("0.5").value == 0.5


def _shape(statement):
    """Statement with its source line dropped; formatting renumbers lines."""
    return (type(statement).__name__, getattr(statement, "condition", None), statement.command)
