"""Centralized DroneScript source cases used across lexer/parser/evaluator tests."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScriptCase:
    name: str
    source: str
    statement_count: int


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


DEFENSIVE_MINER = _dedent(
    """
    # Defensive miner script
    IF battery < 15 THEN goto_charger
    IF hp < 40 THEN goto_outpost
    IF storm_active THEN goto_outpost
    IF in_hazard_zone AND hp < 80 THEN goto_outpost
    IF cargo_full THEN goto_outpost
    mine_nearest(Uranium)
    ELSE mine_nearest(Titanium)
    ELSE mine_nearest(any)
    """
)

END_TO_END = "IF battery < 15 THEN goto_charger\nmine_nearest(Uranium)\nELSE mine_nearest(any)"

VALID_CASES: tuple[ScriptCase, ...] = (
    ScriptCase(name="empty", source="", statement_count=0),
    ScriptCase(name="only_comments_and_blank_lines", source="# nothing\n\n   \n# still nothing\n", statement_count=0),
    ScriptCase(name="bare_command", source="explore\n", statement_count=1),
    ScriptCase(name="command_with_arguments", source="goto_location(10, 20.5)\n", statement_count=1),
    ScriptCase(name="empty_argument_list", source="deposit()\n", statement_count=1),
    ScriptCase(name="query_condition", source="IF storm_active THEN goto_outpost\n", statement_count=1),
    ScriptCase(name="variable_on_both_sides", source="IF hp < battery THEN repair_nearest\n", statement_count=1),
    ScriptCase(name="mixed_case_keywords", source="if battery <= 20 then goto_charger\nElSe explore\n", statement_count=2),
    ScriptCase(
        name="logical_chain",
        source="IF battery < 20 AND cargo_full OR storm_active THEN goto_outpost\n",
        statement_count=1,
    ),
    ScriptCase(name="trailing_comment", source="IF hp != 100 THEN wait(5) # patch up\n", statement_count=1),
    ScriptCase(name="windows_line_endings", source="explore\r\ndeposit\r\n", statement_count=2),
    ScriptCase(name="no_trailing_newline", source="IF battery >= 80 THEN patrol(0, 0, 10, 10)", statement_count=1),
    ScriptCase(name="defensive_miner", source=DEFENSIVE_MINER, statement_count=8),
)
