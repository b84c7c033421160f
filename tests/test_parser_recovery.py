import pytest

from dronescript.ast import CommandStatement, ConditionalStatement, FallbackStatement
from dronescript.lexer import TokenKind, tokenize
from dronescript.parser import STATEMENT_RECOVERY, Parser, RecoveryError, parse_text
from dronescript.text import TextPosition

from tests._debug import debug_dump_ast, debug_dump_diagnostics


def _parse(source: str):
    parsed = parse_text(source)
    debug_dump_ast("recovery", parsed.script, source)
    debug_dump_diagnostics("recovery", parsed.diagnostics, source)
    return parsed


@pytest.mark.parametrize(
    ("source", "code", "position"),
    [
        ("IF battery < 15 goto_charger", "PARSER_EXPECTED_THEN", TextPosition(1, 17)),
        ("IF battery < THEN goto_charger", "PARSER_EXPECTED_OPERAND", TextPosition(1, 14)),
        ("IF THEN goto_charger", "PARSER_EXPECTED_CONDITION", TextPosition(1, 4)),
        ("IF battery < 15 THEN", "PARSER_EXPECTED_COMMAND", TextPosition(1, 21)),
        ("ELSE 42", "PARSER_EXPECTED_COMMAND", TextPosition(1, 6)),
        ("goto_location(10, 20", "PARSER_UNTERMINATED_ARGUMENTS", TextPosition(1, 21)),
        ("goto_location(10, )", "PARSER_EXPECTED_ARGUMENT", TextPosition(1, 19)),
        ("goto_location(go(1))", "PARSER_UNTERMINATED_ARGUMENTS", TextPosition(1, 17)),
        ("THEN explore", "PARSER_EXPECTED_STATEMENT", TextPosition(1, 1)),
        ("42", "PARSER_EXPECTED_STATEMENT", TextPosition(1, 1)),
    ],
)
def test_structural_errors(source: str, code: str, position: TextPosition) -> None:
    parsed = _parse(source)

    assert [diagnostic.code for diagnostic in parsed.parser_diagnostics] == [code]
    diagnostic = parsed.parser_diagnostics[0]
    assert diagnostic.position == position
    assert diagnostic.category == "parser"
    assert diagnostic.severity == "error"
    assert parsed.script.is_empty


def test_error_message_names_the_unexpected_token() -> None:
    parsed = _parse("IF battery < 15 goto_charger")

    assert parsed.parser_diagnostics[0].message == "Expected THEN after condition, got IDENTIFIER 'goto_charger'"


def test_error_at_end_of_line_mentions_line_end() -> None:
    parsed = _parse("IF battery < 15 THEN\nexplore")

    assert parsed.parser_diagnostics[0].message == "Expected command name, got end of line"


def test_one_bad_line_among_ten_yields_one_error_and_nine_statements() -> None:
    lines = [
        "IF battery < 15 THEN goto_charger",
        "IF hp < 40 THEN goto_outpost",
        "IF storm_active THEN goto_outpost",
        "IF in_hazard_zone AND hp < 80 THEN goto_outpost",
        "IF battery < THEN explore",
        "IF cargo_full THEN deposit",
        "wait(5)",
        "mine_nearest(Uranium)",
        "ELSE mine_nearest(Titanium)",
        "ELSE mine_nearest(any)",
    ]

    parsed = _parse("\n".join(lines))

    assert len(parsed.parser_diagnostics) == 1
    assert parsed.parser_diagnostics[0].line == 5
    assert len(parsed.script) == 9
    assert 5 not in [statement.line for statement in parsed.script]


def test_recovery_stops_before_if_on_the_same_line() -> None:
    parsed = _parse("IF battery < 15 explore IF hp < 40 THEN goto_outpost")

    assert [diagnostic.code for diagnostic in parsed.parser_diagnostics] == ["PARSER_EXPECTED_THEN"]
    assert len(parsed.script) == 1
    statement = parsed.script.statements[0]
    assert isinstance(statement, ConditionalStatement)
    assert statement.command.name == "goto_outpost"


def test_recovery_stops_before_else_on_the_same_line() -> None:
    parsed = _parse("IF battery < 15 THEN ( ELSE explore")

    assert [diagnostic.code for diagnostic in parsed.parser_diagnostics] == ["PARSER_EXPECTED_COMMAND"]
    assert len(parsed.script) == 1
    statement = parsed.script.statements[0]
    assert isinstance(statement, FallbackStatement)
    assert statement.command.name == "explore"


def test_statement_interrupted_by_keyword_resumes_at_keyword() -> None:
    parsed = _parse("IF battery < 15 THEN IF hp < 40 THEN goto_outpost")

    assert [diagnostic.code for diagnostic in parsed.parser_diagnostics] == ["PARSER_EXPECTED_COMMAND"]
    assert len(parsed.script) == 1
    assert parsed.script.statements[0].command.name == "goto_outpost"


def test_each_broken_line_reports_its_own_line() -> None:
    parsed = _parse("IF THEN x\nexplore\nELSE (\nIF a b\n")

    assert [(diagnostic.code, diagnostic.line) for diagnostic in parsed.parser_diagnostics] == [
        ("PARSER_EXPECTED_CONDITION", 1),
        ("PARSER_EXPECTED_COMMAND", 3),
        ("PARSER_EXPECTED_THEN", 4),
    ]
    assert len(parsed.script) == 1
    statement = parsed.script.statements[0]
    assert isinstance(statement, CommandStatement)
    assert statement.line == 2


def test_lexer_and_parser_diagnostics_stay_separate() -> None:
    parsed = _parse("IF battery = 80 THEN deposit\nexplore")

    assert [diagnostic.code for diagnostic in parsed.lexer_diagnostics] == ["LEXER_INCOMPLETE_OPERATOR"]
    # Without the stray `=`, `80` follows a query where THEN was expected.
    assert [diagnostic.code for diagnostic in parsed.parser_diagnostics] == ["PARSER_EXPECTED_THEN"]
    assert [diagnostic.category for diagnostic in parsed.diagnostics] == ["lexer", "parser"]
    assert len(parsed.script) == 1


def test_recovery_returns_eof_at_end_of_stream() -> None:
    tokens, _ = tokenize("")
    parser = Parser(tokens)

    assert STATEMENT_RECOVERY.recover(parser) == RecoveryError.EOF


def test_recovery_reports_already_recovered_at_keyword() -> None:
    tokens, _ = tokenize("ELSE explore")
    parser = Parser(tokens)

    assert STATEMENT_RECOVERY.recover(parser) == RecoveryError.ALREADY_RECOVERED
    assert parser.position == 0


def test_recovery_consumes_through_newline() -> None:
    tokens, _ = tokenize("1 2 3\nexplore")
    parser = Parser(tokens)

    assert STATEMENT_RECOVERY.recover(parser) is None
    assert parser.current_kind == TokenKind.IDENTIFIER
    assert parser.current.line == 2
