import pytest

from dronescript.lexer import Lexer, TokenKind, dump_tokens, keyword_kind, tokenize
from dronescript.text import TextPosition

from tests._debug import debug_dump_diagnostics, debug_dump_tokens
from tests._shared_cases import VALID_CASES, ScriptCase


def _kinds(source: str) -> list[TokenKind]:
    tokens, _ = tokenize(source)
    return [token.kind for token in tokens]


def test_conditional_statement_tokens() -> None:
    source = "IF battery < 15 THEN goto_charger\n"
    tokens, diagnostics = tokenize(source)
    debug_dump_tokens("conditional_statement_tokens", source, tokens)

    assert diagnostics == []
    assert [(token.kind, token.text) for token in tokens] == [
        (TokenKind.IF, "IF"),
        (TokenKind.IDENTIFIER, "battery"),
        (TokenKind.LESS_THAN, "<"),
        (TokenKind.NUMBER, "15"),
        (TokenKind.THEN, "THEN"),
        (TokenKind.IDENTIFIER, "goto_charger"),
        (TokenKind.NEWLINE, "\n"),
        (TokenKind.EOF, ""),
    ]


def test_token_positions_are_one_based() -> None:
    tokens, _ = tokenize("IF hp < 40 THEN goto_outpost\n  deposit")

    assert tokens[0].position == TextPosition(1, 1)
    assert tokens[1].position == TextPosition(1, 4)
    assert tokens[2].position == TextPosition(1, 7)
    assert tokens[3].position == TextPosition(1, 9)
    newline = tokens[6]
    assert newline.kind == TokenKind.NEWLINE
    assert (newline.line, newline.column) == (1, 29)
    deposit = tokens[7]
    assert deposit.text == "deposit"
    assert (deposit.line, deposit.column) == (2, 3)


@pytest.mark.parametrize("spelling", ["if", "IF", "If", "iF"])
def test_keywords_match_case_insensitively(spelling: str) -> None:
    tokens, _ = tokenize(spelling)

    assert tokens[0].kind == TokenKind.IF
    assert tokens[0].text == spelling
    assert keyword_kind(spelling) == TokenKind.IF


def test_keyword_prefix_is_identifier() -> None:
    assert _kinds("iffy order ANDROID else_branch") == [
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_two_character_operators_are_greedy() -> None:
    assert _kinds("<= >= == != < >") == [
        TokenKind.LESS_THAN_OR_EQUAL,
        TokenKind.GREATER_THAN_OR_EQUAL,
        TokenKind.EQUAL_EQUAL,
        TokenKind.NOT_EQUAL,
        TokenKind.LESS_THAN,
        TokenKind.GREATER_THAN,
        TokenKind.EOF,
    ]
    assert _kinds("a<=b") == [TokenKind.IDENTIFIER, TokenKind.LESS_THAN_OR_EQUAL, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_numbers_with_fraction() -> None:
    tokens, diagnostics = tokenize("10 45.5 0.001")

    assert diagnostics == []
    assert [token.text for token in tokens if token.kind == TokenKind.NUMBER] == ["10", "45.5", "0.001"]


def test_trailing_dot_is_not_part_of_number() -> None:
    tokens, diagnostics = tokenize("12.")

    assert [(token.kind, token.text) for token in tokens] == [(TokenKind.NUMBER, "12"), (TokenKind.EOF, "")]
    assert len(diagnostics) == 1
    assert diagnostics[0].code == "LEXER_UNEXPECTED_CHARACTER"
    assert diagnostics[0].position == TextPosition(1, 3)


def test_comment_runs_to_end_of_line_but_keeps_newline() -> None:
    assert _kinds("# IF battery < 15\nexplore # trailing ( ) ==") == [
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_whitespace_and_carriage_returns_are_dropped() -> None:
    tokens, diagnostics = tokenize("\texplore \r\n  deposit\r\n")

    assert diagnostics == []
    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]
    assert tokens[2].position == TextPosition(2, 3)


def test_each_newline_is_one_token_and_advances_line() -> None:
    tokens, _ = tokenize("\n\n\nexplore")

    assert [token.kind for token in tokens[:3]] == [TokenKind.NEWLINE] * 3
    assert [token.line for token in tokens[:3]] == [1, 2, 3]
    assert tokens[3].position == TextPosition(4, 1)


@pytest.mark.parametrize(
    ("source", "suggestion"),
    [
        ("IF battery = 80 THEN deposit", "'=='"),
        ("IF battery ! 80 THEN deposit", "'!='"),
    ],
)
def test_lone_equals_or_bang_suggests_full_operator(source: str, suggestion: str) -> None:
    tokens, diagnostics = tokenize(source)
    debug_dump_diagnostics("lone_operator", diagnostics, source)

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.code == "LEXER_INCOMPLETE_OPERATOR"
    assert diagnostic.category == "lexer"
    assert suggestion in diagnostic.message
    assert diagnostic.position == TextPosition(1, 12)
    # Scanning resumes right after the bad character.
    assert [token.text for token in tokens if token.kind == TokenKind.NUMBER] == ["80"]


def test_unexpected_characters_are_reported_and_skipped() -> None:
    tokens, diagnostics = tokenize("explore $ @\ndeposit")

    assert [diagnostic.code for diagnostic in diagnostics] == [
        "LEXER_UNEXPECTED_CHARACTER",
        "LEXER_UNEXPECTED_CHARACTER",
    ]
    assert "'$'" in diagnostics[0].message
    assert [diagnostic.position for diagnostic in diagnostics] == [TextPosition(1, 9), TextPosition(1, 11)]
    assert [token.text for token in tokens if token.kind == TokenKind.IDENTIFIER] == ["explore", "deposit"]


def test_non_ascii_letters_are_not_identifiers() -> None:
    tokens, diagnostics = tokenize("café")

    assert tokens[0].text == "caf"
    assert len(diagnostics) == 1
    assert diagnostics[0].position == TextPosition(1, 4)


@pytest.mark.parametrize("source", ["", "explore", "explore\n", "# only a comment", "$$$"])
def test_stream_ends_with_exactly_one_eof(source: str) -> None:
    kinds = _kinds(source)

    assert kinds[-1] == TokenKind.EOF
    assert kinds.count(TokenKind.EOF) == 1


def test_eof_is_positioned_at_end_of_input() -> None:
    tokens, _ = tokenize("explore\ndeposit")

    assert tokens[-1].position == TextPosition(2, 8)


def test_lexer_next_token_streams_until_eof() -> None:
    lexer = Lexer("wait(3)")

    kinds = []
    while not kinds or kinds[-1] != TokenKind.EOF:
        kinds.append(lexer.next_token().kind)

    assert kinds == [TokenKind.IDENTIFIER, TokenKind.LPAREN, TokenKind.NUMBER, TokenKind.RPAREN, TokenKind.EOF]
    assert lexer.is_eof


@pytest.mark.parametrize("case", VALID_CASES, ids=lambda case: case.name)
def test_shared_valid_cases_lex_cleanly(case: ScriptCase) -> None:
    tokens, diagnostics = tokenize(case.source)
    debug_dump_tokens(case.name, case.source, tokens)

    assert diagnostics == []
    assert tokens[-1].kind == TokenKind.EOF


def test_dump_tokens_prints_tokens_and_diagnostics(capsys: pytest.CaptureFixture[str]) -> None:
    tokens, diagnostics = tokenize("wait(1) =")

    dump_tokens(tokens, diagnostics)

    output = capsys.readouterr().out
    assert "IDENTIFIER" in output
    assert "LEXER_INCOMPLETE_OPERATOR" in output
