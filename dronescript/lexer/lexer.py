"""Lexer."""

from dronescript.diagnostics import (
    LEXER_INCOMPLETE_OPERATOR,
    LEXER_UNEXPECTED_CHARACTER,
    Diagnostic,
)
from dronescript.diagnostics.report import format_diagnostic
from dronescript.lexer.tokens import Token, TokenKind, keyword_kind
from dronescript.text import TextPosition

_TWO_CHAR_OPERATORS: dict[str, TokenKind] = {
    "<=": TokenKind.LESS_THAN_OR_EQUAL,
    ">=": TokenKind.GREATER_THAN_OR_EQUAL,
    "==": TokenKind.EQUAL_EQUAL,
    "!=": TokenKind.NOT_EQUAL,
}

_ONE_CHAR_TOKENS: dict[str, TokenKind] = {
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}


class Lexer:
    """Single-pass lexer that drops whitespace/comments and keeps line breaks as tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 1
        self._column = 1
        self._current_start = TextPosition.start()
        self._eof_emitted = False
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> TextPosition:
        return TextPosition(self._line, self._column)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        while True:
            self._skip_trivia()
            self._current_start = self.position

            if self.is_eof:
                self._eof_emitted = True
                return Token(TokenKind.EOF, "", self._current_start)

            token = self._lex_token()
            if token is not None:
                return token

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while not self._eof_emitted:
            tokens.append(self.next_token())
        return tokens

    def _lex_token(self) -> Token | None:
        start = self._position
        ch = self._current_char()

        if ch == "\n":
            self._advance(1)
            token = Token(TokenKind.NEWLINE, "\n", self._current_start)
            self._line += 1
            self._column = 1
            return token

        if _is_identifier_start(ch):
            return self._lex_identifier(start)

        if _is_digit(ch):
            return self._lex_number(start)

        pair = ch + self._peek_char()
        if pair in _TWO_CHAR_OPERATORS:
            self._advance(2)
            return Token(_TWO_CHAR_OPERATORS[pair], pair, self._current_start)

        if ch in _ONE_CHAR_TOKENS:
            self._advance(1)
            return Token(_ONE_CHAR_TOKENS[ch], ch, self._current_start)

        if ch == "=" or ch == "!":
            self._error_incomplete_operator(ch)
        else:
            self._error_unexpected_character(ch)
        self._advance(1)
        return None

    def _lex_identifier(self, start: int) -> Token:
        self._advance(1)
        while not self.is_eof and _is_identifier_continue(self._current_char()):
            self._advance(1)
        text = self._source[start : self._position]
        kind = keyword_kind(text) or TokenKind.IDENTIFIER
        return Token(kind, text, self._current_start)

    def _lex_number(self, start: int) -> Token:
        while not self.is_eof and _is_digit(self._current_char()):
            self._advance(1)
        # A fraction needs at least one digit after the dot.
        if self._current_char() == "." and _is_digit(self._peek_char()):
            self._advance(1)
            while not self.is_eof and _is_digit(self._current_char()):
                self._advance(1)
        return Token(TokenKind.NUMBER, self._source[start : self._position], self._current_start)

    def _skip_trivia(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t" or ch == "\r":
                self._advance(1)
                continue
            if ch == "#":
                # Comment runs to end of line; the newline itself is still a token.
                while not self.is_eof and self._current_char() != "\n":
                    self._advance(1)
                continue
            break

    def _error_incomplete_operator(self, ch: str) -> None:
        suggestion = "==" if ch == "=" else "!="
        meaning = "equality" if ch == "=" else "not-equal"
        self._diagnostics.append(
            LEXER_INCOMPLETE_OPERATOR.at(
                self._current_start,
                message=f"Unexpected character '{ch}'. Did you mean '{suggestion}' for {meaning} comparison?",
            )
        )

    def _error_unexpected_character(self, ch: str) -> None:
        self._diagnostics.append(
            LEXER_UNEXPECTED_CHARACTER.at(
                self._current_start,
                message=f"Unexpected character {ch!r}",
            )
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps
        self._column += steps


def _is_identifier_start(ch: str) -> bool:
    return ch == "_" or "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_identifier_continue(ch: str) -> bool:
    return _is_identifier_start(ch) or _is_digit(ch)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def tokenize(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """Lex `source` completely. Always ends with exactly one EOF token."""
    lexer = Lexer(source)
    tokens = lexer.lex()
    return tokens, lexer.diagnostics


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, position and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<22} at={tok.position.as_tuple()} text={tok.text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {format_diagnostic(d)}")
