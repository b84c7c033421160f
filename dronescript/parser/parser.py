"""Recursive-descent parser core (token cursor + diagnostics)."""

from collections.abc import Sequence
from dataclasses import dataclass

from dronescript.diagnostics import Diagnostic, DiagnosticSpec
from dronescript.lexer import Token, TokenKind


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current}")


class Parser:
    """Token cursor with one token of lookahead. Grammar routines live in `grammar`."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token stream must end with an EOF token")
        self._tokens = tuple(tokens)
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Token:
        return self._tokens[self._position]

    @property
    def current_kind(self) -> TokenKind:
        return self.current.kind

    def at(self, kind: TokenKind) -> bool:
        return self.current_kind == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current_kind in kinds

    def bump(self) -> Token:
        """Consume the current token. EOF is never consumed."""
        token = self.current
        if token.kind != TokenKind.EOF:
            self._position += 1
        return token

    def eat(self, kind: TokenKind) -> Token | None:
        if self.at(kind):
            return self.bump()
        return None

    def expect(self, kind: TokenKind, spec: DiagnosticSpec) -> Token | None:
        token = self.eat(kind)
        if token is None:
            self.error(unexpected(self, spec))
        return token

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.position == diagnostic.position:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics


def describe_token(token: Token) -> str:
    if token.kind == TokenKind.EOF:
        return "end of input"
    if token.kind == TokenKind.NEWLINE:
        return "end of line"
    return f"{token.kind.name} '{token.text}'"


def unexpected(parser: Parser, spec: DiagnosticSpec) -> Diagnostic:
    """Diagnostic for `spec` at the current token, naming what was found instead."""
    return spec.at(
        parser.current.position,
        message=f"{spec.message}, got {describe_token(parser.current)}",
    )
