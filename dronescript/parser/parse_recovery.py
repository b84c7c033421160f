"""Statement-level parser recovery."""

from dataclasses import dataclass
from enum import StrEnum

from dronescript.lexer import TokenKind
from dronescript.parser.parser import Parser


class RecoveryError(StrEnum):
    EOF = "eof"
    ALREADY_RECOVERED = "already_recovered"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Recover by discarding tokens until a statement boundary.

    Discards up to and including the next line break, or up to but not
    including the next token in `resume_set`, whichever comes first.
    """

    resume_set: frozenset[TokenKind]
    line_break: bool = True

    def recover(self, parser: Parser) -> RecoveryError | None:
        if parser.at(TokenKind.EOF):
            return RecoveryError.EOF

        if parser.at_set(self.resume_set):
            return RecoveryError.ALREADY_RECOVERED

        while not parser.at(TokenKind.EOF):
            if self.line_break and parser.at(TokenKind.NEWLINE):
                parser.bump()
                return None
            if parser.at_set(self.resume_set):
                return None
            parser.bump()

        return None


STATEMENT_RECOVERY = ParseRecoveryTokenSet(resume_set=frozenset({TokenKind.IF, TokenKind.ELSE}))
