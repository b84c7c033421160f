"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from dronescript.diagnostics.diagnostic import Diagnostic, Severity
from dronescript.text import TextPosition


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(
        self,
        position: TextPosition,
        *,
        message: str | None = None,
        hint: str | None = None,
    ) -> Diagnostic:
        """Build a diagnostic from this spec, optionally overriding message/hint."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            position=position,
            severity=self.severity,
            hint=hint if hint is not None else self.hint,
            category=self.category,
        )


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    severity="error",
    category="lexer",
)

LEXER_INCOMPLETE_OPERATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INCOMPLETE_OPERATOR",
    message="Incomplete comparison operator.",
    hint="Comparison operators are `<`, `<=`, `>`, `>=`, `==` and `!=`.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_STATEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_STATEMENT",
    message="Expected statement (IF, ELSE, or command)",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_THEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_THEN",
    message="Expected THEN after condition",
    hint="Conditional statements have the form `IF <condition> THEN <command>`.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_CONDITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CONDITION",
    message="Expected identifier in condition",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_OPERAND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_OPERAND",
    message="Expected identifier or number after comparison operator",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_COMMAND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_COMMAND",
    message="Expected command name",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_ARGUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ARGUMENT",
    message="Expected argument (identifier or number)",
    hint="Arguments cannot be nested commands or expressions.",
    severity="error",
    category="parser",
)

PARSER_UNTERMINATED_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_ARGUMENTS",
    message="Expected ')' after command arguments",
    severity="error",
    category="parser",
)

VALIDATION_TOO_MANY_STATEMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_TOO_MANY_STATEMENTS",
    message="Script has too many statements.",
    severity="error",
    category="validation",
)

VALIDATION_CONDITION_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_CONDITION_TOO_DEEP",
    message="Condition combines too many terms.",
    hint="Split the condition across several IF statements.",
    severity="error",
    category="validation",
)

VALIDATION_UNKNOWN_COMMAND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_UNKNOWN_COMMAND",
    message="Unknown command.",
    severity="warning",
    category="validation",
)

VALIDATION_UNKNOWN_QUERY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_UNKNOWN_QUERY",
    message="Unknown query.",
    severity="warning",
    category="validation",
)

VALIDATION_UNKNOWN_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_UNKNOWN_VARIABLE",
    message="Unknown variable.",
    severity="warning",
    category="validation",
)

VALIDATION_ORPHAN_FALLBACK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_ORPHAN_FALLBACK",
    message="ELSE is the first statement and always runs.",
    hint="Place ELSE after the IF statements it should back up.",
    severity="warning",
    category="validation",
)

EVAL_UNKNOWN_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_UNKNOWN_VARIABLE",
    message="Unknown variable.",
    hint="The host world state does not provide this variable.",
    severity="error",
    category="evaluator",
)

EVAL_UNKNOWN_QUERY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_UNKNOWN_QUERY",
    message="Unknown query.",
    hint="The host world state does not provide this query.",
    severity="error",
    category="evaluator",
)

EVAL_UNKNOWN_COMMAND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_UNKNOWN_COMMAND",
    message="Unknown command.",
    hint="Register a handler for it in the command registry.",
    severity="warning",
    category="evaluator",
)

