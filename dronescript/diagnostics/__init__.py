"""Diagnostics."""

from dronescript.diagnostics.codes import (
    EVAL_UNKNOWN_COMMAND,
    EVAL_UNKNOWN_QUERY,
    EVAL_UNKNOWN_VARIABLE,
    LEXER_INCOMPLETE_OPERATOR,
    LEXER_UNEXPECTED_CHARACTER,
    PARSER_EXPECTED_ARGUMENT,
    PARSER_EXPECTED_COMMAND,
    PARSER_EXPECTED_CONDITION,
    PARSER_EXPECTED_OPERAND,
    PARSER_EXPECTED_STATEMENT,
    PARSER_EXPECTED_THEN,
    PARSER_UNTERMINATED_ARGUMENTS,
    VALIDATION_CONDITION_TOO_DEEP,
    VALIDATION_ORPHAN_FALLBACK,
    VALIDATION_TOO_MANY_STATEMENTS,
    VALIDATION_UNKNOWN_COMMAND,
    VALIDATION_UNKNOWN_QUERY,
    VALIDATION_UNKNOWN_VARIABLE,
    DiagnosticSpec,
)
from dronescript.diagnostics.diagnostic import Diagnostic, Severity
from dronescript.diagnostics.report import (
    collect_diagnostics,
    format_diagnostic,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "EVAL_UNKNOWN_COMMAND",
    "EVAL_UNKNOWN_QUERY",
    "EVAL_UNKNOWN_VARIABLE",
    "LEXER_INCOMPLETE_OPERATOR",
    "LEXER_UNEXPECTED_CHARACTER",
    "PARSER_EXPECTED_ARGUMENT",
    "PARSER_EXPECTED_COMMAND",
    "PARSER_EXPECTED_CONDITION",
    "PARSER_EXPECTED_OPERAND",
    "PARSER_EXPECTED_STATEMENT",
    "PARSER_EXPECTED_THEN",
    "PARSER_UNTERMINATED_ARGUMENTS",
    "VALIDATION_CONDITION_TOO_DEEP",
    "VALIDATION_ORPHAN_FALLBACK",
    "VALIDATION_TOO_MANY_STATEMENTS",
    "VALIDATION_UNKNOWN_COMMAND",
    "VALIDATION_UNKNOWN_QUERY",
    "VALIDATION_UNKNOWN_VARIABLE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
    "sort_diagnostics",
]
