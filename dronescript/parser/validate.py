"""Post-parse validation over a finished `Script`."""

from __future__ import annotations

import difflib
from collections.abc import Iterable

from dronescript.ast import (
    FallbackStatement,
    Script,
    count_condition_terms,
    iter_commands,
    iter_conditions,
    referenced_queries,
    referenced_variables,
)
from dronescript.diagnostics import (
    VALIDATION_CONDITION_TOO_DEEP,
    VALIDATION_ORPHAN_FALLBACK,
    VALIDATION_TOO_MANY_STATEMENTS,
    VALIDATION_UNKNOWN_COMMAND,
    VALIDATION_UNKNOWN_QUERY,
    VALIDATION_UNKNOWN_VARIABLE,
    Diagnostic,
    DiagnosticSpec,
)
from dronescript.parser.options import ParserOptions
from dronescript.text import TextPosition


def validate_script(script: Script, options: ParserOptions | None = None) -> list[Diagnostic]:
    """Apply size limits and vocabulary checks.

    Limits produce errors; unknown names and an initial ELSE only produce
    warnings, because the command/query vocabulary is open-ended.
    """
    resolved = options or ParserOptions()
    diagnostics: list[Diagnostic] = []

    if resolved.max_statements is not None and len(script) > resolved.max_statements:
        first_extra = script.statements[resolved.max_statements]
        diagnostics.append(
            VALIDATION_TOO_MANY_STATEMENTS.at(
                _line_start(first_extra.line),
                message=f"Script has {len(script)} statements; at most {resolved.max_statements} are allowed.",
            )
        )

    if resolved.warn_orphan_fallback and script.statements and isinstance(script.statements[0], FallbackStatement):
        diagnostics.append(VALIDATION_ORPHAN_FALLBACK.at(_line_start(script.statements[0].line)))

    for line, condition in iter_conditions(script):
        term_count = count_condition_terms(condition)
        if resolved.max_condition_terms is not None and term_count > resolved.max_condition_terms:
            diagnostics.append(
                VALIDATION_CONDITION_TOO_DEEP.at(
                    _line_start(line),
                    message=f"Condition combines {term_count} terms; at most {resolved.max_condition_terms} are allowed.",
                )
            )
        diagnostics.extend(
            _unknown_names(VALIDATION_UNKNOWN_QUERY, "query", referenced_queries(condition), line, resolved.known_queries, resolved)
        )
        diagnostics.extend(
            _unknown_names(
                VALIDATION_UNKNOWN_VARIABLE, "variable", referenced_variables(condition), line, resolved.known_variables, resolved
            )
        )

    for line, command in iter_commands(script):
        diagnostics.extend(
            _unknown_names(VALIDATION_UNKNOWN_COMMAND, "command", [command.name], line, resolved.known_commands, resolved)
        )

    return diagnostics


def suggest_name(name: str, candidates: Iterable[str], cutoff: float = 0.75) -> str | None:
    """Closest known name to `name` (case-insensitive), or None when nothing is close."""
    matches = difflib.get_close_matches(name.lower(), sorted(candidates), n=1, cutoff=cutoff)
    return matches[0] if matches else None


def _unknown_names(
    spec: DiagnosticSpec,
    noun: str,
    names: list[str],
    line: int,
    known: frozenset[str],
    options: ParserOptions,
) -> list[Diagnostic]:
    if not known:
        return []

    lowered = frozenset(candidate.lower() for candidate in known)
    diagnostics: list[Diagnostic] = []
    for name in names:
        if name.lower() in lowered:
            continue
        suggestion = suggest_name(name, lowered, options.suggestion_cutoff)
        diagnostics.append(
            spec.at(
                _line_start(line),
                message=f"Unknown {noun} `{name}`.",
                hint=f"Did you mean `{suggestion}`?" if suggestion is not None else None,
            )
        )
    return diagnostics


def _line_start(line: int) -> TextPosition:
    return TextPosition(line, 1)
