"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from dronescript.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(diagnostics, key=lambda d: (d.position, d.code))


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render as `[Line L, Column C] error CODE: message (hint)`."""
    text = (
        f"[Line {diagnostic.line}, Column {diagnostic.column}] "
        f"{diagnostic.severity} {diagnostic.code}: {diagnostic.message}"
    )
    if diagnostic.hint:
        text += f" ({diagnostic.hint})"
    return text
