"""Entrypoints that check or run a script over one parse lifecycle."""

from __future__ import annotations

import logging

from dronescript.diagnostics import Diagnostic, has_errors, sort_diagnostics
from dronescript.evaluator import CommandRegistry, Evaluator, EvaluatorOptions, default_command_registry
from dronescript.parser import ParserOptions, parse_result
from dronescript.pipeline.result import ScriptParseResult
from dronescript.pipeline.results import CheckRunResult, TickRunResult
from dronescript.world import QUERY_NAMES, VARIABLE_NAMES, WorldState

logger = logging.getLogger(__name__)


def drone_options(
    options: ParserOptions | None = None,
    *,
    registry: CommandRegistry | None = None,
) -> ParserOptions:
    """Extend `options` with the command names of `registry` and the drone query and variable names."""
    commands = (registry if registry is not None else default_command_registry()).names()
    return (options or ParserOptions()).with_vocabulary(
        commands=commands,
        queries=QUERY_NAMES,
        variables=VARIABLE_NAMES,
    )


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: ScriptParseResult | None = None,
) -> CheckRunResult:
    """Run lexer, parser and validation checks without evaluating."""
    resolved_parse = _resolve_parse(text, options=options, parse=parse)
    diagnostics = _dedupe_diagnostics([*resolved_parse.diagnostics, *resolved_parse.validation_diagnostics()])
    logger.debug("Checked script: %d diagnostics", len(diagnostics))
    return CheckRunResult(
        parse=resolved_parse,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def run_tick(
    text: str,
    state: WorldState,
    options: ParserOptions | None = None,
    *,
    parse: ScriptParseResult | None = None,
    registry: CommandRegistry | None = None,
    evaluator_options: EvaluatorOptions | None = None,
) -> TickRunResult:
    """Evaluate one tick. Syntax errors do not block evaluation of the partial script."""
    resolved_parse = _resolve_parse(text, options=options, parse=parse)
    tick = Evaluator(registry=registry, options=evaluator_options).run(resolved_parse.script, state)
    diagnostics = _dedupe_diagnostics([*resolved_parse.diagnostics, *tick.diagnostics])
    return TickRunResult(parse=resolved_parse, tick=tick, diagnostics=diagnostics)


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    parse: ScriptParseResult | None,
) -> ScriptParseResult:
    if parse is not None:
        if options is not None:
            raise ValueError("Pass either parse or options, not both")
        return parse
    return parse_result(text, options=options)


def _dedupe_diagnostics(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    deduped: list[Diagnostic] = []
    seen: set[tuple[int, int, str, str, str | None]] = set()
    for diagnostic in diagnostics:
        key = (diagnostic.line, diagnostic.column, diagnostic.code, diagnostic.message, diagnostic.hint)
        if key in seen:
            continue
        seen.add(key)
        deduped.append(diagnostic)
    return sort_diagnostics(deduped)
