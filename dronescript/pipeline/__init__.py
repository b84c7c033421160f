"""Shared parse carrier and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dronescript.parser.options import ParserOptions
from dronescript.pipeline.result import ScriptParseResult
from dronescript.pipeline.results import CheckRunResult, TickRunResult

if TYPE_CHECKING:
    from dronescript.evaluator import CommandRegistry, EvaluatorOptions
    from dronescript.world import WorldState


def drone_options(
    options: ParserOptions | None = None,
    *,
    registry: CommandRegistry | None = None,
) -> ParserOptions:
    from dronescript.pipeline.entrypoints import drone_options as _drone_options

    return _drone_options(options, registry=registry)


def parse_result(text: str, options: ParserOptions | None = None) -> ScriptParseResult:
    from dronescript.parser.script import parse_result as _parse_result

    return _parse_result(text, options=options)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: ScriptParseResult | None = None,
) -> CheckRunResult:
    from dronescript.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options=options, parse=parse)


def run_tick(
    text: str,
    state: WorldState,
    options: ParserOptions | None = None,
    *,
    parse: ScriptParseResult | None = None,
    registry: CommandRegistry | None = None,
    evaluator_options: EvaluatorOptions | None = None,
) -> TickRunResult:
    from dronescript.pipeline.entrypoints import run_tick as _run_tick

    return _run_tick(
        text,
        state,
        options=options,
        parse=parse,
        registry=registry,
        evaluator_options=evaluator_options,
    )


__all__ = [
    "CheckRunResult",
    "ScriptParseResult",
    "TickRunResult",
    "drone_options",
    "parse_result",
    "run_check",
    "run_tick",
]
