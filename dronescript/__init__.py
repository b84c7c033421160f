"""DroneScript front end (lexer, parser) and tick evaluator."""

from dronescript.evaluator import Evaluator, EvaluatorOptions, TickResult, default_command_registry, run
from dronescript.lexer import tokenize
from dronescript.parser import ParserOptions, parse, parse_text
from dronescript.pipeline import drone_options, parse_result, run_check, run_tick

__all__ = [
    "Evaluator",
    "EvaluatorOptions",
    "ParserOptions",
    "TickResult",
    "default_command_registry",
    "drone_options",
    "parse",
    "parse_result",
    "parse_text",
    "run",
    "run_check",
    "run_tick",
    "tokenize",
]
