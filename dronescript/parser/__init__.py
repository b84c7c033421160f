"""Parser (token cursor + grammar + recovery + post-parse validation)."""

from dronescript.parser.grammar import parse_script, parse_statement
from dronescript.parser.options import ParserOptions
from dronescript.parser.parse_lists import ParseNodeList
from dronescript.parser.parse_recovery import STATEMENT_RECOVERY, ParseRecoveryTokenSet, RecoveryError
from dronescript.parser.parsed_script import ParsedScript
from dronescript.parser.parser import Parser, ParserProgress
from dronescript.parser.script import parse, parse_result, parse_text
from dronescript.parser.validate import suggest_name, validate_script

__all__ = [
    "STATEMENT_RECOVERY",
    "ParseNodeList",
    "ParseRecoveryTokenSet",
    "ParsedScript",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "RecoveryError",
    "parse",
    "parse_result",
    "parse_script",
    "parse_statement",
    "parse_text",
    "suggest_name",
    "validate_script",
]
