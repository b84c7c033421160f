"""DroneScript grammar routines.

Each routine returns the node it parsed, or records a diagnostic and returns
None. Only the statement loop in `parse_script` recovers.
"""

from dronescript.ast import (
    Command,
    CommandArgument,
    CommandStatement,
    ComparisonCondition,
    ComparisonOperand,
    ComparisonOperator,
    Condition,
    ConditionalStatement,
    FallbackStatement,
    Identifier,
    LogicalCondition,
    LogicalOperator,
    NumberLiteral,
    QueryCondition,
    Script,
    Statement,
)
from dronescript.diagnostics import (
    PARSER_EXPECTED_ARGUMENT,
    PARSER_EXPECTED_COMMAND,
    PARSER_EXPECTED_CONDITION,
    PARSER_EXPECTED_OPERAND,
    PARSER_EXPECTED_STATEMENT,
    PARSER_EXPECTED_THEN,
    PARSER_UNTERMINATED_ARGUMENTS,
)
from dronescript.lexer import TokenKind
from dronescript.parser.parse_lists import ParseNodeList
from dronescript.parser.parse_recovery import STATEMENT_RECOVERY, RecoveryError
from dronescript.parser.parser import Parser, unexpected

COMPARISON_OPERATORS: dict[TokenKind, ComparisonOperator] = {
    TokenKind.LESS_THAN: ComparisonOperator.LESS_THAN,
    TokenKind.LESS_THAN_OR_EQUAL: ComparisonOperator.LESS_THAN_OR_EQUAL,
    TokenKind.GREATER_THAN: ComparisonOperator.GREATER_THAN,
    TokenKind.GREATER_THAN_OR_EQUAL: ComparisonOperator.GREATER_THAN_OR_EQUAL,
    TokenKind.EQUAL_EQUAL: ComparisonOperator.EQUAL,
    TokenKind.NOT_EQUAL: ComparisonOperator.NOT_EQUAL,
}

LOGICAL_OPERATORS: dict[TokenKind, LogicalOperator] = {
    TokenKind.AND: LogicalOperator.AND,
    TokenKind.OR: LogicalOperator.OR,
}


def parse_script(parser: Parser) -> Script:
    def parse_element(current: Parser) -> Statement | None:
        statement = parse_statement(current)
        if statement is not None:
            skip_separators(current)
        return statement

    def recover_element(current: Parser, statement: Statement | None) -> bool:
        if statement is not None:
            return True

        recovery_error = STATEMENT_RECOVERY.recover(current)
        skip_separators(current)
        return recovery_error != RecoveryError.EOF

    skip_separators(parser)
    statements = ParseNodeList(
        is_at_list_end=lambda current: current.at(TokenKind.EOF),
        parse_element=parse_element,
        recover=recover_element,
    ).parse_list(parser)
    return Script(statements=tuple(statements))


def skip_separators(parser: Parser) -> None:
    while parser.eat(TokenKind.NEWLINE) is not None:
        pass


def parse_statement(parser: Parser) -> Statement | None:
    if parser.at(TokenKind.IF):
        return parse_conditional(parser)

    if parser.at(TokenKind.ELSE):
        return parse_fallback(parser)

    if parser.at(TokenKind.IDENTIFIER):
        line = parser.current.line
        command = parse_command(parser)
        if command is None:
            return None
        return CommandStatement(command=command, line=line)

    parser.error(unexpected(parser, PARSER_EXPECTED_STATEMENT))
    return None


def parse_conditional(parser: Parser) -> ConditionalStatement | None:
    line = parser.bump().line

    condition = parse_condition(parser)
    if condition is None:
        return None

    if parser.expect(TokenKind.THEN, PARSER_EXPECTED_THEN) is None:
        return None

    command = parse_command(parser)
    if command is None:
        return None

    return ConditionalStatement(condition=condition, command=command, line=line)


def parse_fallback(parser: Parser) -> FallbackStatement | None:
    line = parser.bump().line

    command = parse_command(parser)
    if command is None:
        return None

    return FallbackStatement(command=command, line=line)


def parse_condition(parser: Parser) -> Condition | None:
    # No precedence between AND and OR: fold strictly left to right.
    left = parse_term(parser)
    if left is None:
        return None

    while parser.current_kind in LOGICAL_OPERATORS:
        operator = LOGICAL_OPERATORS[parser.bump().kind]
        right = parse_term(parser)
        if right is None:
            return None
        left = LogicalCondition(left=left, operator=operator, right=right)

    return left


def parse_term(parser: Parser) -> Condition | None:
    name = parser.expect(TokenKind.IDENTIFIER, PARSER_EXPECTED_CONDITION)
    if name is None:
        return None

    if parser.current_kind not in COMPARISON_OPERATORS:
        return QueryCondition(name=name.text)

    operator = COMPARISON_OPERATORS[parser.bump().kind]
    operand = parse_operand(parser)
    if operand is None:
        parser.error(unexpected(parser, PARSER_EXPECTED_OPERAND))
        return None

    return ComparisonCondition(left=name.text, operator=operator, right=operand)


def parse_command(parser: Parser) -> Command | None:
    name = parser.expect(TokenKind.IDENTIFIER, PARSER_EXPECTED_COMMAND)
    if name is None:
        return None

    arguments: list[CommandArgument] = []
    if parser.eat(TokenKind.LPAREN) is not None:
        if not parser.at(TokenKind.RPAREN):
            while True:
                argument = parse_operand(parser)
                if argument is None:
                    parser.error(unexpected(parser, PARSER_EXPECTED_ARGUMENT))
                    return None
                arguments.append(argument)
                if parser.eat(TokenKind.COMMA) is None:
                    break

        if parser.expect(TokenKind.RPAREN, PARSER_UNTERMINATED_ARGUMENTS) is None:
            return None

    return Command(name=name.text, arguments=tuple(arguments))


def parse_operand(parser: Parser) -> ComparisonOperand | None:
    """Identifier or number leaf; shared by comparison right sides and command arguments."""
    if parser.at(TokenKind.IDENTIFIER):
        return Identifier(name=parser.bump().text)
    if parser.at(TokenKind.NUMBER):
        return NumberLiteral(raw_text=parser.bump().text)
    return None
