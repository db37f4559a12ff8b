"""SQL Syntax Validator Package."""

from .lexer import SQLLexer, Token, tokenize
from .keywords import StatementKind, classify, to_upper
from .exceptions import RejectReason, SQLSyntaxError, StatementError
from .checkers import (
    BaseChecker,
    CreateChecker,
    InsertChecker,
    SelectChecker,
    DeleteChecker,
    UpdateChecker,
)
from .validator import SyntaxValidator, ValidationResult, parse_sql

__all__ = [
    'SQLLexer', 'Token', 'tokenize',
    'StatementKind', 'classify', 'to_upper',
    'RejectReason', 'SQLSyntaxError', 'StatementError',
    'BaseChecker', 'CreateChecker', 'InsertChecker', 'SelectChecker',
    'DeleteChecker', 'UpdateChecker',
    'SyntaxValidator', 'ValidationResult', 'parse_sql',
]
