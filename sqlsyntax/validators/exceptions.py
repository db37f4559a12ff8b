from enum import Enum
from typing import Optional

from .lexer import Token


class RejectReason(Enum):
    """Why a statement was judged invalid."""

    EMPTY = "empty"
    UNKNOWN_COMMAND = "unknown_command"
    TOO_SHORT = "too_short"
    MISSING_KEYWORD = "missing_keyword"
    UNSUPPORTED_JOIN = "unsupported_join"
    MISSING_DELIMITER = "missing_delimiter"
    UNBALANCED_PARENS = "unbalanced_parens"

    def __str__(self):
        return self.value


class SQLSyntaxError(Exception):
    """Base class for errors raised while validating a statement."""


class StatementError(SQLSyntaxError):
    """
    Raised by a structural checker when a statement breaks one of its rules.
    """

    def __init__(self, reason: RejectReason, message: str, token: Optional[Token] = None):
        self.reason = reason
        self.message = message
        self.token = token
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.token and self.token.value:
            return f"{self.message} at or near \"{self.token.value}\""
        return self.message
