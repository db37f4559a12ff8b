import logging
from typing import List, Optional, Tuple

from .checkers import CHECKERS
from .exceptions import RejectReason, StatementError
from .keywords import StatementKind, classify
from .lexer import SQLLexer, Token

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of SQL syntax validation."""

    def __init__(self, is_valid: bool, tokens: Optional[List[Token]] = None,
                 kind: StatementKind = StatementKind.UNKNOWN,
                 reason: Optional[RejectReason] = None,
                 error_message: str = ""):
        self.is_valid = is_valid
        self.tokens = tokens or []
        self.kind = kind
        self.reason = reason
        self.error_message = error_message

    def __str__(self) -> str:
        if self.is_valid:
            return "Valid SQL syntax"
        return f"Syntax error: {self.error_message}"

    def __bool__(self) -> bool:
        return self.is_valid


class SyntaxValidator:
    """Tokenizes a statement and runs the structural checker for its kind."""

    def validate(self, query: str) -> ValidationResult:
        tokens = SQLLexer(query).tokenize()
        logger.debug("Tokens: %s", " ".join(f"[{token}]" for token in tokens))

        if not tokens:
            return self._reject(tokens, StatementKind.UNKNOWN, RejectReason.EMPTY, "empty query")

        kind = classify(tokens)
        if kind is StatementKind.UNKNOWN:
            return self._reject(
                tokens, kind, RejectReason.UNKNOWN_COMMAND,
                f"syntax error at or near \"{tokens[0].value}\"",
            )

        try:
            CHECKERS[kind].check_with_error(tokens)
        except StatementError as e:
            return self._reject(tokens, kind, e.reason, str(e))

        logger.debug("Valid %s statement", kind)
        return ValidationResult(is_valid=True, tokens=tokens, kind=kind)

    def _reject(self, tokens: List[Token], kind: StatementKind,
                reason: RejectReason, message: str) -> ValidationResult:
        logger.debug("Rejected %s statement (%s): %s", kind, reason, message)
        return ValidationResult(
            is_valid=False,
            tokens=tokens,
            kind=kind,
            reason=reason,
            error_message=message,
        )


def parse_sql(text: str) -> Tuple[List[Token], bool]:
    """Validate one statement, returning its tokens and the verdict."""
    result = SyntaxValidator().validate(text)
    return result.tokens, result.is_valid
