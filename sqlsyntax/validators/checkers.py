from abc import ABC, abstractmethod
from typing import Dict, List

from .exceptions import RejectReason, StatementError
from .keywords import StatementKind, matches
from .lexer import Token

DELIMITER = ";"


class BaseChecker(ABC):
    """
    Base class for the per-statement structural checkers.

    A checker only looks at token positions and keyword presence. It never
    inspects identifiers, literals or column lists.
    """

    kind: StatementKind = StatementKind.UNKNOWN
    min_tokens = 0

    def check(self, tokens: List[Token]) -> bool:
        """Return the verdict for the statement."""
        try:
            self.check_with_error(tokens)
            return True
        except StatementError:
            return False

    @abstractmethod
    def check_with_error(self, tokens: List[Token]) -> None:
        """Raise StatementError describing the first broken rule."""
        raise NotImplementedError

    def _expect_length(self, tokens: List[Token]) -> None:
        if len(tokens) < self.min_tokens:
            raise StatementError(
                RejectReason.TOO_SHORT,
                f"incomplete {self.kind} statement",
                tokens[-1] if tokens else None,
            )

    def _expect_keyword(self, tokens: List[Token], index: int, keyword: str) -> None:
        if not matches(tokens[index], keyword):
            raise StatementError(
                RejectReason.MISSING_KEYWORD,
                f"expected {keyword}",
                tokens[index],
            )

    def _expect_delimiter(self, tokens: List[Token]) -> None:
        if tokens[-1].value != DELIMITER:
            raise StatementError(
                RejectReason.MISSING_DELIMITER,
                f"missing statement delimiter \"{DELIMITER}\"",
                tokens[-1],
            )


class CreateChecker(BaseChecker):
    """CREATE TABLE name ( ... ) ;"""

    kind = StatementKind.CREATE
    min_tokens = 5

    def check_with_error(self, tokens: List[Token]) -> None:
        self._expect_length(tokens)
        self._expect_keyword(tokens, 1, 'TABLE')

        if tokens[3].value != "(":
            raise StatementError(RejectReason.MISSING_KEYWORD, "expected \"(\"", tokens[3])
        self._expect_delimiter(tokens)

        # Only the final depth matters, so ") (" counts as balanced
        depth = 0
        for token in tokens[3:]:
            if token.value == "(":
                depth += 1
            elif token.value == ")":
                depth -= 1

        if depth != 0:
            raise StatementError(RejectReason.UNBALANCED_PARENS, "unbalanced parentheses")


class InsertChecker(BaseChecker):
    """INSERT INTO name ... VALUES ... ;"""

    kind = StatementKind.INSERT
    min_tokens = 6

    def check_with_error(self, tokens: List[Token]) -> None:
        self._expect_length(tokens)
        self._expect_keyword(tokens, 1, 'INTO')

        # VALUES is matched as written, unlike every other keyword
        if not any(token.value == 'VALUES' for token in tokens):
            raise StatementError(RejectReason.MISSING_KEYWORD, "expected VALUES")
        self._expect_delimiter(tokens)


class SelectChecker(BaseChecker):
    """
    SELECT column FROM ... ;

    FROM must be the third token, so only a single-token column list passes.
    JOIN anywhere in the statement rejects it.
    """

    kind = StatementKind.SELECT
    min_tokens = 4

    def check_with_error(self, tokens: List[Token]) -> None:
        self._expect_length(tokens)
        self._expect_keyword(tokens, 2, 'FROM')

        for token in tokens:
            if matches(token, 'JOIN'):
                raise StatementError(RejectReason.UNSUPPORTED_JOIN, "JOIN is not supported", token)
        self._expect_delimiter(tokens)


class DeleteChecker(BaseChecker):
    """DELETE FROM name ... ;"""

    kind = StatementKind.DELETE
    min_tokens = 4

    def check_with_error(self, tokens: List[Token]) -> None:
        self._expect_length(tokens)
        self._expect_keyword(tokens, 1, 'FROM')
        self._expect_delimiter(tokens)


class UpdateChecker(BaseChecker):
    """UPDATE name SET ... ;"""

    kind = StatementKind.UPDATE
    min_tokens = 6

    def check_with_error(self, tokens: List[Token]) -> None:
        self._expect_length(tokens)
        self._expect_keyword(tokens, 2, 'SET')
        self._expect_delimiter(tokens)


CHECKERS: Dict[StatementKind, BaseChecker] = {
    StatementKind.CREATE: CreateChecker(),
    StatementKind.INSERT: InsertChecker(),
    StatementKind.SELECT: SelectChecker(),
    StatementKind.DELETE: DeleteChecker(),
    StatementKind.UPDATE: UpdateChecker(),
}
