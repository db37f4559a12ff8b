import string
from enum import Enum
from typing import List

from .lexer import Token


_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters only; anything else is left as written."""
    return text.translate(_ASCII_UPPER)


def matches(token: Token, keyword: str) -> bool:
    return to_upper(token.value) == keyword


class StatementKind(Enum):
    CREATE = "CREATE"
    INSERT = "INSERT"
    SELECT = "SELECT"
    DELETE = "DELETE"
    UPDATE = "UPDATE"
    UNKNOWN = "UNKNOWN"

    def __str__(self):
        return self.value


_LEADING_KEYWORDS = {
    'CREATE': StatementKind.CREATE,
    'INSERT': StatementKind.INSERT,
    'SELECT': StatementKind.SELECT,
    'DELETE': StatementKind.DELETE,
    'UPDATE': StatementKind.UPDATE,
}


def classify(tokens: List[Token]) -> StatementKind:
    """Pick the statement kind from the first token."""
    if not tokens:
        return StatementKind.UNKNOWN
    return _LEADING_KEYWORDS.get(to_upper(tokens[0].value), StatementKind.UNKNOWN)
