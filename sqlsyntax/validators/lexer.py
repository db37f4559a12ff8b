from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Token:
    value: str
    position: int

    def __str__(self) -> str:
        return self.value


class SQLLexer:
    # Same set as C isspace() in the default locale
    WHITESPACE = frozenset(" \t\r\n\v\f")

    # Always emitted as single-character tokens
    PUNCTUATION = frozenset(",();.=")

    def __init__(self, text: str):
        self.text = text
        self.tokens: List[Token] = []
        self._buffer = ""
        self._start = 0

    def tokenize(self) -> List[Token]:
        """Split the input into words and single punctuation characters."""
        self.tokens = []
        self._buffer = ""
        self._start = 0

        for position, current_char in enumerate(self.text):
            if current_char in self.WHITESPACE:
                self._flush()
            elif current_char in self.PUNCTUATION:
                self._flush()
                self.tokens.append(Token(value=current_char, position=position))
            else:
                if not self._buffer:
                    self._start = position
                self._buffer += current_char

        self._flush()
        return self.tokens

    def _flush(self) -> None:
        if self._buffer:
            self.tokens.append(Token(value=self._buffer, position=self._start))
            self._buffer = ""


def tokenize(text: str) -> List[Token]:
    return SQLLexer(text).tokenize()
