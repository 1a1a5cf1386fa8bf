"""A small lexer for arithmetic expressions of numbers, '+', '*' and parentheses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_MAX = 2**31 - 1


class ArithToken(Enum):
    """Kinds of arithmetic tokens."""

    NUMBER = auto()
    PLUS = auto()
    ASTERISK = auto()
    LPAREN = auto()
    RPAREN = auto()
    END = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Lexeme:
    """A token kind with its text."""

    type: ArithToken
    value: str


_SYMBOLS = {
    "+": ArithToken.PLUS,
    "*": ArithToken.ASTERISK,
    "(": ArithToken.LPAREN,
    ")": ArithToken.RPAREN,
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class ArithLexer:
    """Reads arithmetic tokens one at a time; `current` holds the latest one."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False
        self.current = Lexeme(ArithToken.INVALID, "")
        self.next_token()

    def _read_char(self) -> str | None:
        if self._failed:
            return None
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(self._text):
            self._failed = True
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def _read_number(self, start: int) -> int:
        end = start
        while end < len(self._text) and _is_digit(self._text[end]):
            end += 1
        self._pos = end
        value = int(self._text[start:end])
        if value > _INT_MAX:
            # An out-of-range read saturates and leaves the stream unusable.
            self._failed = True
            return _INT_MAX
        return value

    def next_token(self) -> Lexeme:
        """Advance to the next token and return it."""
        ch = self._read_char()
        if ch is None:
            self.current = Lexeme(ArithToken.END, "")
        elif _is_digit(ch):
            value = self._read_number(self._pos - 1)
            self.current = Lexeme(ArithToken.NUMBER, str(value))
        elif ch in _SYMBOLS:
            self.current = Lexeme(_SYMBOLS[ch], ch)
        else:
            self.current = Lexeme(ArithToken.INVALID, ch)
        return self.current

    def __iter__(self) -> Iterator[Lexeme]:
        """Yield tokens from the current one up to and including END."""
        yield self.current
        while self.current.type is not ArithToken.END:
            yield self.next_token()