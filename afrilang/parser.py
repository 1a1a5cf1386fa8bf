"""Executes Afrilang statements: assignments, ``afficher`` and ``if`` blocks."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from .lexer import tokenize
from .tokens import Token, TokenType

_END = Token(TokenType.FIN, "")
_OPERANDS = frozenset({TokenType.NUMBER, TokenType.LITERAL})
_MUL_DIV = frozenset({TokenType.MULTIPLICATION, TokenType.DIVISION})
_ADD_SUB = frozenset({TokenType.PLUS, TokenType.MOINS})

_NUMBER_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)"
    r"(?:(inf(?:inity)?|nan)|((?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?))",
    re.IGNORECASE,
)


def _stod(text: str) -> float:
    """Read the leading decimal number of ``text``; raise ValueError if there is none."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"nombre invalide : {text!r}")
    sign, special, digits = match.groups()
    if special:
        value = math.inf if special.lower().startswith("inf") else math.nan
    else:
        value = float(digits)
        if math.isinf(value):
            raise ValueError(f"nombre hors limites : {text!r}")
    return -value if sign == "-" else value


def _format(value: float) -> str:
    """Render a number with six decimals, the way numbers are printed and stored."""
    if math.isnan(value):
        return "-nan" if math.copysign(1.0, value) < 0 else "nan"
    return f"{value:f}"


def _divide(left: float, right: float) -> float:
    """IEEE division: dividing by zero gives an infinity or NaN instead of raising."""
    if right != 0:
        return left / right
    if math.isnan(left):
        return left
    if left == 0:
        return -math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Parser:
    """Runs token lists line by line; variables persist between calls."""

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.variables: dict[str, float] = {}
        self._tokens: list[Token] = []
        self._pos = 0
        self._current = _END

    def parse(self, tokens: Iterable[Token]) -> None:
        """Execute every statement in ``tokens``.

        Raises ValueError where a computed value is not a number, which
        happens when an unknown variable is used inside an expression.
        """
        self._tokens = list(tokens)
        self._pos = 0
        while self._pos < len(self._tokens):
            self._statement(False)

    def run_line(self, line: str) -> None:
        """Tokenize and execute one line of code."""
        self.parse(tokenize(line))

    # -- output ---------------------------------------------------------

    def _emit(self, text: str) -> None:
        out = self.stdout if self.stdout is not None else sys.stdout
        out.write(text + "\n")

    def _fail(self, message: str) -> None:
        """Report an error and abandon the rest of the current line."""
        if message:
            err = self.stderr if self.stderr is not None else sys.stderr
            err.write(message + "\n")
        self._pos = len(self._tokens)

    # -- cursor ---------------------------------------------------------

    def _advance(self) -> Token:
        if self._pos < len(self._tokens):
            self._current = self._tokens[self._pos]
        else:
            self._current = _END
        self._pos += 1
        return self._current

    def _type_at(self, index: int) -> TokenType:
        if 0 <= index < len(self._tokens):
            return self._tokens[index].type
        return TokenType.FIN

    def _peek(self) -> TokenType:
        return self._type_at(self._pos)

    def _skip_block(self) -> None:
        """Consume tokens up to and including the closing brace."""
        while True:
            self._advance()
            if self._current.type is TokenType.ACCOLADE_DROITE or self._pos >= len(self._tokens):
                return

    def _get_variable(self, name: str) -> str:
        if name in self.variables:
            return _format(self.variables[name])
        self._fail(f"Erreur : Variables '{name}' non reconnu")
        return ""

    # -- statements -----------------------------------------------------

    def _statement(self, ignore: bool) -> None:
        token = self._advance()
        if token.value == "quit":
            self._pos = len(self._tokens)
        if token.type is TokenType.FIN:
            return
        if token.type is TokenType.LITERAL:
            if token.value == "afficher":
                self._afficher(ignore)
            elif token.value == "if":
                self._if(ignore)
            else:
                self._assignment(ignore)
        else:
            self._fail(f"Erreur : {token.value} non reconnu (ligne invalide)")

    def _afficher(self, ignore: bool) -> None:
        if ignore:
            self._skip_block()
            return
        if self._advance().type is not TokenType.PARENT_GAUCHE:
            self._fail("Erreur : manque de '(' au début de \"afficher\" ")
            return
        token = self._advance()
        if token.type is TokenType.GUILLEMENT:
            text = self._advance().value
            if self._advance().type is not TokenType.GUILLEMENT:
                self._fail(f"Erreur : Manque de '\"' après {text}")
            elif self._advance().type is not TokenType.PARENT_DROITE:
                self._fail("Erreur : Manque de ')' à la fin ")
            else:
                self._emit(text)
        elif token.type is TokenType.LITERAL:
            if token.value not in self.variables:
                self._fail(f"Erreur : Variable '{token.value}' à afficher non reconnu")
                return
            value = self._get_variable(token.value)
            if self._advance().type is TokenType.PARENT_DROITE:
                self._emit(value)
            else:
                self._fail("Manque de ')' à la fin ")
        elif token.type is TokenType.NUMBER:
            number = self._factor()
            if self._advance().type is TokenType.PARENT_DROITE:
                if number:
                    self._emit(number)
            else:
                self._fail(f"Manque de ')' après {number}")
        else:
            self._fail('Erreur : Élément après "(" inconnu ')

    def _assignment(self, ignore: bool) -> None:
        if ignore:
            self._skip_block()
            return
        target = self._current
        if target.type is not TokenType.LITERAL or target.value == "quit":
            return
        if self._advance().type is not TokenType.EGAL:
            self._fail(f"Erreur manque de '=' après {target.value}")
            return
        token = self._advance()
        if token.type in _OPERANDS:
            self.variables[target.value] = _stod(self._expression())
        else:
            self._fail(f"Valeur après le '=' {token.value} non reconnu")

    def _if(self, ignore: bool) -> None:
        if ignore:
            self._skip_block()
            return
        if self._advance().type is not TokenType.PARENT_GAUCHE:
            self._fail("Erreur : Manque de '(' au début de 'if'")
            return
        token = self._advance()
        if token.type is TokenType.NUMBER:
            condition = _stod(token.value) > 0
        elif token.type is TokenType.LITERAL:
            condition = _stod(self._factor()) > 0
        else:
            self._fail(f"Erreur : condition '{token.value}' non reconnu")
            return
        if self._advance().type is not TokenType.PARENT_DROITE:
            self._fail("Erreur : Manque de ')' à la fin de la condition ")
            return
        if self._advance().type is not TokenType.ACCOLADE_GAUCHE:
            self._fail("Erreur : Manque de '{' après la condition ")
            return
        self._statement(not condition)
        if condition:
            self._advance()

    # -- expressions ----------------------------------------------------

    def _factor(self) -> str:
        current = self._current
        if current.type is TokenType.NUMBER:
            return current.value
        if self._peek() is TokenType.PARENT_GAUCHE:
            self._advance()
            return self._expression()
        if current.type is TokenType.LITERAL:
            return self._get_variable(current.value)
        self._fail("Erreur lors de parse Factor")
        return ""

    def _term(self) -> str:
        if self._current.type not in _OPERANDS:
            self._fail("Erreur lors de parseTerm")
            return ""
        if self._peek() not in _MUL_DIV:
            return self._factor()
        left = _stod(self._factor())
        operator = self._advance().type
        self._advance()
        following = self._peek()
        if following in _MUL_DIV:
            right = _stod(self._term())
        elif following in _ADD_SUB:
            right = _stod(self._expression())
        else:
            right = _stod(self._factor())
        if operator is TokenType.MULTIPLICATION:
            return _format(left * right)
        return _format(_divide(left, right))

    def _accumulate(self, total: float) -> float:
        adding = self._type_at(self._pos - 2) is TokenType.PLUS
        term = _stod(self._term())
        return total + term if adding else total - term

    def _expression(self) -> str:
        if self._current.type not in _OPERANDS:
            self._fail("Erreur lors de parseExpression")
            return ""
        if self._peek() not in _ADD_SUB:
            return self._term()
        total = _stod(self._term())
        operator = self._advance().type
        self._advance()
        if operator is TokenType.MOINS:
            if self._peek() in _ADD_SUB:
                rest = _stod(self._expression())
            else:
                rest = _stod(self._term())
            return _format(total - rest)
        while self._peek() in _ADD_SUB:
            total = self._accumulate(total)
            total += _stod(self._term())
            self._advance()
            self._advance()
        total = self._accumulate(total)
        return _format(total)