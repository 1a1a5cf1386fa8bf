"""Turns a line of Afrilang source into a list of tokens."""

from __future__ import annotations

from .tokens import Token, TokenType

_QUOTE = '"'
_BLANKS = frozenset(" \n")
_SENTINEL = "\0"

_SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MOINS,
    "*": TokenType.MULTIPLICATION,
    "/": TokenType.DIVISION,
    "(": TokenType.PARENT_GAUCHE,
    ")": TokenType.PARENT_DROITE,
    '"': TokenType.GUILLEMENT,
    "=": TokenType.EGAL,
    "{": TokenType.ACCOLADE_GAUCHE,
    "}": TokenType.ACCOLADE_DROITE,
}


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Lexer for one line of Afrilang code."""

    def __init__(self, code: str) -> None:
        self.code = code

    def _compact(self) -> str:
        """Drop spaces and newlines that are not inside a quoted string."""
        kept = []
        inside = False
        for ch in self.code:
            if ch == _QUOTE:
                inside = not inside
            if inside or ch not in _BLANKS:
                kept.append(ch)
        return "".join(kept)

    def generate_tokens(self) -> list[Token]:
        """Return the tokens of the code, always ending with a FIN token."""
        text = self._compact()
        tokens: list[Token] = []
        pending: list[str] = []
        inside = False

        def flush(kind: TokenType) -> None:
            tokens.append(Token(kind, "".join(pending)))
            pending.clear()

        for ch, following in zip(text, text[1:] + _SENTINEL):
            if ch == _QUOTE:
                inside = not inside

            if not inside:
                if _is_letter(ch):
                    pending.append(ch)
                    if not _is_letter(following):
                        flush(TokenType.LITERAL)
                elif _is_digit(ch):
                    pending.append(ch)
                    if not _is_digit(following):
                        flush(TokenType.NUMBER)
                elif ch in _SYMBOLS:
                    tokens.append(Token(_SYMBOLS[ch], ch))
                else:
                    tokens.append(Token(TokenType.OTHER, ""))
            elif ch == _QUOTE:
                tokens.append(Token(TokenType.GUILLEMENT, _QUOTE))
                if following == _QUOTE:
                    tokens.append(Token(TokenType.CHAINE_CARACTERE, ""))
            else:
                pending.append(ch)
                if following == _QUOTE:
                    flush(TokenType.CHAINE_CARACTERE)

        tokens.append(Token(TokenType.FIN, ""))
        return tokens


def tokenize(code: str) -> list[Token]:
    """Return the tokens of one line of code."""
    return Lexer(code).generate_tokens()