"""Token kinds and the token value produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the Afrilang lexer can produce."""

    PLUS = auto()
    MOINS = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()
    NUMBER = auto()
    LITERAL = auto()
    EGAL = auto()
    PARENT_GAUCHE = auto()
    PARENT_DROITE = auto()
    GUILLEMENT = auto()
    OTHER = auto()
    BOOL = auto()
    CHAINE_CARACTERE = auto()
    ACCOLADE_DROITE = auto()
    ACCOLADE_GAUCHE = auto()
    FIN = auto()


@dataclass(frozen=True)
class Token:
    """A token: its kind and the text it stands for."""

    type: TokenType
    value: str = ""