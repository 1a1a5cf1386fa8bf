import dataclasses

import pytest

from afrilang.tokens import Token, TokenType


def test_token_type_order_matches_language_definition():
    names = [Token(member).type.name for member in TokenType]
    assert names == [
        "PLUS",
        "MOINS",
        "MULTIPLICATION",
        "DIVISION",
        "NUMBER",
        "LITERAL",
        "EGAL",
        "PARENT_GAUCHE",
        "PARENT_DROITE",
        "GUILLEMENT",
        "OTHER",
        "BOOL",
        "CHAINE_CARACTERE",
        "ACCOLADE_DROITE",
        "ACCOLADE_GAUCHE",
        "FIN",
    ]


def test_token_value_defaults_to_empty():
    token = Token(TokenType.FIN)
    assert token.value == ""
    assert token.type is TokenType.FIN


def test_tokens_compare_by_type_and_value():
    assert Token(TokenType.NUMBER, "12") == Token(TokenType.NUMBER, "12")
    assert Token(TokenType.NUMBER, "12") != Token(TokenType.LITERAL, "12")
    assert Token(TokenType.NUMBER, "12") != Token(TokenType.NUMBER, "13")


def test_token_is_immutable():
    token = Token(TokenType.PLUS, "+")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = "-"
    assert token.value == "+"
    assert token == Token(TokenType.PLUS, "+")


def test_token_is_hashable():
    tokens = {Token(TokenType.PLUS, "+"), Token(TokenType.PLUS, "+")}
    assert len(tokens) == 1