"""Tests for the classifier and the two tokenizers."""

import pytest

from core import (
    Classifier, InfixTokenizer, InvalidCharacter, InvalidToken, TokenType,
    is_operand, is_operator, precedence, split_linear, tokenize_infix
)


def texts(tokens):
    return [token.text for token in tokens]


@pytest.mark.parametrize("token,expected", [
    ("+", 1), ("-", 1), ("*", 2), ("/", 2), ("(", 0), (")", 0), ("a", 0),
])
def test_precedence(token, expected):
    assert precedence(token) == expected


def test_operand_is_anything_but_operator_or_paren():
    assert is_operand("abc")
    assert is_operand("12")
    assert not is_operand("*")
    assert not is_operand("(")
    assert is_operator("/")
    assert not is_operator("^")


def test_injected_precedence_table():
    classifier = Classifier({"+": 1, "^": 3})
    assert classifier.is_operator("^")
    assert not classifier.is_operator("*")
    assert classifier.precedence("^") == 3


def test_classify_rejects_mixed_fragment():
    with pytest.raises(InvalidToken) as exc:
        Classifier().classify("a1")
    assert exc.value.token == "a1"


def test_tokenize_multichar_operands_and_whitespace():
    tokens = tokenize_infix(" foo + 12 *(bar-3.5) ")
    assert texts(tokens) == ["foo", "+", "12", "*", "(", "bar", "-", "3.5", ")"]
    assert tokens[0].type == TokenType.OPERAND
    assert tokens[1].type == TokenType.OPERATOR
    assert tokens[4].type == TokenType.LEFT_PAREN
    assert tokens[8].type == TokenType.RIGHT_PAREN


@pytest.mark.parametrize("text,expected", [
    ("12a", ["12", "a"]),
    ("a12", ["a", "12"]),
    ("ab cd", ["ab", "cd"]),
    (".5+x", [".5", "+", "x"]),
    ("x.5", ["x", ".5"]),
])
def test_numbers_and_identifiers_never_merge(text, expected):
    assert texts(tokenize_infix(text)) == expected


@pytest.mark.parametrize("text,char", [
    ("a+b^c", "^"),
    ("a.b", "."),
    ("1.", "."),
    ("a $ b", "$"),
])
def test_invalid_character(text, char):
    with pytest.raises(InvalidCharacter) as exc:
        InfixTokenizer().tokenize(text)
    assert exc.value.char == char


def test_empty_infix_yields_no_tokens():
    assert tokenize_infix("   ") == []


def test_split_linear():
    assert split_linear("  +  a\t*  b c \n") == ["+", "a", "*", "b", "c"]
    assert split_linear("") == []
