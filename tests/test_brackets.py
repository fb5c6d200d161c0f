import pytest

from souplang.basics import IntegerParser
from souplang.brackets import (
    BracketsParser,
    curly_brackets,
    parentheses,
    square_brackets,
)
from souplang.vec_window import VecWindow
from souplang.words import BracketPair, split_words

BRACKET_PAIRS = [BracketPair("{", "}"), BracketPair("(", ")"), BracketPair("[", "]")]


def window(text):
    return VecWindow(split_words(text, BRACKET_PAIRS))


@pytest.mark.parametrize(
    "factory, text",
    [(square_brackets, "[1]"), (curly_brackets, "{1}"), (parentheses, "(1)")],
)
def test_valid(factory, text):
    result = factory(IntegerParser()).parse(window(text))
    assert result.ok
    assert result.value == 1
    assert len(result.rest) == 0
    assert result.errors == []


def test_invalid_inside():
    result = square_brackets(IntegerParser()).parse(window("[a]"))
    assert not result.ok
    assert result.value is None
    assert len(result.rest) == 1
    assert len(result.errors) == 1
    assert result.errors[0].expected == "]"
    assert result.errors[0].got.get_word() == "a"


def test_invalid_no_brackets():
    result = square_brackets(IntegerParser()).parse(window("1 2"))
    assert not result.ok
    assert len(result.rest) == 2
    assert len(result.errors) == 1
    assert result.errors[0].expected == "["


def test_invalid_did_not_expect_more():
    result = square_brackets(IntegerParser()).parse(window("[1 2]"))
    assert not result.ok
    assert len(result.rest) == 1
    assert len(result.errors) == 1
    assert result.errors[0].got.get_word() == "2"


def test_wrong_bracket_kind():
    result = parentheses(IntegerParser()).parse(window("[1]"))
    assert not result.ok
    assert result.errors[0].expected == "("
    assert len(result.rest) == 1


def test_end_of_input():
    result = curly_brackets(IntegerParser()).parse(window(""))
    assert not result.ok
    assert result.errors[0].expected == "{"
    assert result.errors[0].got is None


def test_words_after_group_remain():
    result = BracketsParser("[", "]", IntegerParser()).parse(window("[7] 8"))
    assert result.value == 7
    assert [w.get_word() for w in result.rest] == ["8"]