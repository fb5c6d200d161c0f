import pytest

from souplang.basics import BooleanParser, IntegerParser
from souplang.brackets import parentheses
from souplang.core import ParseError
from souplang.derive import Enum, Field, Lazy, Struct
from souplang.vec_window import VecWindow
from souplang.words import BracketPair, split_words

PAIRS = [BracketPair("(", ")")]


def window(text):
    return VecWindow(split_words(text, PAIRS))


def fancy_int():
    return Struct("FancyInt", [Field("value", IntegerParser(), "int")], lambda v: v)


def test_struct_consumes_keyword_and_value():
    result = fancy_int().parse(window("int 5 more"))
    assert result.ok
    assert result.value == 5
    assert len(result.rest) == 1
    assert result.errors == []


def test_struct_keyword_mismatch_reports_keyword():
    words = window("num 5")
    result = fancy_int().parse(words)
    assert not result.ok
    assert result.errors == [ParseError("int", words.first())]
    assert len(result.rest) == 2


def test_struct_keyword_at_end_of_input():
    result = fancy_int().parse(window(""))
    assert not result.ok
    assert result.errors == [ParseError("int", None)]


def test_struct_passes_values_in_order():
    pair = Struct(
        "Pair",
        [Field("x", IntegerParser()), Field("y", IntegerParser())],
        lambda x, y: (x, y),
    )
    result = pair.parse(window("1 2 3"))
    assert result.value == (1, 2)
    assert len(result.rest) == 1


def test_struct_field_failure_keeps_errors():
    pair = Struct(
        "Pair",
        [Field("x", IntegerParser()), Field("y", IntegerParser())],
        lambda x, y: (x, y),
    )
    words = window("1 x")
    result = pair.parse(words)
    assert not result.ok
    assert [e.expected for e in result.errors] == ["<<integer>>"]
    assert result.errors[0].got == words.get(1)


def test_struct_without_fields_consumes_nothing():
    unit = Struct("Unit", [], lambda: "unit")
    result = unit.parse(window("a b"))
    assert result.ok
    assert result.value == "unit"
    assert len(result.rest) == 2


def test_struct_starting_keywords():
    assert fancy_int().starting_keywords() == ["int"]
    plain = Struct("Plain", [Field("v", IntegerParser())], lambda v: v)
    assert plain.starting_keywords() == []


def test_enum_skips_variant_with_other_keyword():
    choice = Enum(
        "Choice",
        [fancy_int(), Struct("Plain", [Field("0", IntegerParser())], lambda v: -v)],
    )
    assert choice.parse(window("int 3")).value == 3
    assert choice.parse(window("4")).value == -4
    failed = choice.parse(window("x"))
    assert not failed.ok
    assert [e.expected for e in failed.errors] == ["<<integer>>"]
    assert failed.errors[0].unlikely is False


def test_enum_marks_shallower_branches_unlikely():
    choice = Enum(
        "Choice",
        [
            Struct(
                "Two",
                [Field("a", IntegerParser()), Field("b", IntegerParser())],
                lambda a, b: (a, b),
            ),
            Struct("Bool", [Field("0", BooleanParser())], lambda v: v),
        ],
    )
    result = choice.parse(window("1 x"))
    assert not result.ok
    assert [e.expected for e in result.errors] == ["<<integer>>", "<<boolean>>"]
    assert [e.unlikely for e in result.errors] == [False, True]
    assert len(result.rest) == 2


def test_enum_starting_keywords():
    choice = Enum(
        "Choice",
        [fancy_int(), Struct("Plain", [Field("0", IntegerParser())], lambda v: v)],
    )
    assert choice.starting_keywords() == ["int"]


def test_empty_enum_is_rejected():
    with pytest.raises(ValueError):
        Enum("Nothing", [])


def test_lazy_allows_recursion():
    expr = None
    expr = Enum(
        "Expr",
        [
            Struct("Paren", [Field("0", parentheses(Lazy(lambda: expr)))], lambda v: v),
            Struct("Int", [Field("0", IntegerParser())], lambda v: v),
        ],
    )
    result = expr.parse(window("((3))"))
    assert result.ok
    assert result.value == 3
    assert len(result.rest) == 0


def test_lazy_builds_once():
    calls = []

    def factory():
        calls.append(1)
        return fancy_int()

    lazy = Lazy(factory)
    assert lazy.parse(window("int 1")).value == 1
    assert lazy.parse(window("int 2")).value == 2
    assert lazy.starting_keywords() == ["int"]
    assert len(calls) == 1