"""The grammar of the language: its syntax tree and the parsers that build it."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Union

from .basics import (
    BooleanParser,
    FloatParser,
    IntegerParser,
    NothingParser,
    StringParser,
    TypeName,
    TypeNameParser,
    ValueName,
    ValueNameParser,
)
from .brackets import curly_brackets, parentheses, square_brackets
from .collections import ManyParser, NonEmptyParser, OptionalParser, PairParser
from .core import ParseResult, Parser
from .derive import Enum, Field, Lazy, Struct
from .separators import SeparatedBy, SeparatedOnce, StatementVec
from .vec_window import VecWindow
from .words import BracketPair, Word, split_words

COMMA = ","
COLON = ":"
SEMICOLON = ";"
ARROW_RIGHT = "->"

BRACKET_PAIRS = (BracketPair("{", "}"), BracketPair("(", ")"), BracketPair("[", "]"))


@dataclass(frozen=True)
class Ast:
    items: list[Declaration]


@dataclass(frozen=True)
class UseDeclaration:
    imports: list[ValueName | TypeName]
    source: str


@dataclass(frozen=True)
class DocDeclaration:
    comment: str


@dataclass(frozen=True)
class TypeDeclaration:
    is_pub: bool
    name: TypeName
    type_args: list[TypeName]
    dependencies: list[TypedValue] | None
    value: Type


@dataclass(frozen=True)
class HasDeclaration:
    name: TypeName
    type_args: list[TypeName]
    value: list[HasRequirement]


@dataclass(frozen=True)
class DefDeclaration:
    is_pub: bool
    name: ValueName
    type_args: list[TypeName]
    value: TypeRef


@dataclass(frozen=True)
class LetDeclaration:
    name: ValueName
    be: Value


@dataclass(frozen=True)
class FunctionTypeRef:
    argument: TypeRef
    result: TypeRef


@dataclass(frozen=True)
class ParenTypeRef:
    inner: TypeRef


@dataclass(frozen=True)
class TypeRefWithDependencies:
    type_: TypeName
    args: list[TypeRef]
    dependencies: list[tuple[ValueName, Value]]


@dataclass(frozen=True)
class RawTypeRef:
    type_: TypeName
    args: list[TypeRef]


@dataclass(frozen=True)
class TypedValue:
    name: ValueName
    type_: TypeRef


@dataclass(frozen=True)
class HasRequirement:
    name: ValueName
    type_: TypeRef


@dataclass(frozen=True)
class UnionOption:
    name: TypeName
    value: TypeRef | None


@dataclass(frozen=True)
class UnionType:
    options: list[UnionOption]


@dataclass(frozen=True)
class TupleType:
    items: list[TypeRef]


@dataclass(frozen=True)
class MatchType:
    on: TypeRef | ValueName
    matchers: list[Matcher]


@dataclass(frozen=True)
class Matcher:
    on: Any
    value: Any


@dataclass(frozen=True)
class MatchUnion:
    name: TypeName
    value: Any


@dataclass(frozen=True)
class MatchTuple:
    items: list[Any]


@dataclass(frozen=True)
class ParenValue:
    inner: Value


@dataclass(frozen=True)
class ListValue:
    items: list[Value]


@dataclass(frozen=True)
class MatchSequence:
    value: Value
    matchers: list[Matcher]


@dataclass(frozen=True)
class CallSequence:
    start: CallsStart
    calls: list[CallsContinue]


@dataclass(frozen=True)
class FunctionValue:
    args: list[ValueName]
    returns: Value
    with_: list[FunctionWithBlock]


@dataclass(frozen=True)
class FunctionWithBlock:
    name: ValueName
    block: Value


@dataclass(frozen=True)
class CallsStart:
    initial: Value
    function: ValueName
    args: list[Value]


@dataclass(frozen=True)
class CallsContinue:
    function: ValueName
    args: list[Value]


Declaration = Union[
    UseDeclaration,
    DocDeclaration,
    TypeDeclaration,
    HasDeclaration,
    DefDeclaration,
    LetDeclaration,
]
TypeRef = Union[FunctionTypeRef, ParenTypeRef, TypeRefWithDependencies, RawTypeRef]
Type = Union[UnionType, TupleType, MatchType]
Value = Union[
    ParenValue,
    ListValue,
    MatchSequence,
    CallSequence,
    bool,
    int,
    float,
    str,
    FunctionValue,
    ValueName,
]


def _single(
    name: str, parser: Parser, build: Callable[[Any], Any] = lambda value: value
) -> Struct:
    """A variant holding one unnamed field, optionally wrapped by ``build``."""
    return Struct(name, [Field("0", parser)], build)


_TYPE_NAME = TypeNameParser()
_VALUE_NAME = ValueNameParser()

_type_ref = Lazy(lambda: _TYPE_REF)
_type = Lazy(lambda: _TYPE)
_value = Lazy(lambda: _VALUE)

_PUB = OptionalParser(
    Struct("PubToken", [Field("_nothing", NothingParser(), "pub")], lambda _: True)
)


def _match_item(value: Parser) -> Parser:
    match_item = Enum(
        "MatchItem",
        [
            Struct(
                "MatchItem::Union",
                [
                    Field("name", _TYPE_NAME),
                    Field("value", OptionalParser(Lazy(lambda: match_item))),
                ],
                MatchUnion,
            ),
            _single(
                "MatchItem::Tuple",
                curly_brackets(SeparatedBy(SEMICOLON, Lazy(lambda: match_item))),
                MatchTuple,
            ),
            _single("MatchItem::Value", value),
        ],
    )
    return match_item


def _matcher(match_value: Parser, value: Parser) -> Parser:
    return Struct(
        "Matcher",
        [Field("on", _match_item(match_value), "|"), Field("value", value, "->")],
        Matcher,
    )


_TYPE_REF = Enum(
    "TypeRef",
    [
        _single(
            "TypeRef::Function",
            SeparatedOnce(ARROW_RIGHT, _type_ref, _type_ref),
            lambda pair: FunctionTypeRef(*pair),
        ),
        _single("TypeRef::InParens", parentheses(_type_ref), ParenTypeRef),
        Struct(
            "TypeRef::WithDependencies",
            [
                Field("type_", _TYPE_NAME),
                Field("args", ManyParser(_type_ref)),
                Field(
                    "dependencies",
                    curly_brackets(
                        SeparatedBy(SEMICOLON, PairParser(_VALUE_NAME, _value))
                    ),
                ),
            ],
            TypeRefWithDependencies,
        ),
        Struct(
            "TypeRef::Raw",
            [Field("type_", _TYPE_NAME), Field("args", ManyParser(_type_ref))],
            RawTypeRef,
        ),
    ],
)

_TYPED_VALUE = Struct(
    "TypedValue", [Field("name", _VALUE_NAME), Field("type_", _type_ref)], TypedValue
)

_HAS_REQUIREMENT = Struct(
    "HasRequirement",
    [Field("name", _VALUE_NAME), Field("type_", _type_ref, "=>")],
    HasRequirement,
)

_UNION_OPTION = Struct(
    "UnionOption",
    [Field("name", _TYPE_NAME, "|"), Field("value", OptionalParser(_type_ref))],
    UnionOption,
)

_TYPE_OR_VALUE = Enum(
    "TypeOrValue",
    [
        _single("TypeOrValue::Type", _type_ref),
        _single("TypeOrValue::Value", _VALUE_NAME),
    ],
)

_TYPE = Enum(
    "Type",
    [
        _single("Type::Union", NonEmptyParser(_UNION_OPTION), UnionType),
        _single(
            "Type::Tuple", curly_brackets(SeparatedBy(SEMICOLON, _type_ref)), TupleType
        ),
        Struct(
            "Type::Match",
            [
                Field("on", _TYPE_OR_VALUE),
                Field("matchers", NonEmptyParser(_matcher(_TYPE_OR_VALUE, _type)), ":"),
            ],
            MatchType,
        ),
    ],
)

_FUNCTION_WITH_BLOCK = Struct(
    "FunctionWithBlock",
    [Field("name", _VALUE_NAME, "<-"), Field("block", _value, "=")],
    FunctionWithBlock,
)

_CALLS_START = Struct(
    "CallsStart",
    [
        Field("initial", _value),
        Field("function", _VALUE_NAME),
        Field("args", ManyParser(_value)),
    ],
    CallsStart,
)

_CALLS_CONTINUE = Struct(
    "CallsContinue",
    [Field("function", _VALUE_NAME), Field("args", ManyParser(_value))],
    CallsContinue,
)

_VALUE = Enum(
    "Value",
    [
        _single("Value::InParens", parentheses(_value), ParenValue),
        _single("Value::List", square_brackets(SeparatedBy(SEMICOLON, _value)), ListValue),
        _single(
            "Value::MatchSequence",
            SeparatedOnce(COLON, _value, NonEmptyParser(_matcher(_VALUE_NAME, _value))),
            lambda pair: MatchSequence(*pair),
        ),
        _single(
            "Value::CallSequence",
            SeparatedOnce(COMMA, _CALLS_START, SeparatedBy(COMMA, _CALLS_CONTINUE)),
            lambda pair: CallSequence(*pair),
        ),
        _single("Value::Boolean", BooleanParser()),
        _single("Value::Int", IntegerParser()),
        _single("Value::Float", FloatParser()),
        _single("Value::String", StringParser()),
        Struct(
            "Value::Function",
            [
                Field("args", NonEmptyParser(_VALUE_NAME)),
                Field("returns", _value, "->"),
                Field("with_", ManyParser(_FUNCTION_WITH_BLOCK)),
            ],
            FunctionValue,
        ),
        _single("Value::Ref", _VALUE_NAME),
    ],
)

_IMPORT = Enum(
    "Import",
    [_single("Import::Value", _VALUE_NAME), _single("Import::Type", _TYPE_NAME)],
)


def _type_declaration(is_pub, name, type_args, dependencies, value) -> TypeDeclaration:
    return TypeDeclaration(is_pub is not None, name, type_args, dependencies, value)


def _def_declaration(is_pub, name, type_args, value) -> DefDeclaration:
    return DefDeclaration(is_pub is not None, name, type_args, value)


_DECLARATION = Enum(
    "Declaration",
    [
        Struct(
            "Declaration::Use",
            [
                Field("imports", curly_brackets(SeparatedBy(SEMICOLON, _IMPORT)), "use"),
                Field("source", StringParser()),
            ],
            UseDeclaration,
        ),
        Struct(
            "Declaration::Doc",
            [Field("comment", StringParser(), "doc")],
            DocDeclaration,
        ),
        Struct(
            "Declaration::Type",
            [
                Field("is_pub", _PUB, "typ"),
                Field("name", _TYPE_NAME),
                Field("type_args", ManyParser(_TYPE_NAME)),
                Field(
                    "dependencies",
                    OptionalParser(curly_brackets(SeparatedBy(SEMICOLON, _TYPED_VALUE))),
                ),
                Field("value", _TYPE, "="),
            ],
            _type_declaration,
        ),
        Struct(
            "Declaration::Has",
            [
                Field("name", _TYPE_NAME, "has"),
                Field("type_args", ManyParser(_TYPE_NAME)),
                Field("value", NonEmptyParser(_HAS_REQUIREMENT), "="),
            ],
            HasDeclaration,
        ),
        Struct(
            "Declaration::Def",
            [
                Field("is_pub", _PUB, "def"),
                Field("name", _VALUE_NAME),
                Field("type_args", ManyParser(_TYPE_NAME)),
                Field("value", _TYPE_REF, "="),
            ],
            _def_declaration,
        ),
        Struct(
            "Declaration::Let",
            [Field("name", _VALUE_NAME, "let"), Field("be", _VALUE, "=")],
            LetDeclaration,
        ),
    ],
)

_AST = Struct("AST", [Field("items", StatementVec(_DECLARATION))], Ast)


def split_source(text: str) -> list[Word]:
    """Split program text into words, grouping ``{}``, ``()`` and ``[]``."""
    return split_words(text, BRACKET_PAIRS)


def parse_program(words: Iterable[Word] | VecWindow) -> ParseResult:
    """Parse a whole program; the value is an :class:`Ast`."""
    window = words if isinstance(words, VecWindow) else VecWindow(list(words))
    return _AST.parse(window)