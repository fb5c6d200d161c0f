"""Parsers for single words: literals, names and raw words."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .core import (
    ParseError,
    ParseResult,
    Parser,
    log_eof,
    log_error,
    log_parsed,
    log_start,
)
from .vec_window import VecWindow
from .words import Word

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True)
class TypeName:
    """A capitalised, alphanumeric name such as ``Maybe``."""

    text: str
    line_number: int
    column_from: int
    column_to: int


@dataclass(frozen=True)
class ValueName:
    """A lower-case name such as ``map_all``."""

    text: str
    line_number: int
    column_from: int
    column_to: int


def _parse_word(
    words: VecWindow, type_name: str, parse_one: Callable[[Word], Any]
) -> ParseResult:
    """Parse the first word with ``parse_one``, which returns None on mismatch."""
    log_start(type_name)
    word = words.first()
    if word is None:
        log_eof(type_name)
        return ParseResult(None, words, [ParseError(type_name, None)], False)
    value = parse_one(word)
    if value is None:
        log_error(type_name, word)
        return ParseResult(None, words, [ParseError(type_name, word)], False)
    log_parsed(type_name, word)
    return ParseResult(value, words.skip(1), [])


def _string(word: Word) -> str | None:
    text = word.get_word()
    if text is None or len(text) < 2:
        return None
    if text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return None


def _integer(word: Word) -> int | None:
    text = word.get_word()
    if text is None or not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else None


def _float(word: Word) -> float | None:
    text = word.get_word()
    if text is None or not _FLOAT.fullmatch(text):
        return None
    return float(text)


def _boolean(word: Word) -> bool | None:
    return {"true": True, "false": False}.get(word.get_word() or "")


def _type_name(word: Word) -> TypeName | None:
    text = word.get_word()
    if not text or not text[0].isupper() or not all(c.isalnum() for c in text):
        return None
    return TypeName(text, word.line, word.column_from, word.column_to)


def _value_name(word: Word) -> ValueName | None:
    text = word.get_word()
    if not text or not text[0].islower():
        return None
    if not all(c.islower() or c == "_" or c.isnumeric() for c in text):
        return None
    return ValueName(text, word.line, word.column_from, word.column_to)


class AnyWordParser(Parser):
    """Takes the first word, whatever it is; fails silently on empty input."""

    def parse(self, words: VecWindow) -> ParseResult:
        first = words.first()
        return ParseResult(first, words.skip(1), [], first is not None)


class StringParser(Parser):
    """A double-quoted string literal; the value excludes the quotes."""

    def parse(self, words: VecWindow) -> ParseResult:
        return _parse_word(words, "<<string>>", _string)


class IntegerParser(Parser):
    """A signed 64-bit integer literal."""

    def parse(self, words: VecWindow) -> ParseResult:
        return _parse_word(words, "<<integer>>", _integer)


class FloatParser(Parser):
    """A floating point literal."""

    def parse(self, words: VecWindow) -> ParseResult:
        return _parse_word(words, "<<float>>", _float)


class BooleanParser(Parser):
    """The literal ``true`` or ``false``."""

    def parse(self, words: VecWindow) -> ParseResult:
        return _parse_word(words, "<<boolean>>", _boolean)


class NothingParser(Parser):
    """Always succeeds with None, consuming nothing."""

    def parse(self, words: VecWindow) -> ParseResult:
        return ParseResult(None, words, [])


class TypeNameParser(Parser):
    """A :class:`TypeName`."""

    def parse(self, words: VecWindow) -> ParseResult:
        return _parse_word(words, "<<TypeName>>", _type_name)


class ValueNameParser(Parser):
    """A :class:`ValueName`."""

    def parse(self, words: VecWindow) -> ParseResult:
        return _parse_word(words, "<<ValueName>>", _value_name)