"""Parsers for bracket groups produced by :func:`souplang.words.split_words`."""

from __future__ import annotations

from .core import (
    ParseError,
    ParseResult,
    Parser,
    log_end,
    log_eof,
    log_error,
    log_start,
)
from .vec_window import VecWindow


class BracketsParser(Parser):
    """A bracket group whose whole content is parsed by ``inner``.

    The value is the inner value. Words left over inside the group make the
    parse fail with an error expecting the closing bracket.
    """

    def __init__(self, open: str, close: str, inner: Parser) -> None:
        self.open = open
        self.close = close
        self.inner = inner

    def parse(self, words: VecWindow) -> ParseResult:
        type_name = f"{self.open}{self.close}"
        first = words.first()
        if first is None:
            log_eof(type_name)
            return ParseResult(None, words, [ParseError(self.open, None)], False)
        inner_words = first.get_brackets(self.open, self.close)
        if inner_words is None:
            log_error(type_name, first)
            return ParseResult(None, words, [ParseError(self.open, first)], False)
        log_start(type_name)
        result = self.inner.parse(VecWindow(inner_words))
        leftover = result.rest.first()
        if leftover is not None:
            log_error(type_name, leftover)
            return ParseResult(None, words, [ParseError(self.close, leftover)], False)
        log_end(type_name)
        return ParseResult(result.value, words.skip(1), result.errors, result.ok)


def square_brackets(inner: Parser) -> BracketsParser:
    """``inner`` enclosed in ``[`` and ``]``."""
    return BracketsParser("[", "]", inner)


def curly_brackets(inner: Parser) -> BracketsParser:
    """``inner`` enclosed in ``{`` and ``}``."""
    return BracketsParser("{", "}", inner)


def parentheses(inner: Parser) -> BracketsParser:
    """``inner`` enclosed in ``(`` and ``)``."""
    return BracketsParser("(", ")", inner)