"""Separated lists, binary splits and keyword-started statement lists."""

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
from .words import Word


def _is_separator(separator: str):
    def check(word: Word) -> bool:
        return word.get_word() == separator

    return check


class SeparatedBy(Parser):
    """Any number of ``inner`` values between ``separator`` words.

    Always succeeds; the value is the list of items that parsed. Errors of
    items that failed, and leftovers before a separator, are collected.
    """

    def __init__(self, separator: str, inner: Parser) -> None:
        self.separator = separator
        self.inner = inner

    def parse(self, words: VecWindow) -> ParseResult:
        type_name = f"SeparatedBy<{self.separator}>"
        log_start(type_name)
        parts = words.split(_is_separator(self.separator))
        items = []
        errors: list[ParseError] = []
        rest = words
        for index, part in enumerate(parts):
            result = self.inner.parse(part)
            no_errors = not result.errors
            errors.extend(result.errors)
            if result.ok:
                items.append(result.value)
            if index == len(parts) - 1:
                rest = result.rest
            elif no_errors and result.rest:
                log_eof(type_name)
                errors.append(ParseError(self.separator, result.rest.first()))
        log_end(type_name)
        return ParseResult(items, rest, errors)


class SeparatedOnce(Parser):
    """``first``, the ``separator`` word, then ``second``; the value is a pair."""

    def __init__(self, separator: str, first: Parser, second: Parser) -> None:
        self.separator = separator
        self.first = first
        self.second = second

    def parse(self, words: VecWindow) -> ParseResult:
        type_name = f"SeparatedOnce<{self.separator}>"
        halves = words.split_once(_is_separator(self.separator))
        if halves is None:
            log_eof(type_name)
            return ParseResult(None, words, [ParseError(self.separator, None)], False)
        before, after = halves
        first_word = before.first()
        one = self.first.parse(before)
        if not one.ok:
            log_error(type_name, first_word)
            return ParseResult(None, one.rest, one.errors, False)
        errors = list(one.errors)
        leftover = one.rest.first()
        if leftover is not None:
            log_error(type_name, leftover)
            errors.append(ParseError(self.separator, leftover))
            return ParseResult(None, one.rest, errors, False)
        second_word = after.first()
        two = self.second.parse(after)
        errors.extend(two.errors)
        if not two.ok:
            log_error(type_name, second_word)
            return ParseResult(None, two.rest, errors, False)
        log_end(type_name)
        return ParseResult((one.value, two.value), two.rest, errors)


class StatementVec(Parser):
    """Statements, each starting at one of ``inner``'s starting keywords.

    Always succeeds and consumes everything; statements that fail to parse
    contribute only their errors.
    """

    def __init__(self, inner: Parser) -> None:
        self.inner = inner

    def parse(self, words: VecWindow) -> ParseResult:
        log_start("StatementVec")
        keywords = self.inner.starting_keywords()
        parts = words.split_including_start(
            lambda word: (word.get_word() or "") in keywords
        )
        items = []
        errors: list[ParseError] = []
        for part in parts:
            result = self.inner.parse(part)
            no_errors = not result.errors
            errors.extend(result.errors)
            if result.ok:
                items.append(result.value)
            leftover = result.rest.first()
            if no_errors and leftover is not None:
                log_error("StatementVec", leftover)
                errors.append(ParseError("[end of statement]", leftover))
        log_end("StatementVec")
        return ParseResult(items, words.empty(), errors)