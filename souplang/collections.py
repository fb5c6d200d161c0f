"""Combinators: optional values, repetitions and pairs."""

from __future__ import annotations

from .core import (
    ParseResult,
    Parser,
    log_end,
    log_error,
    log_message,
    log_parsed,
    log_start,
)
from .vec_window import VecWindow


class OptionalParser(Parser):
    """Parses ``inner`` if possible; otherwise succeeds with None and no errors."""

    def __init__(self, inner: Parser) -> None:
        self.inner = inner

    def parse(self, words: VecWindow) -> ParseResult:
        log_start("Option")
        first = words.first()
        result = self.inner.parse(words)
        if result.ok:
            log_parsed("Option Some", first)
            return ParseResult(result.value, result.rest, result.errors)
        log_parsed("Option None", first)
        return ParseResult(None, result.rest, [])


class ManyParser(Parser):
    """Zero or more ``inner`` values, stopping at the first failure."""

    def __init__(self, inner: Parser) -> None:
        self.inner = inner

    def parse(self, words: VecWindow) -> ParseResult:
        items = []
        errors = []
        log_start("Vec")
        while words:
            result = self.inner.parse(words)
            words = result.rest
            if not result.ok:
                break
            errors.extend(result.errors)
            items.append(result.value)
            log_message("Vec", "---")
        log_end("Vec")
        return ParseResult(items, words, errors)


class NonEmptyParser(Parser):
    """One or more ``inner`` values; fails with the first item's errors."""

    def __init__(self, inner: Parser) -> None:
        self.inner = inner

    def parse(self, words: VecWindow) -> ParseResult:
        items = []
        errors = []
        log_start("NonEmptyVec")
        while not items or words:
            result = self.inner.parse(words)
            words = result.rest
            if not result.ok:
                if items:
                    break
                return ParseResult(None, words, result.errors, False)
            errors.extend(result.errors)
            items.append(result.value)
            log_message("Vec", "---")
        log_end("NonEmptyVec")
        return ParseResult(items, words, errors)


class PairParser(Parser):
    """``first`` followed by ``second``; the value is a tuple of both."""

    def __init__(self, first: Parser, second: Parser) -> None:
        self.first = first
        self.second = second

    def parse(self, words: VecWindow) -> ParseResult:
        log_start("Tuple2")
        first_word = words.first()
        one = self.first.parse(words)
        two = self.second.parse(one.rest)
        if not one.ok:
            log_error("Tuple2", first_word)
            return ParseResult(None, two.rest, one.errors, False)
        if not two.ok:
            log_error("Tuple2", first_word)
            return ParseResult(None, two.rest, two.errors, False)
        log_parsed("Tuple2", first_word)
        return ParseResult((one.value, two.value), two.rest, one.errors + two.errors)