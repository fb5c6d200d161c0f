"""Declarative parsers for record-like and choice-like grammar rules."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from .core import (
    ParseError,
    ParseResult,
    Parser,
    flatten_branched_errors,
    log_end,
    log_error,
    log_message,
    log_parsed,
    log_start,
)
from .vec_window import VecWindow


@dataclass(frozen=True)
class Field:
    """One field of a :class:`Struct`.

    If ``text`` is given, that exact word must come first and is consumed
    before ``parser`` runs.
    """

    name: str
    parser: Parser
    text: str | None = None


class Lazy(Parser):
    """A parser built on first use, so that grammar rules may refer to themselves."""

    def __init__(self, factory: Callable[[], Parser]) -> None:
        self._factory = factory

    @cached_property
    def target(self) -> Parser:
        """The parser returned by the factory."""
        return self._factory()

    def parse(self, words: VecWindow) -> ParseResult:
        return self.target.parse(words)

    def starting_keywords(self) -> list[str]:
        return self.target.starting_keywords()


class Struct(Parser):
    """Fields parsed one after another; ``build`` receives their values in order."""

    def __init__(self, name: str, fields: Iterable[Field], build: Callable[..., Any]) -> None:
        self.name = name
        self.fields = tuple(fields)
        self.build = build

    def parse(self, words: VecWindow) -> ParseResult:
        if not self.fields:
            log_end(self.name)
            return ParseResult(self.build(), words, [])
        log_start(self.name)
        errors: list[ParseError] = []
        values = []
        for field in self.fields:
            field_name = f"{self.name}.{field.name}"
            if field.text is not None:
                first = words.first()
                if first is not None and first.get_word() == field.text:
                    words = words.skip(1)
                    log_parsed(self.name, field.text)
                else:
                    log_error(self.name, "EOF" if first is None else first.display_text())
                    log_message(self.name, f"errors.len() = {len(errors)}")
                    return ParseResult(None, words, [ParseError(field.text, first)], False)
            log_message(self.name, field.name)
            first_word = words.first()
            result = field.parser.parse(words)
            errors.extend(result.errors)
            words = result.rest
            if not result.ok:
                log_error(field_name, first_word)
                log_message(field_name, f"errors.len() = {len(errors)}")
                return ParseResult(None, words, errors, False)
            values.append(result.value)
        log_end(self.name)
        return ParseResult(self.build(*values), words, errors)

    def starting_keywords(self) -> list[str]:
        if self.fields and self.fields[0].text is not None:
            return [self.fields[0].text]
        return []


class Enum(Parser):
    """The first variant that parses wins.

    A variant with a starting keyword is only tried when the first word is
    that keyword. If every variant fails, their errors are joined, and those
    of branches that got less far are marked unlikely.
    """

    def __init__(self, name: str, variants: Iterable[Parser]) -> None:
        self.name = name
        self.variants = tuple(variants)
        if not self.variants:
            raise ValueError("an enum needs at least one variant")

    def parse(self, words: VecWindow) -> ParseResult:
        log_start(self.name)
        first = words.first()
        first_text = first.get_word() if first is not None else None
        branches: list[list[ParseError]] = []
        for variant in self.variants:
            keywords = variant.starting_keywords()
            if keywords and first_text not in keywords:
                continue
            result = variant.parse(words)
            if result.ok:
                log_end(self.name)
                return result
            branches.append(result.errors)
        errors = flatten_branched_errors(branches)
        log_error(self.name, first)
        log_message(self.name, f"errors.len() = {len(errors)}")
        return ParseResult(None, words, errors, False)

    def starting_keywords(self) -> list[str]:
        return [kw for variant in self.variants for kw in variant.starting_keywords()]