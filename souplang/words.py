"""Splitting source text into words and nested bracket groups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class BracketPair:
    """An opening and closing bracket character."""

    open: str
    close: str


@dataclass(frozen=True)
class Brackets:
    """A bracketed group of words."""

    open: str
    inner: tuple[Word, ...]
    close: str

    def __str__(self) -> str:
        return f"{self.open}{self.close}"


@dataclass(frozen=True)
class Word:
    """A word of source text, or a bracket group, with its position."""

    value: str | Brackets
    line: int
    column_from: int
    column_to: int

    def get_word(self) -> str | None:
        """The text if this is a plain word, else None."""
        return self.value if isinstance(self.value, str) else None

    def get_brackets(self, open: str, close: str) -> tuple[Word, ...] | None:
        """The inner words if this is a group with the given brackets."""
        value = self.value
        if isinstance(value, Brackets) and value.open == open and value.close == close:
            return value.inner
        return None

    def display_text(self) -> str:
        """The word's text, or the bracket pair for a group."""
        return str(self.value)

    def pos(self) -> tuple[int, int]:
        """``(line, column_from)``, for ordering by position."""
        return (self.line, self.column_from)

    def __str__(self) -> str:
        return self.display_text()


class _GroupBuilder:
    def __init__(self, brackets: list[BracketPair]) -> None:
        self.root: list[Word] = []
        self.stack: list[tuple[BracketPair, int, int, list[Word]]] = []
        self.brackets = brackets

    def _target(self) -> list[Word]:
        return self.stack[-1][3] if self.stack else self.root

    def _close_top(self, column_to: int) -> BracketPair:
        pair, line, column_from, inner = self.stack.pop()
        self._target().append(
            Word(Brackets(pair.open, tuple(inner), pair.close), line, column_from, column_to)
        )
        return pair

    def push(self, line: int, column_from: int, column_to: int, value: str) -> None:
        opening = next((bp for bp in self.brackets if bp.open == value), None)
        if opening is not None:
            self.stack.append((opening, line, column_from, []))
            return
        closing = next((bp for bp in self.brackets if bp.close == value), None)
        if closing is not None:
            while self.stack:
                if self._close_top(column_to) == closing:
                    break
            return
        self._target().append(Word(value, line, column_from, column_to))

    def finish(self) -> list[Word]:
        while self.stack:
            self._close_top(0)
        return self.root


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_words(text: str, brackets: Iterable[BracketPair] = ()) -> list[Word]:
    """Split ``text`` into words, grouping bracketed runs into nested groups.

    Comments start with ``//``. Mismatched closing brackets are not reported:
    a closing bracket closes every group up to its own opener, and a closing
    bracket without an opener is dropped.
    """
    pairs = list(brackets)
    bracket_chars = {ch for bp in pairs for ch in (bp.open, bp.close)}
    builder = _GroupBuilder(pairs)
    for line_number, raw_line in enumerate(_lines(text)):
        line = raw_line.partition("//")[0]
        if not line.strip():
            continue
        current = ""
        column_from = 0
        for column, char in enumerate(line):
            if current.startswith('"'):
                current += char
                if char == '"' and not current[:-1].endswith("\\"):
                    builder.push(line_number, column_from, column, current)
                    current = ""
                continue
            if char.isspace():
                if current:
                    builder.push(line_number, column_from, column, current)
                current = ""
                continue
            if not current:
                column_from = column
                current = char
                continue
            last = current[-1]
            is_or_was_bracket = last in bracket_chars or char in bracket_chars
            is_same_word_type = (
                last.isalnum() == char.isalnum() or char == "_" or last == "_"
            )
            is_number_period = (last.isnumeric() and char == ".") or (
                last == "." and char.isnumeric()
            )
            if is_number_period or (not is_or_was_bracket and is_same_word_type):
                current += char
            else:
                builder.push(line_number, column_from, column, current)
                current = char
        if current:
            builder.push(line_number, column_from, len(line.encode("utf-8")), current)
    return builder.finish()