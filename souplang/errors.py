"""Rendering parse errors under the source lines they refer to."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .core import ParseError

_BOLD_RED = "\x1b[1;31m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"
_NOTHING = "<<nothing>>"


@dataclass
class _Entry:
    column_from: int
    column_to: int
    got: str
    expected: list[str] = field(default_factory=list)

    def message(self) -> str:
        return f"Expected {' or '.join(self.expected)} but got {self.got}"


def _source_lines(code: str) -> list[str]:
    lines = code.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class ErrorFile:
    """Parse errors grouped by line, with equal spans merged."""

    def __init__(self, code: str) -> None:
        self.lines = _source_lines(code)
        self.errors: dict[int, list[_Entry]] = {}

    def insert(self, error: ParseError) -> None:
        """Add one error, merging its expectation into an entry at the same span."""
        word = error.got
        if word is None:
            line, column_from, column_to, got = 0, 0, 0, _NOTHING
        else:
            line, column_from, column_to = word.line, word.column_from, word.column_to
            got = word.display_text()
        entries = self.errors.setdefault(line, [])
        for entry in entries:
            if (entry.column_from, entry.column_to, entry.got) == (column_from, column_to, got):
                if error.expected not in entry.expected:
                    entry.expected.append(error.expected)
                return
        entries.append(_Entry(column_from, column_to, got, [error.expected]))
        entries.sort(key=lambda e: (-e.column_from, e.column_to))

    def insert_all(self, errors: Iterable[ParseError], skip_unlikely: bool) -> None:
        """Add every error, leaving out unlikely ones if ``skip_unlikely``."""
        for error in errors:
            if skip_unlikely and error.unlikely:
                continue
            self.insert(error)

    def render(self) -> str:
        """The report: each error's source line with a coloured marker and message."""
        out = []
        for line in sorted(self.errors):
            for entry in self.errors[line]:
                message = entry.message()
                if line == 0:
                    out.append(f"???? | {message}")
                    continue
                width = max(entry.column_to - entry.column_from, 1)
                out.append(f"{line + 1:<4} | {self.lines[line]}")
                out.append(
                    f"     | {' ' * entry.column_from}"
                    f"{_BOLD_RED}{'^' * width}{_RESET}{_RED}{message}{_RESET}"
                )
        return "\n".join(out)


def show_errors(code: str, errors: Iterable[ParseError], skip_unlikely: bool) -> None:
    """Print a report of ``errors`` against ``code``."""
    error_file = ErrorFile(code)
    error_file.insert_all(errors, skip_unlikely)
    report = error_file.render()
    if report:
        print(report)