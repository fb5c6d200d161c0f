"""Parse results, errors, the parser interface and debug logging."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, NamedTuple

from .vec_window import VecWindow
from .words import Word

logger = logging.getLogger("souplang")

_HANDLER_NAME = "souplang"


@dataclass(frozen=True)
class ParseError:
    """What a parser expected and the word it found instead (None at end of input)."""

    expected: str
    got: Word | None
    unlikely: bool = False

    def pos(self) -> tuple[int, int]:
        """Position of the offending word, or ``(0, 0)`` at end of input."""
        return self.got.pos() if self.got is not None else (0, 0)


class ParseResult(NamedTuple):
    """The outcome of a parse: value, remaining words and errors.

    ``ok`` is False when nothing was parsed; ``value`` is then None.
    """

    value: Any
    rest: VecWindow
    errors: list[ParseError]
    ok: bool = True


class Parser(ABC):
    """Something that parses a value from the front of a word window."""

    @abstractmethod
    def parse(self, words: VecWindow) -> ParseResult:
        """Parse from ``words``, returning the result and the remaining words."""

    def starting_keywords(self) -> list[str]:
        """Keywords that may begin what this parser accepts."""
        return []


def setup_logging() -> None:
    """Print parser debug messages to standard error."""
    logger.setLevel(logging.DEBUG)
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def log_start(type_name: str) -> None:
    logger.debug("\x1b[37m%-25s parsing\x1b[0m", type_name)


def log_parsed(type_name: str, value: Any) -> None:
    logger.debug("\x1b[32m%-25s parsed %r\x1b[0m", type_name, value)


def log_message(type_name: str, message: str) -> None:
    logger.debug("\x1b[33m%-25s %s\x1b[0m", type_name, message)


def log_error(type_name: str, value: Any) -> None:
    logger.debug("\x1b[31m%-25s error on %r\x1b[0m", type_name, value)


def log_eof(type_name: str) -> None:
    logger.debug("\x1b[31m%-25s EOF\x1b[0m", type_name)


def log_end(type_name: str) -> None:
    logger.debug("\x1b[34m%-25s end\x1b[0m", type_name)


def flatten_branched_errors(errors: list[list[ParseError]]) -> list[ParseError]:
    """Join the errors of alternative branches, in order.

    Errors of every branch that did not get as far as the deepest one are
    marked unlikely.
    """
    deepest_pos = (0, 0)
    deepest: set[int] = set()
    for index, branch in enumerate(errors):
        depth = max((err.pos() for err in branch), default=(0, 0))
        if depth == deepest_pos:
            deepest.add(index)
        elif depth > deepest_pos:
            deepest_pos = depth
            deepest = {index}
    return [
        err if index in deepest else replace(err, unlikely=True)
        for index, branch in enumerate(errors)
        for err in branch
    ]