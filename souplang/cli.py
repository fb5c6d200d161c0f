"""Command line entry point: parse a source file and report errors."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from pprint import pformat

from .core import setup_logging
from .errors import show_errors
from .grammar import parse_program, split_source


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the file named first in ``argv``.

    Writes the syntax tree to ``output.txt`` and the errors to ``errors.txt``
    in the working directory, then prints the likely errors.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    setup_logging()
    if not args:
        print("No input file given", end="")
        return 0
    try:
        source = Path(args[0]).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Failed to read file: {exc}") from exc
    result = parse_program(split_source(source))
    Path("output.txt").write_text(pformat(result.value), encoding="utf-8")
    Path("errors.txt").write_text(pformat(result.errors), encoding="utf-8")
    show_errors(source, result.errors, True)
    return 0


if __name__ == "__main__":
    sys.exit(main())