"""Count the non-space characters of a string and print it several times."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

PROG = "repeat"

_COUNT = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64 - 1
# Characters Python calls whitespace that are not Unicode White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NOT_WHITESPACE


def count_non_space(text: str) -> int:
    """Return how many characters of ``text`` are not whitespace."""
    return sum(1 for char in text if not _is_whitespace(char))


def _parse_count(text: str) -> int:
    if not _COUNT.fullmatch(text):
        raise ValueError(f"not a non-negative integer: {text!r}")
    value = int(text)
    if value > _MAX_COUNT:
        raise ValueError(f"number too large: {text!r}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``repeat <number> <string>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"Usage: {PROG} <number> <string>.", file=sys.stderr)
        return 1

    try:
        times = _parse_count(args[0])
    except ValueError:
        print("Error: the first argument needs to be a number.", file=sys.stderr)
        return 1

    text = args[1]
    print(f"Number of non-space characters: {count_non_space(text)}")
    for _ in range(times):
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())