"""Print a greeting."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

GREETING = "Hello, world!"


def _write_greeting(stream: TextIO) -> int:
    """Write the greeting line to *stream* and return the characters written."""
    written = stream.write(f"{GREETING}\n")
    stream.flush()
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status.

    Any command-line arguments are accepted and ignored.
    """
    if argv is None:
        argv = sys.argv[1:]
    written = _write_greeting(sys.stdout)
    return 0 if written == len(GREETING) + 1 else 1


if __name__ == "__main__":
    sys.exit(main())