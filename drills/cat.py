"""Print the contents of a ``.txt`` file."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path, PurePath

PROG = "cat"

StrPath = str | os.PathLike[str]


def is_text_file(file_path: StrPath) -> bool:
    """Return whether the path has the ``txt`` extension."""
    return PurePath(file_path).suffix == ".txt"


def read_file(file_path: StrPath) -> str:
    """Read a whole file as UTF-8 text, leaving line endings untouched."""
    return Path(file_path).read_bytes().decode("utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``cat <file_path>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {PROG} <file_path>", file=sys.stderr)
        return 1

    file_path = args[0]
    if not is_text_file(file_path):
        print("Error: Only text files (*.txt) are allowed here.", file=sys.stderr)
        return 1

    try:
        content = read_file(file_path)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error reading file {err}", file=sys.stderr)
        return 1

    print(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())