"""Move a file, creating the destination's parent directories first."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import PurePath

PROG = "move"

StrPath = str | os.PathLike[str]


def _parent(destination: StrPath) -> str | None:
    path = PurePath(destination)
    parent = path.parent
    if parent == path:
        return None
    return "" if parent == PurePath(".") else str(parent)


def move_file(source: StrPath, destination: StrPath) -> str | None:
    """Move ``source`` to ``destination``, creating parent directories.

    Returns the destination's parent directory ("" for a bare file name),
    or None when the destination has no parent.
    """
    parent = _parent(destination)
    if parent:
        os.makedirs(parent, exist_ok=True)
    os.replace(source, destination)
    return parent


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``move <dest> <source>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"Usage: {PROG}  <dest> <source>", file=sys.stderr)
        return 1

    destination, source = args
    try:
        parent = move_file(source, destination)
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    if parent is not None:
        print(f"Created {parent}")
    print(f"Moved {source} to {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())