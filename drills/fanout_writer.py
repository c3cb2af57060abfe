"""Append every line typed on standard input to several output files at once."""

from __future__ import annotations

import os
import queue
import re
import sys
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

PROG = "fanout_writer"
PROMPT = "Enter your thoughts or exit (Ctrl D):"

_CHANNEL_CAPACITY = 100
_COUNT = re.compile(r"\+?[0-9]+")

StrPath = str | os.PathLike[str]


def output_names(count: int) -> list[str]:
    """Return the output file names ``output1`` to ``output<count>``."""
    return [f"output{i}" for i in range(1, count + 1)]


def _append(file_name: StrPath, line: str) -> None:
    with open(file_name, "a", encoding="utf-8") as file:
        file.write(f"{line}\n")


def write_line(file_names: Sequence[StrPath], line: str) -> list[StrPath]:
    """Append ``line`` to every file in parallel, creating missing files.

    Returns the names written to, in the given order.
    """
    names = list(file_names)
    if not names:
        return []
    with ThreadPoolExecutor(max_workers=min(32, len(names))) as executor:
        list(executor.map(lambda name: _append(name, line), names))
    return names


def run(count: int, stdin: TextIO, stdout: TextIO) -> int:
    """Copy stripped input lines to ``count`` files until an empty line or end of input.

    Returns how many lines were written.
    """
    file_names = output_names(count)
    lines: queue.Queue[str | None] = queue.Queue(maxsize=_CHANNEL_CAPACITY)
    lock = threading.Lock()

    def say(text: str) -> None:
        with lock:
            print(text, file=stdout)

    def read_input() -> None:
        try:
            say(PROMPT)
            for raw in iter(stdin.readline, ""):
                line = raw.strip()
                if not line:
                    break
                lines.put(line)
        finally:
            lines.put(None)

    reader = threading.Thread(target=read_input, daemon=True)
    reader.start()

    written = 0
    while (line := lines.get()) is not None:
        for name in write_line(file_names, line):
            say(f"Writing to file: {name}")
        say(f"Wrote to files {line}")
        written += 1

    reader.join()
    say("All content now written. Program exiting...")
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``fanout_writer <number of copies>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage {PROG} <number of copies you need>", file=sys.stderr)
        return 1

    if not _COUNT.fullmatch(args[0]):
        print("Error: Your argument should be a number", file=sys.stderr)
        return 1

    try:
        run(int(args[0]), sys.stdin, sys.stdout)
    except OSError as err:
        print(f"Error: Failed to write to files: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())