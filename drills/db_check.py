"""Check that a server address accepts TCP connections, then list rows from SQLite."""

from __future__ import annotations

import re
import socket
import sqlite3
import sys
from collections.abc import Sequence
from contextlib import closing

PROG = "db_check"
ROW_LIMIT = 5

_PORT = re.compile(r"[0-9]+")


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port_text = address.rpartition(":")
    if not sep or not host or not _PORT.fullmatch(port_text):
        raise OSError(f"invalid socket address: {address!r}")
    port = int(port_text)
    if port > 0xFFFF:
        raise OSError(f"invalid port in socket address: {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def check_server(address: str) -> tuple[str, int]:
    """Open and close a TCP connection to ``host:port``.

    Returns the peer's host and port; raises OSError when the address is
    invalid or the connection fails.
    """
    host, port = _split_address(address)
    with socket.create_connection((host, port)) as connection:
        peer = connection.getpeername()
    return peer[0], peer[1]


def fetch_first_rows(address: str) -> list[str]:
    """Return the first column of up to five rows of the ``server`` table.

    The database is the shared in-memory SQLite database named by ``address``.
    Raises sqlite3.Error on database failures and TypeError when a value is
    not text.
    """
    uri = f"file:{address}?mode=memory&cache=shared"
    with closing(sqlite3.connect(uri, uri=True)) as connection:
        rows = connection.execute(f"SELECT * FROM server LIMIT {ROW_LIMIT}").fetchall()
    values = []
    for row in rows:
        value = row[0]
        if not isinstance(value, str):
            raise TypeError(f"column 0 holds {type(value).__name__}, not text")
        values.append(value)
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``db_check <database address>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage {PROG} <database address>", file=sys.stderr)
        return 1

    address = args[0]
    print(f"Attempting to connect to server at {address}")
    try:
        check_server(address)
    except OSError as err:
        print(f"Connection error: {err}", file=sys.stderr)
        return 1
    print("Connection successful")

    try:
        rows = fetch_first_rows(address)
    except (sqlite3.Error, TypeError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print("First five rows:")
    for row in rows:
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())