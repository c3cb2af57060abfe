"""A TCP server that acknowledges messages, and a client that sends one."""

from __future__ import annotations

import socket
import sys
import threading
from collections.abc import Sequence

HOST = "127.0.0.1"
PORT = 7878
BUFFER_SIZE = 512
ACKNOWLEDGEMENT = b"Message received"

CLIENT_PROG = "echo_client"


def handle_client(connection: socket.socket) -> bytes:
    """Read one message, report it and acknowledge it; the connection is closed.

    Returns the bytes received.
    """
    with connection:
        data = connection.recv(BUFFER_SIZE)
        buffer = data.ljust(BUFFER_SIZE, b"\0")
        print(f"Received: {buffer.decode('utf-8', errors='replace')}", flush=True)
        connection.sendall(ACKNOWLEDGEMENT)
    return data


def serve(host: str = HOST, port: int = PORT) -> None:
    """Accept connections forever, handling each on its own thread."""
    with socket.create_server((host, port)) as listener:
        print(f"Server up on {host}:{port}", flush=True)
        while True:
            try:
                connection, _ = listener.accept()
            except OSError as err:
                print(f"Connection failed: {err}", file=sys.stderr)
                continue
            threading.Thread(target=handle_client, args=(connection,), daemon=True).start()


def send_message(message: str, host: str = HOST, port: int = PORT) -> str:
    """Send ``message`` and return the server's reply, decoded leniently."""
    with socket.create_connection((host, port)) as connection:
        connection.sendall(message.encode("utf-8"))
        reply = connection.recv(BUFFER_SIZE)
    return reply.decode("utf-8", errors="replace")


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the server on the fixed address."""
    try:
        serve(HOST, PORT)
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``echo_client <text to be sent to the server>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage {CLIENT_PROG} <text to be sent to the server>", file=sys.stderr)
        return 1

    try:
        reply = send_message(args[0], HOST, PORT)
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(f"Server response: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(server_main())