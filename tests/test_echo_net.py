import socket
import threading
import time

import pytest

from drills import echo_net


def _free_port():
    with socket.create_server(("127.0.0.1", 0)) as server:
        return server.getsockname()[1]


def _send_when_ready(message, port, timeout=5.0):
    deadline = time.monotonic() + timeout
    while True:
        try:
            return echo_net.send_message(message, "127.0.0.1", port)
        except ConnectionRefusedError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.05)


@pytest.fixture(scope="module")
def server_port():
    port = _free_port()
    thread = threading.Thread(target=echo_net.serve, args=("127.0.0.1", port), daemon=True)
    thread.start()
    _send_when_ready("warm up", port)
    return port


def test_handle_client_acknowledges(capsys):
    client, server = socket.socketpair()
    with client:
        client.sendall(b"hi")
        assert echo_net.handle_client(server) == b"hi"
        assert client.recv(512) == b"Message received"
        assert client.recv(512) == b""
    out = capsys.readouterr().out
    assert out.startswith("Received: hi\x00")
    assert len(out) == len("Received: ") + echo_net.BUFFER_SIZE + 1
    assert set(out[len("Received: hi"):-1]) == {"\x00"}


def test_send_message_returns_reply():
    received = []
    with socket.create_server(("127.0.0.1", 0)) as listener:
        port = listener.getsockname()[1]

        def answer():
            connection, _ = listener.accept()
            with connection:
                received.append(connection.recv(512))
                connection.sendall(b"\xffok")

        thread = threading.Thread(target=answer)
        thread.start()
        reply = echo_net.send_message("ping", "127.0.0.1", port)
        thread.join()
    assert received == [b"ping"]
    assert reply == "\ufffdok"


def test_send_message_refused():
    with pytest.raises(OSError):
        echo_net.send_message("hello", "127.0.0.1", _free_port())


def test_serve_acknowledges(server_port):
    assert _send_when_ready("hello", server_port) == "Message received"


def test_client_main(server_port, monkeypatch, capsys):
    monkeypatch.setattr(echo_net, "PORT", server_port)
    assert echo_net.client_main(["hello"]) == 0
    assert "Server response: Message received\n" in capsys.readouterr().out


def test_client_main_usage(capsys):
    assert echo_net.client_main([]) == 1
    assert capsys.readouterr().err.startswith("Usage ")


def test_client_main_connection_error(monkeypatch, capsys):
    monkeypatch.setattr(echo_net, "PORT", _free_port())
    assert echo_net.client_main(["hello"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_server_main_port_in_use(monkeypatch, capsys):
    with socket.create_server(("127.0.0.1", 0)) as occupied:
        monkeypatch.setattr(echo_net, "PORT", occupied.getsockname()[1])
        assert echo_net.server_main([]) == 1
    assert capsys.readouterr().err.startswith("Error:")