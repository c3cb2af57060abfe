import socket
import sqlite3
import uuid
from contextlib import closing

import pytest

from drills import db_check


@pytest.fixture
def listener():
    server = socket.create_server(("127.0.0.1", 0))
    yield server
    server.close()


def _closed_port():
    with socket.create_server(("127.0.0.1", 0)) as server:
        return server.getsockname()[1]


def _open_db(address, values):
    connection = sqlite3.connect(
        f"file:{address}?mode=memory&cache=shared", uri=True
    )
    connection.execute("CREATE TABLE server (name)")
    connection.executemany("INSERT INTO server VALUES (?)", [(v,) for v in values])
    connection.commit()
    return connection


def test_check_server_returns_peer(listener):
    port = listener.getsockname()[1]
    assert db_check.check_server(f"127.0.0.1:{port}") == ("127.0.0.1", port)


def test_check_server_refused():
    port = _closed_port()
    with pytest.raises(OSError):
        db_check.check_server(f"127.0.0.1:{port}")


@pytest.mark.parametrize("address", ["no-port", ":80", "host:", "host:abc", "host:70000"])
def test_check_server_invalid_address(address):
    with pytest.raises(OSError):
        db_check.check_server(address)


def test_fetch_first_rows_limits_to_five():
    address = f"rows-{uuid.uuid4().hex}"
    values = [f"row{i}" for i in range(1, 8)]
    with closing(_open_db(address, values)):
        assert db_check.fetch_first_rows(address) == values[:5]


def test_fetch_first_rows_fewer_rows():
    address = f"few-{uuid.uuid4().hex}"
    with closing(_open_db(address, ["alpha", "beta"])):
        assert db_check.fetch_first_rows(address) == ["alpha", "beta"]


def test_fetch_first_rows_missing_table():
    with pytest.raises(sqlite3.OperationalError):
        db_check.fetch_first_rows(f"empty-{uuid.uuid4().hex}")


def test_fetch_first_rows_rejects_non_text():
    address = f"ints-{uuid.uuid4().hex}"
    with closing(_open_db(address, [1, 2])):
        with pytest.raises(TypeError):
            db_check.fetch_first_rows(address)


def test_main_usage(capsys):
    assert db_check.main([]) == 1
    assert capsys.readouterr().err.startswith("Usage ")


def test_main_connection_error(capsys):
    port = _closed_port()
    assert db_check.main([f"127.0.0.1:{port}"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("Connection error:")
    assert "Connection successful" not in captured.out


def test_main_prints_rows(listener, capsys):
    port = listener.getsockname()[1]
    address = f"127.0.0.1:{port}"
    values = ["a", "b", "c", "d", "e", "f"]
    with closing(_open_db(address, values)):
        assert db_check.main([address]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        f"Attempting to connect to server at {address}",
        "Connection successful",
        "First five rows:",
        *values[:5],
    ]


def test_main_missing_table(listener, capsys):
    port = listener.getsockname()[1]
    assert db_check.main([f"127.0.0.1:{port}"]) == 1
    captured = capsys.readouterr()
    assert "no such table: server" in captured.err
    assert "First five rows:" not in captured.out