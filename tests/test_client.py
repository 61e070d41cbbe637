from __future__ import annotations

import pytest

from comms.client import Client, Closed, Open
from comms.errors import (
    ConnectionClosed,
    ConnectionExists,
    ConnectionNotFound,
    ServerLimitReached,
    UnexpectedHandshake,
)
from comms.message import GetCount, Message, PostReceived
from comms.result import Err, Ok
from comms.server import Server


def test_open():
    c = Client("localhost")
    assert c.open("197.0.0.1", Server("TestServer", 2)) == Ok(None)
    assert c.is_open("197.0.0.1")

    conn = c.connections["197.0.0.1"]
    assert isinstance(conn, Open)
    assert conn.server.connected_client == "localhost"

    assert c.open("197.0.0.1", Server("TestServer2", 100)) == Err(ConnectionExists("197.0.0.1"))
    assert c.connections["197.0.0.1"].server.name == "TestServer"
    assert c.is_open("197.0.0.1")


def test_open_with_bound_server_inserts_nothing():
    s = Server("TestServer", 2)
    s.receive(Message.handshake("someone-else"))

    c = Client("localhost")
    assert c.open("197.0.0.1", s) == Err(UnexpectedHandshake("TestServer"))
    assert "197.0.0.1" not in c.connections
    assert not c.is_open("197.0.0.1")


def test_send():
    c = Client("localhost")
    c.open("197.0.0.1", Server("TestServer", 1)).unwrap()

    assert c.send("197.0.0.1", Message.get_count()) == Ok(GetCount(0))
    assert c.send("197.0.0.1", Message.post("Another tale")) == Ok(PostReceived())

    result = c.send("197.0.0.1", Message.post("Another abrupt end"))
    assert result == Err(ServerLimitReached("TestServer"))
    assert not c.is_open("197.0.0.1")
    assert isinstance(c.connections["197.0.0.1"], Closed)

    result = c.send("197.0.0.1", Message.post("Maybe this time?"))
    assert result == Err(ConnectionClosed("197.0.0.1"))

    assert c.send("10.0.0.1", Message.post("")) == Err(ConnectionNotFound("10.0.0.1"))


def test_other_errors_keep_connection_open():
    c = Client("localhost")
    c.open("197.0.0.1", Server("TestServer", 1)).unwrap()

    assert c.send("197.0.0.1", Message.handshake("again")) == Err(UnexpectedHandshake("TestServer"))
    assert c.is_open("197.0.0.1")
    assert c.count_closed() == 0


def test_reopen_closed_address_is_rejected():
    c = Client("localhost")
    c.open("197.0.0.1", Server("TestServer", 0)).unwrap()
    assert c.send("197.0.0.1", Message.post("x")).is_err()
    assert not c.is_open("197.0.0.1")

    assert c.open("197.0.0.1", Server("Fresh", 5)) == Err(ConnectionExists("197.0.0.1"))
    assert not c.is_open("197.0.0.1")


def test_count_closed():
    to_open = ["197.0.0.1", "197.0.0.2", "197.0.0.3", "197.0.0.4", "197.0.0.5"]
    to_halt = ["197.0.0.1", "197.0.0.3"]

    c = Client("localhost")
    for addr in to_open:
        c.open(addr, Server(addr, 1)).unwrap()

    for addr in to_halt:
        c.send(addr, Message.post("Push the limit")).unwrap()
        assert c.send(addr, Message.post("Too much")).is_err()

    assert c.count_closed() == 2
    assert [a for a in to_open if c.is_open(a)] == ["197.0.0.2", "197.0.0.4", "197.0.0.5"]


def test_end_to_end():
    c = Client("10.0.0.1")
    c.open("197.0.0.1", Server("TestServer", 2)).unwrap()
    server = c.connections["197.0.0.1"].server

    assert c.send("197.0.0.1", Message.get_count()) == Ok(GetCount(0))
    assert c.send("197.0.0.1", Message.post("a")) == Ok(PostReceived())
    assert server.post_count == 1
    assert c.send("197.0.0.1", Message.post("b")) == Ok(PostReceived())
    assert server.post_count == 2
    assert c.send("197.0.0.1", Message.post("c")) == Err(ServerLimitReached("TestServer"))
    assert server.post_count == 2
    assert not c.is_open("197.0.0.1")


def test_connections_view_is_read_only():
    c = Client("localhost")
    c.open("197.0.0.1", Server("TestServer", 1)).unwrap()
    with pytest.raises(TypeError):
        c.connections["197.0.0.1"] = Closed()  # type: ignore[index]
    assert c.is_open("197.0.0.1")
