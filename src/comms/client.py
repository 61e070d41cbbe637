from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Union

from .errors import ConnectionClosed, ConnectionExists, ConnectionNotFound, ServerLimitReached
from .message import Message, Response
from .result import CommsResult, Err, Ok
from .server import Server


@dataclass(frozen=True, slots=True)
class Open:
    server: Server


@dataclass(frozen=True, slots=True)
class Closed:
    pass


Connection = Union[Open, Closed]


@dataclass(slots=True)
class Client:
    """Owns one connection per server address.

    A server handed to ``open`` belongs to the client from then on and is only
    reachable through ``connections``. Entries are never removed; a connection
    goes from open to closed once, when its server reports the post limit.
    """

    ip: str
    _connections: Dict[str, Connection] = field(default_factory=dict, repr=False)

    @property
    def connections(self) -> Mapping[str, Connection]:
        return MappingProxyType(self._connections)

    def open(self, addr: str, server: Server) -> CommsResult[None]:
        if addr in self._connections:
            return Err(ConnectionExists(addr))

        result = server.receive(Message.handshake(self.ip))
        if result.is_err():
            return result

        self._connections[addr] = Open(server)
        logging.debug("opened %s -> %s", addr, server.name)
        return Ok(None)

    def send(self, addr: str, msg: Message) -> CommsResult[Response]:
        conn = self._connections.get(addr)
        if conn is None:
            return Err(ConnectionNotFound(addr))
        if isinstance(conn, Closed):
            return Err(ConnectionClosed(addr))

        result = conn.server.receive(msg)
        if result.is_err() and isinstance(result.unwrap_err(), ServerLimitReached):
            self._connections[addr] = Closed()
            logging.info("closed %s; %s", addr, result.unwrap_err())
        return result

    def is_open(self, addr: str) -> bool:
        return isinstance(self._connections.get(addr), Open)

    def count_closed(self) -> int:
        return sum(1 for conn in self._connections.values() if isinstance(conn, Closed))
