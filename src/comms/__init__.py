"""In-process client/server message exchange.

A Client keeps named connections to Servers and speaks a tiny typed protocol
over them (handshake, post, get-count). Servers cap the number of posts they
accept; hitting the cap closes the client's connection for good.

Fallible operations return ``Ok``/``Err`` values instead of raising.
"""

from .client import Client, Closed, Connection, Open
from .errors import (
    CommsError,
    ConnectionClosed,
    ConnectionExists,
    ConnectionNotFound,
    ServerLimitReached,
    UnexpectedHandshake,
)
from .message import GetCount, HandshakeReceived, Message, MessageType, PostReceived, Response
from .result import CommsResult, Err, Ok
from .server import Server

__all__ = [
    "Client",
    "Closed",
    "CommsError",
    "CommsResult",
    "Connection",
    "ConnectionClosed",
    "ConnectionExists",
    "ConnectionNotFound",
    "Err",
    "GetCount",
    "HandshakeReceived",
    "Message",
    "MessageType",
    "Ok",
    "Open",
    "PostReceived",
    "Response",
    "Server",
    "ServerLimitReached",
    "UnexpectedHandshake",
]
