from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .client import Client
from .errors import ConnectionClosed, ServerLimitReached
from .message import Message, PostReceived
from .server import Server


@dataclass(frozen=True, slots=True)
class FloodResult:
    opened: int
    accepted: int
    rejected: int
    refused: int
    closed: int


def run_flood(
    *,
    client_ip: str,
    addresses: Sequence[str],
    limit: int,
    posts: int,
) -> FloodResult:
    """Open a fresh server per address and push ``posts`` posts through each.

    ``rejected`` counts posts a server turned away at its limit (each one
    closes that connection); ``refused`` counts posts the client would not
    send because the connection was already closed.
    """
    client = Client(client_ip)
    for addr in addresses:
        client.open(addr, Server(addr, limit)).unwrap()

    accepted = rejected = refused = 0
    for addr in addresses:
        for i in range(posts):
            result = client.send(addr, Message.post(f"post {i} to {addr}"))
            if result.is_ok():
                if isinstance(result.unwrap(), PostReceived):
                    accepted += 1
                continue
            err = result.unwrap_err()
            if isinstance(err, ServerLimitReached):
                rejected += 1
            elif isinstance(err, ConnectionClosed):
                refused += 1
            else:
                raise err

    r = FloodResult(
        opened=len(addresses),
        accepted=accepted,
        rejected=rejected,
        refused=refused,
        closed=client.count_closed(),
    )
    logging.info("flood done; %s", r)
    return r
