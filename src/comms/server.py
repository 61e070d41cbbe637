from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ServerLimitReached, UnexpectedHandshake
from .message import GetCount, HandshakeReceived, Message, MessageType, PostReceived, Response
from .result import CommsResult, Err, Ok


@dataclass(slots=True)
class Server:
    """Accepts one handshake and at most ``limit`` posts over its lifetime."""

    name: str
    limit: int
    post_count: int = 0
    connected_client: Optional[str] = None

    def receive(self, msg: Message) -> CommsResult[Response]:
        logging.info("%s received:\n%s", self.name, msg.content())

        if msg.msg_type is MessageType.HANDSHAKE:
            return self._handshake(msg.load)
        if msg.msg_type is MessageType.POST:
            return self._post()
        return Ok(GetCount(self.post_count))

    def _handshake(self, ip: str) -> CommsResult[Response]:
        if self.connected_client is not None:
            logging.debug("%s: rejecting handshake from %s; bound to %s", self.name, ip, self.connected_client)
            return Err(UnexpectedHandshake(self.name))
        self.connected_client = ip
        return Ok(HandshakeReceived())

    def _post(self) -> CommsResult[Response]:
        # the post that would exceed the limit is not counted
        if self.post_count >= self.limit:
            logging.debug("%s: limit reached; post_count=%d limit=%d", self.name, self.post_count, self.limit)
            return Err(ServerLimitReached(self.name))
        self.post_count += 1
        return Ok(PostReceived())
