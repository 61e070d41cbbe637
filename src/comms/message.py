from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .constants import GET_COUNT_HEADER, HANDSHAKE_HEADER, POST_HEADER


class MessageType(enum.Enum):
    HANDSHAKE = HANDSHAKE_HEADER
    POST = POST_HEADER
    GET_COUNT = GET_COUNT_HEADER

    def header(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Message:
    msg_type: MessageType
    load: str = ""

    def content(self) -> str:
        return f"{self.msg_type.header()}\n{self.load}"

    @staticmethod
    def handshake(ip: str) -> "Message":
        return Message(msg_type=MessageType.HANDSHAKE, load=ip)

    @staticmethod
    def post(load: str) -> "Message":
        return Message(msg_type=MessageType.POST, load=load)

    @staticmethod
    def get_count() -> "Message":
        return Message(msg_type=MessageType.GET_COUNT)


@dataclass(frozen=True, slots=True)
class HandshakeReceived:
    pass


@dataclass(frozen=True, slots=True)
class PostReceived:
    pass


@dataclass(frozen=True, slots=True)
class GetCount:
    count: int


Response = Union[HandshakeReceived, PostReceived, GetCount]
