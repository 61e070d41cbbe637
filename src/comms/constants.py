from __future__ import annotations

HANDSHAKE_HEADER = "[HANDSHAKE]"
POST_HEADER = "[POST]"
GET_COUNT_HEADER = "[GET COUNT]"

DEFAULT_CLIENT_IP = "10.0.0.1"
DEFAULT_SERVER_ADDR = "197.0.0.1"
DEFAULT_SERVER_NAME = "TestServer"
DEFAULT_LIMIT = 2
DEFAULT_POST_LOAD = "Hello from the other side!"

DEFAULT_FLOOD_ADDRESSES = 5
DEFAULT_FLOOD_POSTS = 3
