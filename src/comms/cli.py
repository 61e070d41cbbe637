from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict

from .client import Client
from .constants import (
    DEFAULT_CLIENT_IP,
    DEFAULT_FLOOD_ADDRESSES,
    DEFAULT_FLOOD_POSTS,
    DEFAULT_LIMIT,
    DEFAULT_POST_LOAD,
    DEFAULT_SERVER_ADDR,
    DEFAULT_SERVER_NAME,
)
from .message import Message
from .scenario import run_flood
from .server import Server


def cmd_demo(args: argparse.Namespace) -> int:
    client = Client(args.client_ip)

    # errors propagate as raised CommsError; the process exits non-zero
    client.open(args.addr, Server(args.server_name, args.limit)).unwrap()
    response = client.send(args.addr, Message.post(args.load)).unwrap()

    payload = {
        "role": "demo",
        "client": args.client_ip,
        "addr": args.addr,
        "response": type(response).__name__,
        "open": client.is_open(args.addr),
    }
    print(json.dumps(payload, indent=2) if args.json else payload)
    return 0


def cmd_flood(args: argparse.Namespace) -> int:
    addresses = [f"197.0.0.{i}" for i in range(1, args.addresses + 1)]
    r = run_flood(
        client_ip=args.client_ip,
        addresses=addresses,
        limit=args.limit,
        posts=args.posts,
    )
    payload = {"role": "flood", **asdict(r)}
    print(json.dumps(payload, indent=2) if args.json else payload)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="comms", description="In-process client/server message exchange.")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(x: argparse.ArgumentParser) -> None:
        x.add_argument("--client-ip", default=DEFAULT_CLIENT_IP)
        x.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
        x.add_argument("--json", action="store_true")

    demo = sub.add_parser("demo", help="open one connection and send one post")
    add_common(demo)
    demo.add_argument("--addr", default=DEFAULT_SERVER_ADDR)
    demo.add_argument("--server-name", default=DEFAULT_SERVER_NAME)
    demo.add_argument("--load", default=DEFAULT_POST_LOAD)
    demo.set_defaults(func=cmd_demo)

    flood = sub.add_parser("flood", help="push posts past the limit of several servers")
    add_common(flood)
    flood.add_argument("--addresses", type=int, default=DEFAULT_FLOOD_ADDRESSES)
    flood.add_argument("--posts", type=int, default=DEFAULT_FLOOD_POSTS)
    flood.set_defaults(func=cmd_flood)

    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s [%(levelname)s] %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
