"""Command that prints every HTTP request it receives over TCP."""

from __future__ import annotations

import argparse
import logging
import socket
from typing import Sequence

from .request import Request, request_from_reader

logger = logging.getLogger(__name__)

DEFAULT_PORT = 42069


def format_request(req: Request) -> str:
    """Render a request as a human-readable report ending in a newline."""
    lines = [
        "Request line:",
        f"- Method: {req.request_line.method}",
        f"- Target: {req.request_line.request_target}",
        f"- Version: {req.request_line.http_version}",
        "Headers:",
    ]
    lines.extend(f"- {key}: {value}" for key, value in req.headers.items())
    lines.append("Body:")
    lines.append(req.body.decode("utf-8", errors="replace"))
    return "\n".join(lines) + "\n"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print incoming HTTP requests.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Accept connections forever; stop with status 1 on the first error."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        listener = socket.create_server(("", args.port))
    except OSError as exc:
        logger.error("error: failed to listen to TCP traffic: %s", exc)
        return 1

    with listener:
        while True:
            try:
                conn, addr = listener.accept()
            except OSError as exc:
                logger.error("error: failed to accept conn => %s", exc)
                return 1

            print(f"Accepted connection from {addr[0]}:{addr[1]}", flush=True)

            with conn:
                try:
                    req = request_from_reader(conn)
                except (ValueError, OSError) as exc:
                    logger.error("error: failed to read request => %s", exc)
                    return 1

            print(format_request(req), end="", flush=True)