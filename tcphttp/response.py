"""Writing of HTTP/1.1 response status lines and headers."""

from __future__ import annotations

from enum import IntEnum
from typing import BinaryIO, Mapping

from .headers import Headers


class StatusCode(IntEnum):
    """Status codes the server knows how to describe."""

    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500


_REASON_PHRASES = {
    StatusCode.OK: "OK",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def write_status_line(w: BinaryIO, status_code: int) -> None:
    """Write the status line for ``status_code``; unknown codes get no phrase."""
    reason = _REASON_PHRASES.get(status_code, "")
    w.write(f"HTTP/1.1 {int(status_code)} {reason}\r\n".encode("utf-8"))


def default_headers(content_length: int) -> Headers:
    """Headers sent with every plain-text response."""
    return Headers(
        {
            "Content-Length": str(content_length),
            "Connection": "close",
            "Content-Type": "text/plain",
        }
    )


def write_headers(w: BinaryIO, headers: Mapping[str, str]) -> None:
    """Write each header as a ``name: value`` line."""
    for key, value in headers.items():
        w.write(f"{key}: {value}\r\n".encode("utf-8"))