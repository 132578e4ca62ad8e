"""Incremental parsing of an HTTP/1.1 request from a byte stream."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

from .headers import CRLF, Headers

BUFFER_SIZE = 8

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class RequestError(ValueError):
    """Raised when a request cannot be read or is malformed."""


class ParseState(Enum):
    """Where the parser is within a request."""

    REQUEST_LINE = auto()
    HEADERS = auto()
    BODY = auto()
    DONE = auto()


@dataclass
class RequestLine:
    """The method, target and version of a request."""

    method: str = ""
    request_target: str = ""
    http_version: str = ""


@dataclass
class Request:
    """A parsed HTTP request."""

    request_line: RequestLine = field(default_factory=RequestLine)
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    content_length: int = 0
    state: ParseState = ParseState.REQUEST_LINE

    def _parse(self, buf: bytes) -> int:
        if self.state is ParseState.REQUEST_LINE:
            return self._parse_request_line(buf)
        if self.state is ParseState.HEADERS:
            return self._parse_header(buf)
        if self.state is ParseState.BODY:
            return self._parse_body(buf)
        raise RequestError("request is already complete")

    def _parse_request_line(self, buf: bytes) -> int:
        line = buf[: buf.index(CRLF)].decode("utf-8", errors="surrogateescape")
        fields = line.split(" ")
        if len(fields) != 3:
            raise RequestError(
                f"invalid request line: expected 3 parts, got {len(fields)}: {fields}"
            )
        method, target, version = fields
        if version != "HTTP/1.1":
            raise RequestError(f"only HTTP/1.1 is supported, got {version}")
        if not all(ch.isupper() for ch in method):
            raise RequestError(f"invalid HTTP method: {method}")

        self.request_line = RequestLine(
            method=method, request_target=target, http_version=version
        )
        self.state = ParseState.HEADERS
        return len(line.encode("utf-8", errors="surrogateescape")) + len(CRLF)

    def _parse_header(self, buf: bytes) -> int:
        consumed, done = self.headers.parse(buf)
        if not done:
            return consumed
        value = self.headers.get("Content-Length")
        if value != "0":
            self.state = ParseState.BODY
            self.content_length = _atoi(value)
            return consumed
        self.state = ParseState.DONE
        return consumed

    def _parse_body(self, buf: bytes) -> int:
        content_length = _atoi(self.headers.get("Content-Length"))
        body = buf.replace(b"\x00", b"")
        if len(body) != content_length:
            raise RequestError(
                f"length of body {len(body)} does not match "
                f"specified content length {content_length}"
            )
        self.body = body
        self.state = ParseState.DONE
        return content_length


def _atoi(text: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise RequestError(f"invalid content length: {text!r}")
    return int(text)


def _chunk_source(reader: Any) -> Callable[[int], bytes]:
    recv = getattr(reader, "recv", None)
    if callable(recv):
        return recv
    return reader.read


def request_from_reader(reader: Any) -> Request:
    """Read and parse one request from a socket or binary file-like object.

    Data is read in small chunks; each chunk lets the parser advance by at
    most one step. Running out of input before the request is complete
    raises :class:`RequestError`.
    """
    read = _chunk_source(reader)
    req = Request()
    buf = bytearray()
    at_eof = False

    while req.state is not ParseState.DONE:
        if at_eof:
            raise RequestError("unexpected end of input")

        chunk = read(BUFFER_SIZE)
        if not chunk:
            at_eof = True
        buf += chunk

        if req.state in (ParseState.REQUEST_LINE, ParseState.HEADERS):
            if CRLF not in buf:
                continue
        elif req.state is ParseState.BODY and len(buf) != req.content_length:
            continue

        consumed = req._parse(bytes(buf))
        if req.state is ParseState.DONE:
            break
        del buf[:consumed]

    return req