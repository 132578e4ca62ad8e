"""HTTP header field storage and line-by-line parsing."""

from __future__ import annotations

import string

CRLF = b"\r\n"

_TOKEN_CHARS = frozenset(
    (string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~").encode("ascii")
)


class HeaderError(ValueError):
    """Raised when a header line is malformed."""


class Headers(dict):
    """Header fields keyed by lower-cased field name."""

    def get(self, key: str) -> str:  # type: ignore[override]
        """Return the value for ``key`` regardless of case.

        A missing ``Content-Length`` reads as ``"0"``; any other missing
        field reads as an empty string.
        """
        try:
            return self[key.lower()]
        except KeyError:
            return "0" if key == "Content-Length" else ""

    def parse(self, data: bytes) -> tuple[int, bool]:
        """Parse one header line from the front of ``data``.

        Returns the number of bytes consumed and whether the blank line
        that ends the header section was reached. If ``data`` holds no
        complete line yet, ``(0, False)`` is returned.
        """
        data = bytes(data)
        if data.startswith(CRLF):
            return len(CRLF), True

        line_end = data.find(CRLF)
        if line_end == -1:
            return 0, False

        line = data[:line_end].strip()
        colon = line.find(b":")
        if colon == -1:
            raise HeaderError("invalid header: missing colon")
        if colon == 0:
            raise HeaderError("invalid header: missing field name")
        if line[colon - 1 : colon] == b" ":
            raise HeaderError("invalid header: space before colon")

        raw_name = line[:colon]
        if not all(byte in _TOKEN_CHARS for byte in raw_name):
            raise HeaderError("invalid header: non ascii characters in field-name")

        field_name = raw_name.decode("ascii").lower()
        field_value = line[colon + 1 :].strip().decode("utf-8", errors="surrogateescape")

        if field_name in self:
            self[field_name] = f"{self[field_name]}, {field_value}"
        else:
            self[field_name] = field_value

        return len(line) + len(CRLF), False