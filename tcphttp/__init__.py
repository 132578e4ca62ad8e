"""A streaming HTTP/1.1 request parser over raw TCP, with response helpers and a request-printing listener."""

__version__ = "0.1.0"
__all__ = ["headers", "request", "response", "tcplistener"]