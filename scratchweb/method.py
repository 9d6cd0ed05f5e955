"""HTTP request methods."""

from __future__ import annotations

from enum import Enum


class MethodError(ValueError):
    """Raised when a string does not name a known HTTP method."""


class Method(Enum):
    """The HTTP methods the server understands."""

    GET = "GET"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PUT = "PUT"
    POST = "POST"
    PATCH = "PATCH"
    CONNECT = "CONNECT"

    def __str__(self) -> str:
        return self.value


def parse_method(text: str) -> Method:
    """Return the method named exactly by ``text`` (case-sensitive)."""
    try:
        return Method(text)
    except ValueError:
        raise MethodError(f"unknown method: {text!r}") from None