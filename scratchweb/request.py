"""Parsing of the HTTP request line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from scratchweb.method import Method, MethodError, parse_method
from scratchweb.query_string import QueryString


class ParseErrorKind(Enum):
    """Why a request could not be parsed."""

    INVALID_REQUEST = "Invalid Request"
    INVALID_ENCODING = "Invalid Encoding"
    INVALID_PROTOCOL = "Invalid Protocol"
    INVALID_METHOD = "Invalid Method"

    @property
    def message(self) -> str:
        return self.value


class ParseError(Exception):
    """Raised when raw bytes are not a valid request."""

    def __init__(self, kind: ParseErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.message


def _next_word(text: str) -> Optional[Tuple[str, str]]:
    """Split at the first space or carriage return, dropping the separator."""
    for i, ch in enumerate(text):
        if ch in (" ", "\r"):
            return text[:i], text[i + 1:]
    return None


def _require_word(text: str) -> Tuple[str, str]:
    found = _next_word(text)
    if found is None:
        raise ParseError(ParseErrorKind.INVALID_REQUEST)
    return found


@dataclass(frozen=True)
class Request:
    """A parsed request: method, path and optional query string."""

    path: str
    method: Method
    query_string: Optional[QueryString] = None

    @classmethod
    def from_bytes(cls, buf: bytes) -> "Request":
        """Parse a request line such as ``GET /search?name=abc HTTP/1.1\\r\\n``.

        Headers and body are ignored.
        """
        try:
            text = bytes(buf).decode("utf-8")
        except UnicodeDecodeError:
            raise ParseError(ParseErrorKind.INVALID_ENCODING) from None

        method_text, rest = _require_word(text)
        path, rest = _require_word(rest)
        protocol, _ = _require_word(rest)
        if protocol != "HTTP/1.1":
            raise ParseError(ParseErrorKind.INVALID_PROTOCOL)

        try:
            method = parse_method(method_text)
        except MethodError:
            raise ParseError(ParseErrorKind.INVALID_METHOD) from None

        query_string = None
        path, sep, query = path.partition("?")
        if sep:
            query_string = QueryString.parse(query)

        return cls(path=path, method=method, query_string=query_string)