"""A single-threaded TCP server that hands parsed requests to a handler."""

from __future__ import annotations

import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from scratchweb.request import ParseError, Request
from scratchweb.response import Response
from scratchweb.status_code import StatusCode

_READ_SIZE = 1024


def _split_addr(addr: str) -> Tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid address: {addr!r}")
    return host, int(port)


class Handler(ABC):
    """Turns requests into responses."""

    @abstractmethod
    def handle_request(self, request: Request) -> Response:
        """Return the response for a well-formed request."""

    def handle_bad_request(self, error: ParseError) -> Response:
        """Return the response for bytes that did not parse as a request."""
        print(f"Failed to parse request: {error}")
        return Response(StatusCode.BAD_REQUEST)


@dataclass
class Server:
    """Listens on ``host:port`` and serves one connection at a time."""

    addr: str

    def serve_connection(self, conn, handler: Handler) -> None:
        """Read one request from ``conn``, answer it, and report any I/O failure."""
        try:
            data = conn.recv(_READ_SIZE)
        except OSError as exc:
            print(f"Failed to read: {exc}")
            return

        print(f"Received a request: {data.decode('utf-8', errors='replace')}")
        try:
            response = handler.handle_request(Request.from_bytes(data))
        except ParseError as exc:
            response = handler.handle_bad_request(exc)

        try:
            response.send(conn)
        except OSError as exc:
            print(f"Failed to send response: {exc}")

    def run(self, handler: Handler) -> None:
        """Accept connections forever, passing each to ``handler``."""
        print(f"running on: {self.addr}")
        host, port = _split_addr(self.addr)
        with socket.create_server((host, port)) as listener:
            while True:
                try:
                    conn, _ = listener.accept()
                except OSError as exc:
                    print(f"Failed to establish the connection: {exc}")
                    continue
                with conn:
                    self.serve_connection(conn, handler)