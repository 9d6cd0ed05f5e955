"""HTTP responses and writing them to a stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scratchweb.status_code import StatusCode


@dataclass
class Response:
    """A status code with an optional text body."""

    status_code: StatusCode
    body: Optional[str] = None

    def to_bytes(self) -> bytes:
        """Return the response as it goes on the wire."""
        body = self.body or ""
        head = f"HTTP/1.1 {self.status_code} {self.status_code.reason_phrase()}\r\n\r\n"
        return (head + body).encode("utf-8")

    def send(self, stream) -> None:
        """Write the response to a socket (``sendall``) or binary file (``write``)."""
        data = self.to_bytes()
        sendall = getattr(stream, "sendall", None)
        if sendall is not None:
            sendall(data)
        else:
            stream.write(data)