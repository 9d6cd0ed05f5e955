"""HTTP status codes used by the server."""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """Supported response status codes."""

    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404

    def reason_phrase(self) -> str:
        """Return the standard reason phrase for this code."""
        return _REASONS[self]

    def __str__(self) -> str:
        return str(int(self))


_REASONS = {
    StatusCode.OK: "OK",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.NOT_FOUND: "Not Found",
}