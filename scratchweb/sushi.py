"""Sushi records, the request to add one, and the errors the service reports."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from http import HTTPStatus
from typing import Dict, Tuple


class ValidationError(ValueError):
    """Raised when a request fails validation."""


@dataclass
class AddSushiRequest:
    """Body of a request to add a sushi."""

    sushi_name: str

    def validate(self) -> "AddSushiRequest":
        """Return self if valid; raise ValidationError if the name is empty."""
        if len(self.sushi_name) < 1:
            raise ValidationError("sushi name required")
        return self


@dataclass
class UpdateSushiURL:
    """Path parameters of an update request."""

    uuid: str


@dataclass
class Sushi:
    """A stored sushi."""

    uuid: str
    sushi_name: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Sushi":
        return cls(uuid=data["uuid"], sushi_name=data["sushi_name"])


class SushiError(Exception):
    """Base of the errors the sushi service turns into HTTP responses."""

    code = -1
    _status = HTTPStatus.INTERNAL_SERVER_ERROR

    def status_code(self) -> HTTPStatus:
        """Return the HTTP status this error is reported with."""
        return self._status

    def error_response(self) -> Tuple[HTTPStatus, Dict[str, str], str]:
        """Return status, headers and body for this error."""
        return self.status_code(), {"Content-Type": "application/json"}, str(self)

    def __str__(self) -> str:
        return type(self).__name__


class NoSushiFound(SushiError):
    code = 0
    _status = HTTPStatus.NOT_FOUND


class SushiCreationFailure(SushiError):
    code = 1
    _status = HTTPStatus.INTERNAL_SERVER_ERROR


class NoSuchSushiFound(SushiError):
    code = 2
    _status = HTTPStatus.NOT_FOUND