"""Error taxonomy shared by the services and the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ErrorKind = Literal[
    "not_authenticated",
    "external_service_failure",
    "invalid_input",
    "invalid_index",
    "out_of_range",
    "not_found",
]


class GreensideError(Exception):
    kind: ErrorKind = "invalid_input"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotAuthenticated(GreensideError):
    """Raised when an operation needs a user identity and none was supplied."""

    kind: ErrorKind = "not_authenticated"


class ExternalServiceFailure(GreensideError):
    """A collaborator call failed or returned data we could not use."""

    kind: ErrorKind = "external_service_failure"


class InvalidInput(GreensideError, ValueError):
    kind: ErrorKind = "invalid_input"


class InvalidIndex(GreensideError, IndexError):
    kind: ErrorKind = "invalid_index"


class SessionNotFound(GreensideError, KeyError):
    kind: ErrorKind = "not_found"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Notice:
    """Non-fatal, user-visible message attached to an otherwise successful result."""

    kind: ErrorKind
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}


__all__ = [
    "ErrorKind",
    "ExternalServiceFailure",
    "GreensideError",
    "InvalidIndex",
    "InvalidInput",
    "NotAuthenticated",
    "Notice",
    "SessionNotFound",
]
