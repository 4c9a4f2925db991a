# src/mimarket_lambda/ports/errors.py
"""
Errors raised by port implementations.

Every adapter (real or in-memory) must surface backend failures as a
BackendError. Callers that need to tell "missing" apart from "transient"
inspect `kind`; the port contracts never encode that split in return values.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    MALFORMED = "malformed"
    UNKNOWN = "unknown"


class BackendError(Exception):
    """A key-value or blob backend could not satisfy a request."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        backend: str = "backend",
    ) -> None:
        self.message = message
        self.kind = kind
        self.backend = backend
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND


class ObjectNotFoundError(BackendError):
    """Blob lookups model a missing object as an error, not as an empty result."""

    def __init__(self, message: str = "Object not found", backend: str = "blob") -> None:
        super().__init__(message, kind=ErrorKind.NOT_FOUND, backend=backend)
