# src/mimarket_lambda/ports/blob.py
"""
BlobPort: the hexagonal 'port' interface for binary object storage.

Unlike KeyValuePort there is no optional result: a missing object raises
ObjectNotFoundError (a BackendError with kind NOT_FOUND), exactly like any
other retrieval failure.
"""

from __future__ import annotations

from typing import Protocol


class BlobPort(Protocol):
    """
    Contract that all blob adapters must implement.

      - get  -> full object body, or raise BackendError
      - put  -> store body under (container, key), or raise BackendError
    """

    def get(self, container: str, key: str) -> bytes:
        ...

    def put(self, container: str, key: str, body: bytes) -> None:
        ...
