# src/mimarket_lambda/infra/memory_storage.py
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from mimarket_lambda.ports.blob import BlobPort
from mimarket_lambda.ports.errors import ObjectNotFoundError
from mimarket_lambda.ports.key_value import KeyValuePort


def _composite(partition: str, key: str) -> str:
    return f"{partition}::{key}"


class MemoryKeyValueStore(KeyValuePort):
    """
    In-memory key-value adapter (ephemeral). Used as a test double and as the
    dev backend (MIMARKET_BACKEND=memory).

    Records live under "<table>::<key value>". Lookups use only the FIRST
    value of the key mapping, so multi-attribute keys collapse onto their
    first attribute. Python dicts keep insertion order, so the first value is
    the first attribute the caller wrote.

    put() is a no-op: writes are recorded in `writes` but never become
    visible to get().
    """

    def __init__(self) -> None:
        self._items: Dict[str, Dict[str, str]] = {}
        self.writes: List[Tuple[str, Dict[str, str]]] = []
        self.get_calls = 0

    def with_item(self, table: str, key: str, record: Mapping[str, str]) -> "MemoryKeyValueStore":
        self._items[_composite(table, key)] = dict(record)
        return self

    # --- Port methods ---
    def get(self, table_name: str, key: Mapping[str, str]) -> Optional[Dict[str, str]]:
        self.get_calls += 1
        key_value = next(iter(key.values()), "")
        record = self._items.get(_composite(table_name, key_value))
        return dict(record) if record is not None else None

    def put(self, table_name: str, item: Mapping[str, str]) -> None:
        self.writes.append((table_name, dict(item)))


class MemoryBlobStore(BlobPort):
    """
    In-memory blob adapter (ephemeral). Objects live under "<container>::<key>".
    Missing objects raise ObjectNotFoundError.
    """

    def __init__(self) -> None:
        self._objects: Dict[str, bytes] = {}
        self.writes: List[Tuple[str, str, bytes]] = []
        self.get_calls = 0

    def with_object(self, container: str, key: str, data: bytes) -> "MemoryBlobStore":
        self._objects[_composite(container, key)] = bytes(data)
        return self

    # --- Port methods ---
    def get(self, container: str, key: str) -> bytes:
        self.get_calls += 1
        try:
            return self._objects[_composite(container, key)]
        except KeyError:
            raise ObjectNotFoundError("Object not found") from None

    def put(self, container: str, key: str, body: bytes) -> None:
        self.writes.append((container, key, bytes(body)))
