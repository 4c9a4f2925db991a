# src/mimarket_lambda/ports/key_value.py
"""
KeyValuePort: the hexagonal 'port' interface for record (table) backends.

NOTE:
- Records and keys are flat string->string mappings. Adapters convert to and
  from whatever attribute encoding their backend uses.
- By convention a key holds a single attribute (the primary key).
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol


class KeyValuePort(Protocol):
    """
    Contract that all key-value adapters must implement.

    Semantics:
      - get  -> the record, or None when nothing matches the key.
                Backend failures raise BackendError; they are never
                reported as None.
      - put  -> store the record, raise BackendError on failure.

    Adapters are shared across concurrent requests and must tolerate
    concurrent reads.
    """

    def get(self, table_name: str, key: Mapping[str, str]) -> Optional[Dict[str, str]]:
        ...

    def put(self, table_name: str, item: Mapping[str, str]) -> None:
        ...
