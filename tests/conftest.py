# tests/conftest.py
from typing import Dict, Mapping, Optional

import pytest
from fastapi.testclient import TestClient

from mimarket_lambda.main import app
from mimarket_lambda.application.processor import RequestProcessor
from mimarket_lambda.config.settings import LookupTarget
from mimarket_lambda.infra.memory_storage import MemoryBlobStore, MemoryKeyValueStore
from mimarket_lambda.infra.providers import get_processor, reset_providers
from mimarket_lambda.ports.blob import BlobPort
from mimarket_lambda.ports.errors import BackendError, ErrorKind
from mimarket_lambda.ports.key_value import KeyValuePort


# Every test looks up the same fixed target; seeding must use these names.
TABLE = "test-table"
ITEM_KEY = "test-key"
BUCKET = "test-bucket"
OBJECT_KEY = "test-key"

LOOKUP = LookupTarget(
    table_name=TABLE,
    item_key_attribute="id",
    item_key=ITEM_KEY,
    bucket_name=BUCKET,
    object_key=OBJECT_KEY,
)


# ------------------ Fakes that always fail ------------------

class FailingKeyValueStore(KeyValuePort):
    def __init__(self, message: str = "connection refused"):
        self.message = message
        self.get_calls = 0

    def get(self, table_name: str, key: Mapping[str, str]) -> Optional[Dict[str, str]]:
        self.get_calls += 1
        raise BackendError(self.message, kind=ErrorKind.UNAVAILABLE, backend="key-value")

    def put(self, table_name: str, item: Mapping[str, str]) -> None:
        raise BackendError(self.message, kind=ErrorKind.UNAVAILABLE, backend="key-value")


class FailingBlobStore(BlobPort):
    def __init__(self, message: str = "service unavailable"):
        self.message = message
        self.get_calls = 0

    def get(self, container: str, key: str) -> bytes:
        self.get_calls += 1
        raise BackendError(self.message, kind=ErrorKind.UNAVAILABLE, backend="blob")

    def put(self, container: str, key: str, body: bytes) -> None:
        raise BackendError(self.message, kind=ErrorKind.UNAVAILABLE, backend="blob")


class ExplodingKeyValueStore(KeyValuePort):
    """Raises something that is not a BackendError (a bug, not a backend problem)."""

    def get(self, table_name: str, key: Mapping[str, str]) -> Optional[Dict[str, str]]:
        raise RuntimeError("boom")

    def put(self, table_name: str, item: Mapping[str, str]) -> None:
        raise RuntimeError("boom")


# ------------------ Per-test wiring ------------------

@pytest.fixture
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def blob() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def processor(kv, blob) -> RequestProcessor:
    return RequestProcessor(kv, blob, lookup=LOOKUP)


@pytest.fixture
def client(processor):
    """
    TestClient whose handler uses the per-test processor (fresh doubles).
    """
    app.dependency_overrides[get_processor] = lambda: processor
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_singletons():
    reset_providers()
    yield
    reset_providers()
