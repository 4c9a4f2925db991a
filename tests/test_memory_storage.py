# tests/test_memory_storage.py
import pytest

from mimarket_lambda.infra.memory_storage import MemoryBlobStore, MemoryKeyValueStore
from mimarket_lambda.ports.errors import BackendError, ErrorKind, ObjectNotFoundError


def test_key_value_seeded_item_resolves():
    db = MemoryKeyValueStore().with_item("test-table", "test-key", {"name": "test"})
    got = db.get("test-table", {"id": "test-key"})
    assert got == {"name": "test"}


def test_key_value_missing_item_is_none_not_error():
    db = MemoryKeyValueStore()
    assert db.get("test-table", {"id": "missing"}) is None


def test_key_value_seeding_is_chainable():
    db = MemoryKeyValueStore()
    same = db.with_item("t", "a", {"n": "1"}).with_item("t", "b", {"n": "2"})
    assert same is db
    assert db.get("t", {"id": "a"}) == {"n": "1"}
    assert db.get("t", {"id": "b"}) == {"n": "2"}


def test_key_value_only_first_key_attribute_participates():
    # Known limitation: composite keys collapse onto their first value.
    db = MemoryKeyValueStore().with_item("t", "pk", {"n": "1"})
    assert db.get("t", {"pk_attr": "pk", "sort": "anything"}) == {"n": "1"}
    assert db.get("t", {"sort": "anything", "pk_attr": "pk"}) is None


def test_key_value_empty_key_uses_empty_string():
    db = MemoryKeyValueStore().with_item("t", "", {"n": "blank"})
    assert db.get("t", {}) == {"n": "blank"}


def test_key_value_put_is_recorded_but_not_visible():
    db = MemoryKeyValueStore()
    db.put("t", {"id": "new", "n": "1"})
    assert db.writes == [("t", {"id": "new", "n": "1"})]
    assert db.get("t", {"id": "new"}) is None


def test_key_value_returns_snapshots():
    record = {"name": "test"}
    db = MemoryKeyValueStore().with_item("t", "k", record)
    record["name"] = "changed"
    got = db.get("t", {"id": "k"})
    got["name"] = "mutated"
    assert db.get("t", {"id": "k"}) == {"name": "test"}


def test_key_value_counts_gets():
    db = MemoryKeyValueStore()
    db.get("t", {"id": "a"})
    db.get("t", {"id": "b"})
    assert db.get_calls == 2


def test_blob_seeded_object_resolves():
    data = b"test data"
    storage = MemoryBlobStore().with_object("test-bucket", "test-key", data)
    assert storage.get("test-bucket", "test-key") == data


def test_blob_missing_object_is_not_found_error():
    storage = MemoryBlobStore()
    with pytest.raises(ObjectNotFoundError) as exc:
        storage.get("test-bucket", "missing-key")
    err = exc.value
    assert isinstance(err, BackendError)
    assert err.kind is ErrorKind.NOT_FOUND
    assert err.is_not_found
    assert str(err) == "Object not found"


def test_blob_is_keyed_by_container_and_key():
    storage = MemoryBlobStore().with_object("a", "k", b"1")
    with pytest.raises(ObjectNotFoundError):
        storage.get("b", "k")


def test_blob_put_is_recorded_but_not_visible():
    storage = MemoryBlobStore()
    storage.put("b", "k", b"new")
    assert storage.writes == [("b", "k", b"new")]
    with pytest.raises(ObjectNotFoundError):
        storage.get("b", "k")
