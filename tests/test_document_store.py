"""Document store adapter: CRUD contract, namespacing and failure mapping."""

import sqlite3
import time

import anyio
import pytest

from workshop_api.app.core.db import DocumentStore, resolve_database_path
from workshop_api.app.core.errors import NotFoundError, StoreError


async def test_put_then_get_returns_document_with_key_as_id(store):
    speakers = store.collection("speakers")
    await speakers.put("sp-1", {"name": "Grace", "bio": "Compilers"})

    document = await speakers.get("sp-1")

    assert document == {"id": "sp-1", "name": "Grace", "bio": "Compilers"}


async def test_stored_id_field_is_replaced_by_key(store):
    speakers = store.collection("speakers")
    await speakers.put("sp-1", {"id": "other", "name": "Grace"})

    assert (await speakers.get("sp-1"))["id"] == "sp-1"


async def test_get_missing_key_raises_not_found(store):
    with pytest.raises(NotFoundError):
        await store.collection("speakers").get("nope")


async def test_put_replaces_whole_document(store):
    sessions = store.collection("sessions")
    await sessions.put("s1", {"title": "Old", "capacity": 10})
    await sessions.put("s1", {"title": "New"})

    assert await sessions.get("s1") == {"id": "s1", "title": "New"}


async def test_list_returns_all_documents_in_first_insertion_order(store):
    sessions = store.collection("sessions")
    await sessions.put("b", {"title": "B"})
    await sessions.put("a", {"title": "A"})
    await sessions.put("b", {"title": "B2"})

    documents = await sessions.list()

    assert [d["id"] for d in documents] == ["b", "a"]
    assert documents[0]["title"] == "B2"


async def test_list_empty_collection(store):
    assert await store.collection("attendees").list() == []


async def test_delete_is_idempotent(store):
    speakers = store.collection("speakers")
    await speakers.put("sp-1", {"name": "Grace"})

    await speakers.delete("sp-1")
    await speakers.delete("sp-1")
    await speakers.delete("never-existed")

    with pytest.raises(NotFoundError):
        await speakers.get("sp-1")


async def test_collections_are_isolated(store):
    await store.collection("speakers").put("x", {"name": "Speaker"})

    assert await store.collection("sessions").list() == []


async def test_workshops_sharing_a_file_are_isolated(settings, store):
    other = DocumentStore(settings.database_url, namespace="workshop/other")
    await store.collection("attendees").put("a1", {"name": "Ada"})

    assert await other.collection("attendees").list() == []


async def test_list_skips_undecodable_documents(settings, store):
    speakers = store.collection("speakers")
    await speakers.put("good", {"name": "Grace"})
    conn = sqlite3.connect(settings.database_url)
    conn.execute(
        "INSERT INTO documents (collection, key, data) VALUES (?, ?, ?)",
        (speakers.path, "bad", "not json"),
    )
    conn.commit()
    conn.close()

    documents = await speakers.list()

    assert [d["id"] for d in documents] == ["good"]
    with pytest.raises(StoreError):
        await speakers.get("bad")


async def test_sqlite_failure_surfaces_as_store_error(tmp_path):
    # A directory cannot be opened as a database file.
    broken = DocumentStore(str(tmp_path), namespace="workshop/x")

    with pytest.raises(StoreError):
        await broken.collection("speakers").list()


async def test_missing_schema_surfaces_as_store_error(tmp_path):
    uninitialised = DocumentStore(str(tmp_path / "empty.db"), namespace="workshop/x")

    with pytest.raises(StoreError):
        await uninitialised.collection("speakers").put("a", {"name": "A"})


async def test_operation_exceeding_deadline_raises_store_error(settings):
    slow = DocumentStore(settings.database_url, namespace="workshop/x", timeout=0.1)

    with pytest.raises(StoreError, match="in time"):
        await slow.run(lambda conn: time.sleep(0.5))


def test_init_is_repeatable(store):
    store.init()
    conn = sqlite3.connect(store.database_path)
    versions = [row[0] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    conn.close()

    assert versions == [1, 2]


def test_resolve_database_path_keeps_absolute_paths(tmp_path):
    path = str(tmp_path / "x.db")
    assert resolve_database_path(path) == path


def test_resolve_database_path_rejects_memory():
    with pytest.raises(ValueError):
        resolve_database_path(":memory:")


async def test_cancelled_caller_stops_waiting_promptly(store):
    started = time.monotonic()

    with anyio.move_on_after(0.1) as scope:
        await store.run(lambda conn: time.sleep(2))

    assert scope.cancelled_caught
    assert time.monotonic() - started < 1.0
