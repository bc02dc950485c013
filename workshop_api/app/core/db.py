"""
Document store backed by SQLite.

The workshop data lives in a document database organised into named
collections (``attendees``, ``speakers``, ``sessions``), each holding
JSON documents addressed by a string key.  This module keeps that model
on top of an embedded SQLite file: a single ``documents`` table stores
one JSON text per ``(collection, key)`` pair.  Collection names are
namespaced per workshop as ``workshop/<workshop_id>/<name>`` so several
workshops can share one database file.

``DocumentStore`` owns connection setup and schema migrations;
``Collection`` exposes the four operations handlers need:

* ``get(key)`` returns the document or raises ``NotFoundError``;
* ``list()`` returns every document of the collection;
* ``put(key, value)`` creates or fully replaces a document;
* ``delete(key)`` removes a document and succeeds even if it was absent.

There are no transactions spanning several calls, no optimistic
concurrency and no pagination.  The SQLite work is blocking, so each
operation runs in a worker thread under a deadline; any ``sqlite3``
failure or timeout surfaces as ``StoreError``.
"""

import json
import logging
import os
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Any, Callable, Dict, List, TypeVar

import anyio

from .errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Ordered schema migrations.  Append new entries with an incremented
# version; never edit an applied one.
MIGRATIONS: List[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS documents (
            collection TEXT NOT NULL,
            key TEXT NOT NULL,
            data TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            PRIMARY KEY (collection, key)
        );
        """,
    ),
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_documents_collection
            ON documents (collection);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Return an absolute path for the SQLite file.

    ``:memory:`` is rejected because every operation opens its own
    connection and would see an empty database.
    """
    if database_url == ":memory:":
        raise ValueError("An in-memory database cannot back the document store")
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / database_url).resolve())


class DocumentStore:
    """Entry point to the document database.

    One instance is created at startup and shared by all requests.  It
    holds no per-request state; connections are opened per operation.
    """

    def __init__(self, database_path: str, namespace: str, timeout: float = 5.0):
        self.database_path = database_path
        self.namespace = namespace.strip("/")
        self.timeout = timeout

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        return conn

    def init(self) -> None:
        """Create the database file if needed and apply pending migrations.

        Called once from the application startup hook.  Errors are not
        converted: a store that cannot be opened must abort startup.
        """
        with closing(self.connect()) as conn:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY, applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
            )
            applied = {row["version"] for row in conn.execute("SELECT version FROM migrations")}
            for version, script in MIGRATIONS:
                if version in applied:
                    continue
                conn.executescript(script)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                conn.commit()
                logger.info("Applied document store migration %s", version)
        logger.info("Document store ready at %s (namespace %s)", self.database_path, self.namespace)

    def collection(self, name: str) -> "Collection":
        return Collection(self, f"{self.namespace}/{name}")

    async def run(self, func: Callable[[sqlite3.Connection], T]) -> T:
        """Run ``func`` with a fresh connection in a worker thread.

        The wait is bounded by the store timeout and abandoned if the
        calling task is cancelled.
        """

        def _call() -> T:
            with closing(self.connect()) as conn:
                result = func(conn)
                conn.commit()
                return result

        try:
            with anyio.fail_after(self.timeout):
                return await anyio.to_thread.run_sync(_call, abandon_on_cancel=True)
        except TimeoutError as exc:
            raise StoreError("Document store did not respond in time") from exc
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc


class Collection:
    """A named group of JSON documents within the store."""

    def __init__(self, store: DocumentStore, path: str):
        self.store = store
        self.path = path

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @staticmethod
    def _decode(key: str, raw: str) -> Dict[str, Any]:
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise ValueError("document is not a JSON object")
        document["id"] = key
        return document

    async def get(self, key: str) -> Dict[str, Any]:
        row = await self.store.run(
            lambda conn: conn.execute(
                "SELECT key, data FROM documents WHERE collection = ? AND key = ?",
                (self.path, key),
            ).fetchone()
        )
        if row is None:
            raise NotFoundError(f"{self.name}/{key} not found")
        try:
            return self._decode(row["key"], row["data"])
        except ValueError as exc:
            raise StoreError(f"Corrupt document {self.name}/{key}: {exc}") from exc

    async def list(self) -> List[Dict[str, Any]]:
        # rowid order is first-insertion order because put() upserts in place
        rows = await self.store.run(
            lambda conn: conn.execute(
                "SELECT key, data FROM documents WHERE collection = ? ORDER BY rowid",
                (self.path,),
            ).fetchall()
        )
        documents = []
        for row in rows:
            try:
                documents.append(self._decode(row["key"], row["data"]))
            except ValueError as exc:
                logger.warning("Skipping undecodable document %s/%s: %s", self.name, row["key"], exc)
        return documents

    async def put(self, key: str, value: Dict[str, Any]) -> None:
        data = json.dumps({k: v for k, v in value.items() if k != "id"})
        await self.store.run(
            lambda conn: conn.execute(
                """
                INSERT INTO documents (collection, key, data) VALUES (?, ?, ?)
                ON CONFLICT (collection, key)
                DO UPDATE SET data = excluded.data, updated_at = CURRENT_TIMESTAMP
                """,
                (self.path, key, data),
            )
        )

    async def delete(self, key: str) -> None:
        await self.store.run(
            lambda conn: conn.execute(
                "DELETE FROM documents WHERE collection = ? AND key = ?",
                (self.path, key),
            )
        )
