"""Label repositories: SQL-backed and in-memory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import text

from tagdo.repositories.errors import DuplicateError, NotFoundError
from tagdo.repositories.helpers import storage_errors
from tagdo.repositories.locking import ReadWriteLock
from tagdo.repositories.mappers import row_to_label
from tagdo.repositories.types import Label

if TYPE_CHECKING:
    from tagdo.db import Database

logger = logging.getLogger(__name__)


class LabelRepositoryForDb:
    """Label repository backed by the relational store."""

    def __init__(self, database: Database):
        self._db = database

    async def create(self, name: str) -> Label:
        with storage_errors("label.create"):
            async with self._db.session() as session:
                result = await session.execute(
                    text("SELECT id, name FROM labels WHERE name = :name"),
                    {"name": name},
                )
                existing = result.first()
                if existing is not None:
                    raise DuplicateError(existing.id)

                result = await session.execute(
                    text("""
                        INSERT INTO labels (name)
                        VALUES (:name)
                        RETURNING id, name
                    """),
                    {"name": name},
                )
                label = row_to_label(result.one())

        logger.debug("label_created", extra={"label_id": label.id})
        return label

    async def all(self) -> list[Label]:
        with storage_errors("label.all"):
            async with self._db.session() as session:
                result = await session.execute(
                    text("SELECT id, name FROM labels ORDER BY id ASC")
                )
                return [row_to_label(row) for row in result.fetchall()]

    async def delete(self, id: int) -> None:
        with storage_errors("label.delete"):
            async with self._db.session() as session:
                await session.execute(
                    text("DELETE FROM todo_labels WHERE label_id = :id"), {"id": id}
                )
                result = await session.execute(
                    text("DELETE FROM labels WHERE id = :id"), {"id": id}
                )
                if result.rowcount == 0:
                    raise NotFoundError(id)

        logger.debug("label_deleted", extra={"label_id": id})


class LabelRepositoryForMemory:
    """In-memory label repository.

    Applies the same duplicate-name check as the SQL backend.
    """

    def __init__(self) -> None:
        self._store: dict[int, Label] = {}
        self._lock = ReadWriteLock()
        self._last_id = 0

    @asynccontextmanager
    async def _read_store(self) -> AsyncIterator[dict[int, Label]]:
        async with self._lock.read():
            yield self._store

    @asynccontextmanager
    async def _write_store(self) -> AsyncIterator[dict[int, Label]]:
        async with self._lock.write():
            yield self._store

    async def create(self, name: str) -> Label:
        async with self._write_store() as store:
            for label in store.values():
                if label.name == name:
                    raise DuplicateError(label.id)
            self._last_id += 1
            label = Label(id=self._last_id, name=name)
            store[label.id] = label
            return Label(id=label.id, name=label.name)

    async def all(self) -> list[Label]:
        async with self._read_store() as store:
            return [
                Label(id=label.id, name=label.name)
                for label in sorted(store.values(), key=lambda label: label.id)
            ]

    async def delete(self, id: int) -> None:
        async with self._write_store() as store:
            if store.pop(id, None) is None:
                raise NotFoundError(id)
