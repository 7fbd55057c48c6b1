"""Todo repositories: SQL-backed and in-memory."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import text

from tagdo.repositories.errors import NotFoundError
from tagdo.repositories.helpers import storage_errors
from tagdo.repositories.locking import ReadWriteLock
from tagdo.repositories.mappers import fold, fold_one, row_to_join_row
from tagdo.repositories.types import CreateTodo, Todo, UpdateTodo

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from tagdo.db import Database

logger = logging.getLogger(__name__)

# One row per (todo, label) pair; todos without labels get a single row
# with NULL label columns.
TODO_JOIN_SELECT = """
    SELECT todos.id, todos.text, todos.completed,
        labels.id AS label_id, labels.name AS label_name
    FROM todos
    LEFT OUTER JOIN todo_labels ON todo_labels.todo_id = todos.id
    LEFT OUTER JOIN labels ON labels.id = todo_labels.label_id
"""


class TodoRepositoryForDb:
    """Todo repository backed by the relational store."""

    def __init__(self, database: Database):
        self._db = database

    async def create(self, payload: CreateTodo) -> Todo:
        with storage_errors("todo.create"):
            async with self._db.session() as session:
                result = await session.execute(
                    text("""
                        INSERT INTO todos (text, completed)
                        VALUES (:text, :completed)
                        RETURNING id, text, completed
                    """),
                    {"text": payload.text, "completed": False},
                )
                row = result.one()

        todo = Todo(id=row.id, text=row.text, completed=bool(row.completed))
        logger.debug("todo_created", extra={"todo_id": todo.id})
        return todo

    async def find(self, id: int) -> Todo:
        with storage_errors("todo.find"):
            async with self._db.session() as session:
                return await self._find(session, id)

    async def all(self) -> list[Todo]:
        with storage_errors("todo.all"):
            async with self._db.session() as session:
                result = await session.execute(
                    text(
                        TODO_JOIN_SELECT
                        + " ORDER BY todos.id DESC, todo_labels.id ASC"
                    )
                )
                rows = result.fetchall()
        return fold(row_to_join_row(row) for row in rows)

    async def update(self, id: int, payload: UpdateTodo) -> Todo:
        # Read, write and re-read share one transaction so a concurrent
        # delete surfaces as NotFoundError instead of an empty result.
        with storage_errors("todo.update"):
            async with self._db.session() as session:
                result = await session.execute(
                    text("SELECT id, text, completed FROM todos WHERE id = :id"),
                    {"id": id},
                )
                old = result.fetchone()
                if old is None:
                    raise NotFoundError(id)

                result = await session.execute(
                    text("""
                        UPDATE todos SET text = :text, completed = :completed
                        WHERE id = :id
                    """),
                    {
                        "id": id,
                        "text": payload.text if payload.text is not None else old.text,
                        "completed": payload.completed
                        if payload.completed is not None
                        else bool(old.completed),
                    },
                )
                if result.rowcount == 0:
                    raise NotFoundError(id)

                todo = await self._find(session, id)

        logger.debug("todo_updated", extra={"todo_id": id})
        return todo

    async def delete(self, id: int) -> None:
        with storage_errors("todo.delete"):
            async with self._db.session() as session:
                await session.execute(
                    text("DELETE FROM todo_labels WHERE todo_id = :id"), {"id": id}
                )
                result = await session.execute(
                    text("DELETE FROM todos WHERE id = :id"), {"id": id}
                )
                if result.rowcount == 0:
                    raise NotFoundError(id)

        logger.debug("todo_deleted", extra={"todo_id": id})

    async def _find(self, session: AsyncSession, id: int) -> Todo:
        result = await session.execute(
            text(TODO_JOIN_SELECT + " WHERE todos.id = :id ORDER BY todo_labels.id ASC"),
            {"id": id},
        )
        rows = result.fetchall()
        if not rows:
            raise NotFoundError(id)
        return fold_one(row_to_join_row(row) for row in rows)


class TodoRepositoryForMemory:
    """In-memory todo repository for tests and local runs.

    Labels are never attached to todos here.
    """

    def __init__(self) -> None:
        self._store: dict[int, Todo] = {}
        self._lock = ReadWriteLock()
        self._last_id = 0

    @asynccontextmanager
    async def _read_store(self) -> AsyncIterator[dict[int, Todo]]:
        async with self._lock.read():
            yield self._store

    @asynccontextmanager
    async def _write_store(self) -> AsyncIterator[dict[int, Todo]]:
        async with self._lock.write():
            yield self._store

    async def create(self, payload: CreateTodo) -> Todo:
        async with self._write_store() as store:
            # Monotonic ids: never hand out an id freed by delete
            self._last_id += 1
            todo = Todo(id=self._last_id, text=payload.text)
            store[todo.id] = todo
            return _copy(todo)

    async def find(self, id: int) -> Todo:
        async with self._read_store() as store:
            todo = store.get(id)
            if todo is None:
                raise NotFoundError(id)
            return _copy(todo)

    async def all(self) -> list[Todo]:
        async with self._read_store() as store:
            return [_copy(todo) for todo in store.values()]

    async def update(self, id: int, payload: UpdateTodo) -> Todo:
        async with self._write_store() as store:
            old = store.get(id)
            if old is None:
                raise NotFoundError(id)
            todo = Todo(
                id=id,
                text=payload.text if payload.text is not None else old.text,
                completed=payload.completed
                if payload.completed is not None
                else old.completed,
                labels=list(old.labels),
            )
            store[id] = todo
            return _copy(todo)

    async def delete(self, id: int) -> None:
        async with self._write_store() as store:
            if store.pop(id, None) is None:
                raise NotFoundError(id)


def _copy(todo: Todo) -> Todo:
    return dataclasses.replace(todo, labels=list(todo.labels))
