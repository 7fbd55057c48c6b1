"""Todo and label repositories.

Two interchangeable backends implement the same protocols:

- *ForDb: parameterized SQL through the async SQLAlchemy engine
- *ForMemory: dicts guarded by a read/write lock, for tests and local runs
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from tagdo.config.models import ConfigError
from tagdo.repositories.errors import (
    DuplicateError,
    NotFoundError,
    RepositoryError,
    RowFoldError,
    UnexpectedError,
)
from tagdo.repositories.labels import LabelRepositoryForDb, LabelRepositoryForMemory
from tagdo.repositories.mappers import fold, fold_one
from tagdo.repositories.protocols import LabelRepository, TodoRepository
from tagdo.repositories.todos import TodoRepositoryForDb, TodoRepositoryForMemory
from tagdo.repositories.types import (
    CreateLabel,
    CreateTodo,
    JoinRow,
    Label,
    Todo,
    UpdateTodo,
)

if TYPE_CHECKING:
    from tagdo.config.models import DatabaseConfig
    from tagdo.db import Database


class Repositories(NamedTuple):
    todos: TodoRepository
    labels: LabelRepository


def create_repositories(
    config: DatabaseConfig, database: Database | None = None
) -> Repositories:
    """Build the todo/label repository pair for the configured backend.

    Raises:
        ConfigError: If the SQL backend is selected without a database.
    """
    if config.backend == "memory":
        return Repositories(
            todos=TodoRepositoryForMemory(), labels=LabelRepositoryForMemory()
        )
    if database is None:
        raise ConfigError("The sql backend requires a database")
    return Repositories(
        todos=TodoRepositoryForDb(database), labels=LabelRepositoryForDb(database)
    )


__all__ = [
    "CreateLabel",
    "CreateTodo",
    "DuplicateError",
    "JoinRow",
    "Label",
    "LabelRepository",
    "LabelRepositoryForDb",
    "LabelRepositoryForMemory",
    "NotFoundError",
    "Repositories",
    "RepositoryError",
    "RowFoldError",
    "Todo",
    "TodoRepository",
    "TodoRepositoryForDb",
    "TodoRepositoryForMemory",
    "UnexpectedError",
    "UpdateTodo",
    "create_repositories",
    "fold",
    "fold_one",
]
