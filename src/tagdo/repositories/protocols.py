"""Protocol definitions for the repository layer.

Both the SQL and the in-memory backends implement these, so handlers and
tests can take either one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tagdo.repositories.types import CreateTodo, Label, Todo, UpdateTodo


@runtime_checkable
class TodoRepository(Protocol):
    """Protocol for todo persistence."""

    async def create(self, payload: CreateTodo) -> Todo:
        """Insert a new, uncompleted todo."""
        ...

    async def find(self, id: int) -> Todo:
        """Get a todo by id, raising NotFoundError if absent."""
        ...

    async def all(self) -> list[Todo]:
        """List every todo."""
        ...

    async def update(self, id: int, payload: UpdateTodo) -> Todo:
        """Merge payload into the stored todo, raising NotFoundError if absent."""
        ...

    async def delete(self, id: int) -> None:
        """Remove a todo, raising NotFoundError if absent."""
        ...


@runtime_checkable
class LabelRepository(Protocol):
    """Protocol for label persistence."""

    async def create(self, name: str) -> Label:
        """Insert a label, raising DuplicateError if the name is taken."""
        ...

    async def all(self) -> list[Label]:
        """List every label by ascending id."""
        ...

    async def delete(self, id: int) -> None:
        """Remove a label, raising NotFoundError if absent."""
        ...
