"""Row mappers for converting join rows into domain types.

The SQL backend reads todos through a LEFT JOIN against todo_labels and
labels, which yields one row per (todo, label) pair. fold() regroups those
rows into Todo entities with their label lists.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from tagdo.repositories.errors import RowFoldError
from tagdo.repositories.types import JoinRow, Label, Todo

if TYPE_CHECKING:
    from sqlalchemy.engine import Row


def row_to_join_row(row: Row[Any]) -> JoinRow:
    """Convert a joined SQL row to a JoinRow.

    SQLite hands booleans back as 0/1, so completed is coerced.
    """
    return JoinRow(
        id=row.id,
        text=row.text,
        completed=bool(row.completed),
        label_id=row.label_id,
        label_name=row.label_name,
    )


def row_to_label(row: Row[Any]) -> Label:
    """Convert a labels row to a Label."""
    return Label(id=row.id, name=row.name)


def fold(rows: Iterable[JoinRow]) -> list[Todo]:
    """Group join rows into todos, keeping first-seen order.

    Labels are appended in row order. Repeated label pairs are kept as-is,
    one label per row.
    """
    accumulator: list[Todo] = []
    for row in rows:
        label = row.label
        existing = next((todo for todo in accumulator if todo.id == row.id), None)
        if existing is not None:
            if label is not None:
                existing.labels.append(label)
            continue

        accumulator.append(
            Todo(
                id=row.id,
                text=row.text,
                completed=row.completed,
                labels=[label] if label is not None else [],
            )
        )
    return accumulator


def fold_one(rows: Iterable[JoinRow]) -> Todo:
    """Fold rows that belong to exactly one todo.

    Raises:
        RowFoldError: If the rows fold into zero or several todos.
    """
    todos = fold(rows)
    if len(todos) != 1:
        raise RowFoldError(f"expected rows for exactly one todo, folded {len(todos)}")
    return todos[0]
