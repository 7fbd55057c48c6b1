"""Entity and payload types for todos and labels."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

TEXT_MAX_LENGTH = 100


@dataclass
class Label:
    """A label that can be attached to todos."""

    id: int
    name: str


@dataclass
class Todo:
    """A todo item with the labels attached at read time."""

    id: int
    text: str
    completed: bool = False
    labels: list[Label] = field(default_factory=list)


@dataclass(frozen=True)
class JoinRow:
    """One row of the todos/todo_labels/labels join.

    label_id and label_name are both None when the todo has no labels.
    """

    id: int
    text: str
    completed: bool
    label_id: int | None = None
    label_name: str | None = None

    @property
    def label(self) -> Label | None:
        if self.label_id is None or self.label_name is None:
            return None
        return Label(id=self.label_id, name=self.label_name)


class CreateTodo(BaseModel):
    """Payload for creating a todo."""

    text: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH)


class UpdateTodo(BaseModel):
    """Payload for a partial todo update.

    A field left as None keeps its stored value.
    """

    text: str | None = Field(default=None, min_length=1, max_length=TEXT_MAX_LENGTH)
    completed: bool | None = None


class CreateLabel(BaseModel):
    """Payload for creating a label."""

    name: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH)
