"""SQLAlchemy table definitions.

Repositories talk to these tables with plain SQL; the ORM classes exist so
the schema can be created with ``Base.metadata.create_all``.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, Text, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""


class Todo(Base):
    """Todo item."""

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )


class Label(Base):
    """Label tag.

    Names are kept unique by the repository, not by a constraint.
    """

    __tablename__ = "labels"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)


class TodoLabel(Base):
    """Association between a todo and a label."""

    __tablename__ = "todo_labels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    todo_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("todos.id"), nullable=False, index=True
    )
    label_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("labels.id"), nullable=False, index=True
    )
