"""Database layer."""

from tagdo.db.engine import Database
from tagdo.db.models import Base, Label, Todo, TodoLabel

__all__ = [
    # Engine
    "Database",
    # Models
    "Base",
    "Label",
    "Todo",
    "TodoLabel",
]
