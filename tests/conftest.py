"""Shared test fixtures and factories."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy import text

from tagdo.config.models import DatabaseConfig, TagdoConfig
from tagdo.db.engine import Database
from tagdo.repositories import (
    LabelRepositoryForDb,
    LabelRepositoryForMemory,
    TodoRepositoryForDb,
    TodoRepositoryForMemory,
)

# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config(tmp_path: Path) -> TagdoConfig:
    """Configuration pointing at a throwaway SQLite file."""
    return TagdoConfig(database=DatabaseConfig(path=tmp_path / "tagdo.db"))


@pytest.fixture
def config_toml_content() -> str:
    """Valid TOML config content."""
    return """
[database]
backend = "memory"

[server]
host = "0.0.0.0"
port = 8000

[logging]
level = "DEBUG"
"""


@pytest.fixture
def config_file(tmp_path: Path, config_toml_content: str) -> Path:
    """Create a temporary config file."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(config_toml_content)
    return config_path


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Create a temporary test database with the schema in place."""
    db = Database(database_path=tmp_path / "test.db")
    await db.connect()
    await db.create_schema()

    yield db

    await db.disconnect()


@pytest.fixture
def todo_repository(database: Database) -> TodoRepositoryForDb:
    return TodoRepositoryForDb(database)


@pytest.fixture
def label_repository(database: Database) -> LabelRepositoryForDb:
    return LabelRepositoryForDb(database)


@pytest.fixture
def memory_todo_repository() -> TodoRepositoryForMemory:
    return TodoRepositoryForMemory()


@pytest.fixture
def memory_label_repository() -> LabelRepositoryForMemory:
    return LabelRepositoryForMemory()


@pytest.fixture
def attach_label(database: Database):
    """Link a label to a todo through the todo_labels table."""

    async def _attach(todo_id: int, label_id: int) -> None:
        async with database.session() as session:
            await session.execute(
                text(
                    "INSERT INTO todo_labels (todo_id, label_id) VALUES (:todo_id, :label_id)"
                ),
                {"todo_id": todo_id, "label_id": label_id},
            )

    return _attach


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point TAGDO_HOME at a temp dir and clear env overrides."""
    from tagdo.config.paths import get_tagdo_home

    home = tmp_path / "home"
    monkeypatch.setenv("TAGDO_HOME", str(home))
    monkeypatch.delenv("TAGDO_DATABASE_URL", raising=False)
    monkeypatch.delenv("TAGDO_BACKEND", raising=False)
    monkeypatch.chdir(tmp_path)
    get_tagdo_home.cache_clear()
    yield home
    get_tagdo_home.cache_clear()
