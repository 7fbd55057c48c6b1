"""Tests for CLI commands."""

import json

from tagdo.cli.app import app
from tagdo.db import Database


class TestDbCommand:
    """Tests for 'tagdo db' commands."""

    def test_db_init_creates_database(self, cli_runner, isolated_home):
        result = cli_runner.invoke(app, ["db", "init"])
        assert result.exit_code == 0
        assert "Schema created" in result.stdout
        assert (isolated_home / "tagdo.db").exists()

    def test_db_init_is_idempotent(self, cli_runner):
        assert cli_runner.invoke(app, ["db", "init"]).exit_code == 0
        assert cli_runner.invoke(app, ["db", "init"]).exit_code == 0

    def test_db_init_rejects_memory_backend(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["db", "init", "--config", str(config_file)])
        assert result.exit_code == 1
        assert "memory backend" in result.stdout

    def test_db_init_redacts_url_password(self, cli_runner, monkeypatch):
        async def _noop(self) -> None:
            return None

        for method in ("connect", "create_schema", "disconnect"):
            monkeypatch.setattr(Database, method, _noop)
        monkeypatch.setenv(
            "TAGDO_DATABASE_URL", "postgresql+asyncpg://app:hunter2secret@db/todos"
        )
        result = cli_runner.invoke(app, ["db", "init"])
        assert result.exit_code == 0
        assert "hunter2secret" not in result.stdout
        assert "app:***@db/todos" in result.stdout


class TestConfigCommand:
    """Tests for 'tagdo config' commands."""

    def test_config_show(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["config", "show", "--config", str(config_file)])
        assert result.exit_code == 0
        shown = json.loads(result.stdout)
        assert shown["database"]["backend"] == "memory"
        assert shown["server"]["port"] == 8000

    def test_config_show_redacts_url_password(self, cli_runner, monkeypatch):
        monkeypatch.setenv(
            "TAGDO_DATABASE_URL", "postgresql+asyncpg://app:hunter2secret@db/todos"
        )
        result = cli_runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "hunter2secret" not in result.stdout

    def test_config_show_missing_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["config", "show", "--config", str(tmp_path / "missing.toml")]
        )
        assert result.exit_code == 1
        assert "not found" in result.stdout
