"""Main CLI application."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from tagdo.cli.console import console, dim, error, success
from tagdo.config import ConfigError, load_config
from tagdo.logging import SecretRedactor

if TYPE_CHECKING:
    from tagdo.config import TagdoConfig
    from tagdo.db import Database

app = typer.Typer(
    name="tagdo",
    help="tagdo - todo and label API",
    no_args_is_help=True,
)

db_app = typer.Typer(help="Database management commands")
config_app = typer.Typer(help="Configuration commands")
app.add_typer(db_app, name="db")
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file",
    ),
]


def _load(config_path: Path | None) -> TagdoConfig:
    try:
        return load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from e


def _database(config: TagdoConfig) -> Database:
    from tagdo.db import Database

    return Database(
        database_url=config.database.url,
        database_path=config.database.path,
        echo=config.database.echo,
    )


@app.command()
def serve(
    config_path: ConfigOption = None,
    host: Annotated[
        str | None,
        typer.Option(
            "--host",
            "-h",
            help="Host to bind to",
        ),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option(
            "--port",
            "-p",
            help="Port to bind to",
        ),
    ] = None,
    memory: Annotated[
        bool,
        typer.Option(
            "--memory",
            help="Use the in-memory backend instead of the database",
        ),
    ] = False,
) -> None:
    """Start the HTTP server."""
    import uvicorn

    from tagdo.logging import configure_logging
    from tagdo.repositories import create_repositories
    from tagdo.server import create_app

    config = _load(config_path)
    if memory:
        config.database.backend = "memory"

    configure_logging(config.logging.level, use_rich=config.logging.rich)

    database = _database(config) if config.database.backend == "sql" else None
    repositories = create_repositories(config.database, database)
    fastapi_app = create_app(repositories, database)

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    console.print(
        f"[bold]Serving on http://{bind_host}:{bind_port}[/bold] "
        f"({config.database.backend} backend)"
    )
    uvicorn.run(
        fastapi_app,
        host=bind_host,
        port=bind_port,
        log_config=None,  # Use shared logging config, not uvicorn's
    )


@db_app.command("init")
def db_init(config_path: ConfigOption = None) -> None:
    """Create the database tables if they do not exist."""
    config = _load(config_path)
    if config.database.backend != "sql":
        error("The memory backend has no schema to create")
        raise typer.Exit(1)

    database = _database(config)

    async def run() -> None:
        await database.connect()
        try:
            await database.create_schema()
        finally:
            await database.disconnect()

    asyncio.run(run())
    success("Schema created")
    dim(SecretRedactor().redact(database.url))


@config_app.command("show")
def config_show(config_path: ConfigOption = None) -> None:
    """Show the effective configuration."""
    config = _load(config_path)
    redactor = SecretRedactor()
    console.print_json(redactor.redact(config.model_dump_json()))
