"""FastAPI application for the todo/label API."""

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tagdo.repositories import DuplicateError, NotFoundError, RepositoryError
from tagdo.server.routes import health, labels, todos

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from tagdo.db import Database
    from tagdo.repositories import Repositories

logger = logging.getLogger(__name__)


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message, "id": exc.id},
    )


async def _duplicate_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message, "id": exc.id},
    )


async def _repository_error_handler(
    request: Request, exc: RepositoryError
) -> JSONResponse:
    logger.error(
        "repository_error",
        extra={"path": request.url.path, "error": exc.message},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def create_app(
    repositories: "Repositories",
    database: "Database | None" = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        repositories: Todo/label repositories the routes delegate to.
        database: Connected on startup and disposed on shutdown when given.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> "AsyncIterator[None]":
        logger.info("Starting tagdo server")
        if database is not None and not database.is_connected:
            await database.connect()
            await database.create_schema()

        yield

        logger.info("Shutting down tagdo server")
        if database is not None:
            await database.disconnect()

    app = FastAPI(
        title="tagdo",
        description="Todo and label API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.repositories = repositories
    app.state.database = database

    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(DuplicateError, _duplicate_handler)
    app.add_exception_handler(RepositoryError, _repository_error_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(todos.router, prefix="/todos", tags=["todos"])
    app.include_router(labels.router, prefix="/labels", tags=["labels"])

    return app
