"""Shared helpers for the SQL repository backends."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from tagdo.repositories.errors import UnexpectedError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise storage failures inside the block as UnexpectedError.

    RepositoryError subclasses raised in the block pass through unchanged.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.warning(
            "storage_error", exc_info=True, extra={"operation": operation}
        )
        raise UnexpectedError(str(e)) from e
