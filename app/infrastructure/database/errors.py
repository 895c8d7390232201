"""Translation of SQLAlchemy failures into domain StorageError."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from app.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        # Prefer the driver message (e.g. "UNIQUE constraint failed: ...")
        message = str(getattr(exc, "orig", None) or exc)
        logger.error("%s failed: %s", operation, message)
        raise StorageError(operation, message) from exc
