"""Module with database utilities."""

import time
from contextlib import contextmanager
from typing import Optional, Tuple

from sqlalchemy import Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session
from utilities.models import Base
from utilities.logger import Logger

logger = Logger.get_logger(__name__)


def wait_for_database(engine: Engine, max_retries: int, delay: int) -> bool:
    """Wait for the database to be available."""
    for i in range(max_retries):
        try:
            with engine.connect():
                logger.info("Successfully connected to the database")
                return True
        except Exception:
            logger.info(
                f"Waiting for the database to be available... ({i+1}/{max_retries})"
            )
            time.sleep(delay)
    return False


def setup_database(engine: Engine) -> None:
    """Create database tables."""
    Base.metadata.create_all(engine)
    logger.info("Database tables created successfully")


@contextmanager
def bulk_insert_mode(session: Session):
    """
    Disable autoflush on the session for the duration of the block.

    The previous setting is restored on every exit path, including errors
    raised inside the block.
    """
    previous = session.autoflush
    session.autoflush = False
    logger.debug("Bulk insert mode enabled")
    try:
        yield session
    finally:
        session.autoflush = previous
        logger.debug("Bulk insert mode disabled")


def describe_error(error: BaseException) -> Tuple[str, Optional[str]]:
    """Return the primary message of an error and the message of its inner cause."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        # Keep the statement out of the headline, the driver error goes to details
        return str(error).split("\n")[0], str(error.orig)

    inner = error.__cause__ or error.__context__
    return str(error), str(inner) if inner is not None else None
