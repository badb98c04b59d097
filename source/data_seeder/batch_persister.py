"""Chunked persistence of generated records."""

from typing import List

from sqlalchemy.orm import Session

from utilities.logger import Logger
from data_seeder.record_factory import RecordFactory

DEFAULT_CHUNK_SIZE = 1000

logger = Logger.get_logger(__name__)


def save_in_batches(
    session: Session,
    factory: RecordFactory,
    record_count: int,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List:
    """
    Generate record_count records and write them to the database chunk by chunk.

    Every chunk is flushed before the next one is generated and then detached
    from the session, so only one chunk of pending rows is tracked at a time.
    All generated records are returned, with their primary keys populated.
    Flush errors propagate to the caller, which owns the transaction.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    table = factory.model.__tablename__
    data = []
    for start in range(0, record_count, chunk_size):
        batch = factory.generate(min(chunk_size, record_count - start))
        session.add_all(batch)
        session.flush()
        for record in batch:
            session.expunge(record)
        data.extend(batch)

        logger.info(f"Generated {len(data)}/{record_count} {table} records...")

    return data
