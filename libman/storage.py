# libman/storage.py
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


logger = logging.getLogger(__name__)


class DatabaseNotConfigured(RuntimeError):
    """Raised when no database path has been configured."""


def _read_only_uri(db_path: str) -> str:
    return Path(db_path).expanduser().resolve().as_uri() + "?mode=ro"


@contextmanager
def open_database(db_path: str) -> Iterator[sqlite3.Connection]:
    """Open the collection database read-only for the duration of a block.

    The connection is always closed when the block exits, whether it
    finished normally or raised. Rows come back as ``sqlite3.Row`` so the
    mappers can address columns by name.
    """
    if not db_path:
        raise DatabaseNotConfigured("LIBMANDB_PATH is not set")

    conn = sqlite3.connect(_read_only_uri(db_path), uri=True)
    conn.row_factory = sqlite3.Row
    logger.debug("Opened database %s", db_path)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("Closed database %s", db_path)
