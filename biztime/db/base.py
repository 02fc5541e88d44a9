"""Engine management and helpers shared by the BizTime operation classes."""

import logging
from typing import Any, List, Optional, Sequence, Union

from slugify import slugify
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# "&" is spelled out, so "Acme & Co" becomes "acme-and-co".
SLUG_REPLACEMENTS = [["&", "and"]]


class DatabaseManager:
    """Owns the engine behind the companies, invoices and industries tables.

    Extra keyword arguments are handed to ``create_engine`` unchanged, so
    callers can tune pooling (``pool_pre_ping``, ``pool_size``) or turn on
    ``echo`` without touching the operation classes.
    """

    def __init__(self, database_url: str, **engine_options: Any):
        self.engine: Engine = create_engine(database_url, **engine_options)
        self._check_connection()

    def _check_connection(self) -> None:
        """Run ``SELECT 1`` so a bad URL fails at startup, not on first request."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(
                f"Connected to BizTime database ({self.engine.dialect.name})"
            )
        except SQLAlchemyError as e:
            logger.error(f"BizTime database connection failed: {e}")
            raise

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self.engine.dispose()
        logger.info("BizTime database connection closed")


def slugify_code(value: str) -> str:
    """Slug form of a user-supplied company or industry code.

    Raises ValueError when nothing usable is left, e.g. for ``"!!!"``.
    """
    code = slugify(value, replacements=SLUG_REPLACEMENTS)
    if not code:
        raise ValueError(
            f"Code {value!r} has no letters or digits to build a slug from"
        )
    return code


def shape_rows(rows: Sequence[Row]) -> Optional[Union[Row, List[Row]]]:
    """Project a result set to None, a single row, or a list of rows.

    Lookups by primary key and ``RETURNING`` statements go through this so a
    single match comes back as the row itself.
    """
    if not rows:
        return None
    if len(rows) == 1:
        return rows[0]
    return list(rows)
