"""Typed constraint errors raised by the database operations."""

import logging
from typing import Optional

from psycopg2 import errorcodes
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ConstraintViolation(Exception):
    """A statement was rejected by a database constraint."""

    def __init__(self, message: str, constraint: Optional[str] = None):
        super().__init__(message)
        self.constraint = constraint


class ForeignKeyViolation(ConstraintViolation):
    """A referenced row does not exist."""


class UniqueViolation(ConstraintViolation):
    """A row with the same key already exists."""


def translate_integrity_error(error: IntegrityError) -> ConstraintViolation:
    """Map a driver integrity error to a typed constraint violation.

    The SQLSTATE code picks the variant and the constraint name is carried
    along. psycopg2 exposes the code as ``pgcode`` and psycopg 3 as
    ``sqlstate``, and both carry ``diag.constraint_name``. Errors without
    driver diagnostics become a plain ``ConstraintViolation`` with no
    constraint name.
    """
    orig = error.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    diag = getattr(orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    message = str(orig) if orig is not None else str(error)

    if sqlstate == errorcodes.FOREIGN_KEY_VIOLATION:
        return ForeignKeyViolation(message, constraint)
    if sqlstate == errorcodes.UNIQUE_VIOLATION:
        return UniqueViolation(message, constraint)

    logger.warning(f"Unclassified integrity error (sqlstate={sqlstate}): {message}")
    return ConstraintViolation(message, constraint)
