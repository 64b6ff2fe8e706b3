"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError, column: str) -> bool:
    """
    Check whether an IntegrityError is a unique violation on ``column``.

    SQLite reports ``UNIQUE constraint failed: table.column``, PostgreSQL
    reports the constraint name plus ``Key (column)=...``; both mention the
    column name.
    """
    message = str(error.orig if error.orig is not None else error).lower()
    is_unique = "unique" in message or "duplicate key" in message
    return is_unique and column.lower() in message


LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Build a LIKE pattern matching ``text`` literally anywhere in a value."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"
