"""Helpers for translating driver errors into domain exceptions."""

import re

from sqlalchemy.exc import IntegrityError

_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<columns>[^\n]+)")
_POSTGRES_KEY = re.compile(r"Key \((?P<columns>[^)]+)\)=")
_CONSTRAINT_NAME = re.compile(r'unique constraint "(?P<name>[^"]+)"')


def is_unique_violation(exc: IntegrityError) -> bool:
    text = str(exc.orig)
    return bool(
        _SQLITE_UNIQUE.search(text)
        or "duplicate key value" in text
        or "UniqueViolation" in type(exc.orig).__name__
    )


def conflicting_fields(exc: IntegrityError, fallback: list[str] | None = None) -> list[str]:
    """Column names named by a unique-constraint violation.

    Understands SQLite (``UNIQUE constraint failed: t.a, t.b``) and PostgreSQL
    (``Key (a, b)=(...)``) messages. Falls back to the constraint name, then
    to ``fallback``.
    """
    text = str(exc.orig)

    match = _SQLITE_UNIQUE.search(text)
    if match:
        return [col.strip().split(".")[-1] for col in match.group("columns").split(",")]

    match = _POSTGRES_KEY.search(text)
    if match:
        return [col.strip() for col in match.group("columns").split(",")]

    match = _CONSTRAINT_NAME.search(text)
    if match:
        return [match.group("name")]

    return list(fallback) if fallback else ["unknown field(s)"]
