"""Shared query helpers for services."""
from sqlalchemy import ColumnElement, func
from sqlalchemy.ext.asyncio import AsyncSession


def validate_search_term(term: str | None) -> str:
    """
    Reject blank search terms.

    The term is returned unchanged (not trimmed) so that leading or trailing
    spaces remain part of the substring being searched for.

    Raises:
        ValueError: If the term is None, empty, or whitespace only.
    """
    if term is None or not term.strip():
        raise ValueError("Search term is required")
    return term


def contains_case_sensitive(
    db: AsyncSession,
    column: ColumnElement[str],
    term: str,
) -> ColumnElement[bool]:
    """
    Build a case-sensitive substring predicate for the session's dialect.

    LIKE is case-insensitive on SQLite, so the position functions are used
    instead: strpos() on PostgreSQL, instr() elsewhere. Neither treats % or _
    specially, so no escaping is needed.
    """
    dialect_name = db.get_bind().dialect.name
    if dialect_name == "postgresql":
        return func.strpos(column, term) > 0
    return func.instr(column, term) > 0
