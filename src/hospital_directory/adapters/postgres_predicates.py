"""SQL building blocks shared by the PostgreSQL repositories."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, func, literal, select


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_ci(column: Any, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match (ILIKE '%term%') with wildcards escaped."""
    return column.ilike(f"%{escape_like(term)}%", escape="\\")


def array_overlaps(column: Any, values: tuple[str, ...]) -> ColumnElement[bool]:
    """Set intersection: any of ``values`` present in the array column (&&)."""
    return column.overlap(list(values))


def array_has_ci(column: Any, term: str) -> ColumnElement[bool]:
    """True when some element of the array column equals ``term`` ignoring case."""
    elements = func.unnest(column).table_valued("element")
    return (
        select(literal(1))
        .select_from(elements)
        .where(func.lower(elements.c.element) == term.lower())
        .exists()
    )
