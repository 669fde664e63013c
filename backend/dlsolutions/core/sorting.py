"""Shared sorting helper for repository queries."""

from __future__ import annotations

from sqlalchemy import asc, desc
from sqlalchemy.orm import Query

from dlsolutions.core.database import Base


def apply_order_by(
    query: Query,  # type: ignore[type-arg]
    model: type[Base],
    sort_by: str | None,
    sort_order: str | None = None,
    default_field: str = "created_at",
    default_direction: str = "desc",
) -> Query:  # type: ignore[type-arg]
    """Order ``query`` by ``sort_by``/``sort_order``.

    Unknown columns fall back to ``default_field``; anything other than
    ``"asc"``/``"desc"`` falls back to ``default_direction``.
    """
    field = default_field
    direction = default_direction

    if sort_by and sort_by in model.__table__.columns:
        field = sort_by
        direction = sort_order if sort_order in ("asc", "desc") else "asc"
    elif sort_order in ("asc", "desc"):
        direction = sort_order

    column = getattr(model, field)
    order_func = asc if direction == "asc" else desc
    return query.order_by(order_func(column))
