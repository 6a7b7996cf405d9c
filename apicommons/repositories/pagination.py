from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import Query

from apicommons.domain.pageable import MAX_OFFSET, Pageable


def sort_column(model: type, field: str | None):
    """Return the mapped column attribute for a sort field, or None if unknown."""
    if not field:
        return None
    if field not in inspect(model).column_attrs:
        return None
    return getattr(model, field)


def apply_pageable(query: Query, pageable: Pageable, model: type) -> Query:
    """Apply ordering and offset/limit. Unknown sort fields are ignored."""
    column = sort_column(model, pageable.sort)
    if column is not None:
        query = query.order_by(column.desc() if pageable.is_descending else column.asc())
    return query.offset(pageable.offset).limit(pageable.limit)


def paginate(query: Query, pageable: Pageable, model: type) -> tuple[list[Any], int]:
    """
    Run a paginated query.

    Returns:
        (items, total) where total counts every row matching the unpaged query.
    """
    total = query.order_by(None).count()
    if pageable.offset + pageable.limit > MAX_OFFSET:
        return [], total
    items = apply_pageable(query, pageable, model).all()
    return items, total
