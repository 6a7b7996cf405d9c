from typing import Generic, TypeVar
from pydantic import BaseModel

from apicommons.domain.pageable import Pageable, SortDirection

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Generic paginated response schema."""

    items: list[T]
    total: int
    page: int
    size: int
    sort: str | None = None
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def of(cls, items: list[T], total: int, pageable: Pageable) -> "Page[T]":
        return cls(
            items=items,
            total=total,
            page=pageable.page,
            size=pageable.size,
            sort=pageable.sort,
            direction=pageable.direction,
        )
