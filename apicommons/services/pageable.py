from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from apicommons.domain.pageable import MAX_OFFSET, Pageable, SortDirection

PAGE_PARAM = "page"
SIZE_PARAM = "size"
SORT_PARAM = "sort"
DIRECTION_PARAM = "direction"

DEFAULT_PAGE = 0


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except (TypeError, ValueError, AttributeError):
        return None


@dataclass(frozen=True, slots=True)
class PageableExtractor:
    """Build a Pageable from raw query parameters.

    Malformed or missing values degrade to the configured defaults and sizes
    above ``max_size`` are clamped, so extraction never raises.
    """

    default_size: int = 20
    max_size: int = 100

    def __post_init__(self) -> None:
        if self.default_size < 1 or self.max_size < 1:
            raise ValueError("page sizes must be positive")
        if self.default_size > self.max_size:
            raise ValueError("default_size must not exceed max_size")

    def extract(self, params: Mapping[str, str]) -> Pageable:
        page = _parse_int(params.get(PAGE_PARAM))
        if page is None or page < 0:
            page = DEFAULT_PAGE

        size = _parse_int(params.get(SIZE_PARAM))
        if size is None or size < 1:
            size = self.default_size
        size = min(size, self.max_size)
        if page * size + size > MAX_OFFSET:
            page = DEFAULT_PAGE

        sort, sort_direction = self._parse_sort(params.get(SORT_PARAM))
        direction = SortDirection.parse(params.get(DIRECTION_PARAM))
        if direction is None:
            direction = sort_direction or SortDirection.ASC

        return Pageable(page=page, size=size, sort=sort, direction=direction)

    @staticmethod
    def _parse_sort(raw: str | None) -> tuple[str | None, SortDirection | None]:
        # Accepts "field" or "field,desc".
        if raw is None:
            return None, None
        field, _, suffix = raw.partition(",")
        field = field.strip()
        if not field:
            return None, None
        return field, SortDirection.parse(suffix) if suffix else None
