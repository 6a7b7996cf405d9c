from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Largest offset a signed 64-bit SQL integer column can take.
MAX_OFFSET = 2**63 - 1


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortDirection | None":
        """Case-insensitive lookup; returns None for anything unrecognized."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Pageable:
    """A single page request.

    `page` is zero-based. `offset`/`limit` are the view the ORM layer uses.
    """

    page: int = 0
    size: int = 20
    sort: str | None = None
    direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size

    @property
    def is_descending(self) -> bool:
        return self.direction is SortDirection.DESC
