from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from apicommons.errors import FailureCategory, status_for

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome tagged with a failure category.

    `status` overrides the category's fixed status code and is only set for
    upstream HTTP failures; `details` carries their field-level messages.
    """

    category: FailureCategory
    message: str | None = None
    status: int | None = None
    details: dict[str, str] = field(default_factory=dict)

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def status_code(self) -> int:
        if self.category is FailureCategory.ERROR_RESPONSE and self.status is not None:
            return self.status
        return status_for(self.category)


Result = Union[Ok[T], Err]
