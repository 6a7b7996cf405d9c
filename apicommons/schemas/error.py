"""Standardized error response schema."""

from pydantic import BaseModel, Field, field_validator


class ResponseError(BaseModel):
    """Error body keyed by failure category, each with its ordered messages."""

    errors: dict[str, list[str]] = Field(
        ..., description="Failure category mapped to human-readable messages"
    )

    @field_validator("errors")
    @classmethod
    def must_not_be_empty(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        if not v or not any(v.values()):
            raise ValueError("errors must contain at least one message")
        return v
