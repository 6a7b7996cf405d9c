import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from apicommons.errors import BadRequestError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _type_name(item_type: Any) -> str:
    return getattr(item_type, "__name__", str(item_type))


def body_as_list(body: bytes | str, item_type: type[T]) -> list[T] | None:
    """Decode a JSON array into ``list[item_type]``; returns None if it does not fit."""
    try:
        return TypeAdapter(list[item_type]).validate_json(body)
    except ValidationError as e:
        logger.error("Failed to deserialize body to list[%s]: %s", _type_name(item_type), e)
        return None


def body_as_list_or_raise(body: bytes | str, item_type: type[T]) -> list[T]:
    items = body_as_list(body, item_type)
    if items is None:
        raise BadRequestError(f"Couldn't deserialize body to {_type_name(item_type)}")
    return items


def parse_param_id(value: Any, id_type: type[T] = int) -> T:
    """Validate a path identifier, raising BadRequestError when it does not parse."""
    try:
        return TypeAdapter(id_type).validate_python(value)
    except ValidationError:
        raise BadRequestError(f"Invalid id: {value}")
