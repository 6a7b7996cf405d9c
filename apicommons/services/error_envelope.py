"""Translate failures into localized ``ResponseError`` envelopes."""

from __future__ import annotations

import logging
from typing import Protocol

import jwt
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apicommons.core.i18n import I18nKeys
from apicommons.domain.result import Err
from apicommons.errors import (
    DETAILS_LABEL,
    ApiError,
    FailureCategory,
    HttpResponseError,
    category_for_status,
)
from apicommons.schemas.error import ResponseError

logger = logging.getLogger(__name__)


class MessageResolver(Protocol):
    def resolve(self, key: str, locale: str | None = None) -> str: ...


DEFAULT_MESSAGE_KEYS: dict[FailureCategory, str] = {
    FailureCategory.BAD_REQUEST: I18nKeys.error_bad_request,
    FailureCategory.UNAUTHORIZED: I18nKeys.error_user_not_authenticated,
    FailureCategory.FORBIDDEN: I18nKeys.error_user_not_authenticated,
    FailureCategory.NOT_FOUND: I18nKeys.error_not_found_server_error,
    FailureCategory.UNKNOWN_OBJECT: I18nKeys.error_unknow_object_server_error,
    FailureCategory.SECURITY_EXCEPTION: I18nKeys.error_user_not_authenticated,
    FailureCategory.INTERNAL_SERVER_ERROR: I18nKeys.error_internal_server_error,
    FailureCategory.ERROR_RESPONSE: I18nKeys.error_unknow_server_error,
}


def _message_of(exc: BaseException) -> str | None:
    if isinstance(exc, ApiError):
        return exc.message
    if isinstance(exc, StarletteHTTPException):
        return exc.detail if isinstance(exc.detail, str) else None
    text = str(exc)
    return text or None


def err_from_exception(exc: BaseException) -> Err:
    """Classify an exception into a tagged failure."""
    if isinstance(exc, HttpResponseError):
        return Err(
            category=FailureCategory.ERROR_RESPONSE,
            message=exc.message,
            status=exc.status_code,
            details=exc.details,
        )
    if isinstance(exc, ApiError):
        return Err(category=exc.category, message=exc.message)
    if isinstance(exc, jwt.InvalidTokenError):
        return Err(FailureCategory.SECURITY_EXCEPTION, _message_of(exc))
    if isinstance(exc, RequestValidationError):
        messages = [
            f"{'.'.join(str(p) for p in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in exc.errors()
        ]
        return Err(FailureCategory.BAD_REQUEST, "; ".join(messages) or None)
    if isinstance(exc, StarletteHTTPException):
        category = category_for_status(exc.status_code)
        if category is FailureCategory.INTERNAL_SERVER_ERROR and exc.status_code != 500:
            # e.g. 405/409: keep the framework's status under the relay category
            return Err(
                FailureCategory.ERROR_RESPONSE, _message_of(exc), status=exc.status_code
            )
        return Err(category, _message_of(exc))
    return Err(FailureCategory.INTERNAL_SERVER_ERROR, _message_of(exc))


class ErrorEnvelopeBuilder:
    """
    Build ``(status, ResponseError)`` pairs from tagged failures.

    The localized text always comes first. When the raw message differs from
    its localization, the raw message follows it so diagnostic detail is not
    lost. The builder is total: translation failures fall back to the raw key.
    """

    def __init__(self, translator: MessageResolver):
        self.translator = translator

    def localize(self, key: str, locale: str | None) -> str:
        try:
            resolved = self.translator.resolve(key, locale)
        except Exception:
            logger.exception("Translation lookup failed for key %r", key)
            return key
        return resolved if isinstance(resolved, str) and resolved else key

    def messages(self, err: Err, locale: str | None) -> list[str]:
        category = _category(err)
        raw = err.message if isinstance(err.message, str) and err.message.strip() else None
        key = raw or DEFAULT_MESSAGE_KEYS[category]
        localized = self.localize(key, locale)
        messages = [localized]
        if raw is not None and raw != localized:
            messages.append(raw)
        return messages

    def build(self, err: Err, locale: str | None = None) -> tuple[int, ResponseError]:
        category = _category(err)
        errors: dict[str, list[str]] = {category.value: self.messages(err, locale)}
        if category is FailureCategory.ERROR_RESPONSE:
            errors[DETAILS_LABEL] = [str(v) for v in (err.details or {}).values()]
        return err.status_code, ResponseError.model_construct(errors=errors)


def _category(err: Err) -> FailureCategory:
    try:
        return FailureCategory(err.category)
    except ValueError:
        return FailureCategory.INTERNAL_SERVER_ERROR
