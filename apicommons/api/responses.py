"""Shortcuts for building JSON responses and envelope-shaped failures."""

from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from apicommons.core.constants import JSON_MIME
from apicommons.core.i18n import I18nKeys
from apicommons.domain.result import Err
from apicommons.errors import FailureCategory
from apicommons.schemas.error import ResponseError
from apicommons.services.error_envelope import ErrorEnvelopeBuilder, MessageResolver


def json_or_null(body: Any = None, status_code: int = status.HTTP_200_OK) -> Response:
    """JSON response for ``body``; ``None`` yields an empty JSON-typed body."""
    if body is None:
        return Response(content="", status_code=status_code, media_type=JSON_MIME)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def ok(body: Any = None) -> Response:
    return json_or_null(body, status.HTTP_200_OK)


def created(body: Any = None) -> Response:
    return json_or_null(body, status.HTTP_201_CREATED)


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def error_response(
    status_code: int, body: ResponseError, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Return a ResponseError body with the given status."""
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def _single_error(
    translator: MessageResolver,
    locale: str | None,
    category: FailureCategory,
    message: str | None,
    default_key: str,
) -> ResponseError:
    text = ErrorEnvelopeBuilder(translator).localize(message or default_key, locale)
    return ResponseError(errors={category.value: [text]})


def bad_request(
    translator: MessageResolver, locale: str | None = None, message: str | None = None
) -> JSONResponse:
    body = _single_error(
        translator, locale, FailureCategory.BAD_REQUEST, message, I18nKeys.error_bad_request
    )
    return error_response(status.HTTP_400_BAD_REQUEST, body)


def bad_credentials(
    translator: MessageResolver, locale: str | None = None, message: str | None = None
) -> JSONResponse:
    body = _single_error(
        translator,
        locale,
        FailureCategory.UNAUTHORIZED,
        message,
        I18nKeys.error_bad_credentials,
    )
    return error_response(status.HTTP_401_UNAUTHORIZED, body)


def failure_with(
    err: Err | None, translator: MessageResolver, locale: str | None = None
) -> JSONResponse:
    """
    Render a service-level failure.

    Unauthorized failures become bad credentials; every other failure is
    reported as a bad request, carrying its message when there is one.
    """
    if err is None:
        return bad_request(translator, locale)
    if err.category == FailureCategory.UNAUTHORIZED:
        return bad_credentials(translator, locale, err.message)
    if err.message and err.message.strip():
        return bad_request(translator, locale, err.message)
    return bad_request(translator, locale)
