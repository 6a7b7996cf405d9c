"""Global exception handlers that map exceptions to ResponseError envelopes."""

import logging

import jwt
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apicommons.api.deps import get_error_builder, get_locale, get_settings
from apicommons.api.middleware import stamp_headers
from apicommons.api.responses import error_response
from apicommons.errors import ApiError
from apicommons.services.error_envelope import err_from_exception

logger = logging.getLogger(__name__)


def _envelope_response(request: Request, exc: Exception) -> JSONResponse:
    """
    Build the localized envelope for ``exc`` and log it by severity.

    Headers are stamped here as well: the catch-all handler runs outside the
    request middleware.
    """
    err = err_from_exception(exc)
    if err.status_code >= 500:
        logger.error("Exception occurred for req -> %s", request.url, exc_info=exc)
    else:
        logger.info("%s occurred for req -> %s", type(exc).__name__, request.url)
    status_code, body = get_error_builder(request).build(err, get_locale(request))
    headers = getattr(exc, "headers", None)
    return stamp_headers(error_response(status_code, body, headers), get_settings(request))


def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _envelope_response(request, exc)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _envelope_response(request, exc)


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _envelope_response(request, exc)


def invalid_token_handler(request: Request, exc: jwt.InvalidTokenError) -> JSONResponse:
    return _envelope_response(request, exc)


def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    return _envelope_response(request, exc)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _envelope_response(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register envelope handlers for every failure category on the app."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(jwt.InvalidTokenError, invalid_token_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
