from fastapi import Request

from apicommons.core.config import Settings, settings as default_settings
from apicommons.core.constants import (
    ACCEPT_LANGUAGE_HEADER,
    AUTHORIZATION_HEADER,
    COOKIE,
    JWT_CLAIM_EMAIL_ATTR,
    JWT_CLAIM_ID_ATTR,
    JWT_SUBJECT_ATTR,
    SESSION_COOKIE,
    TENANT_KEY_HEADER,
)
from apicommons.core.i18n import Translator, locale_from_header
from apicommons.core.security import extract_bearer_token
from apicommons.domain.pageable import Pageable
from apicommons.errors import UnauthorizedError
from apicommons.services.error_envelope import ErrorEnvelopeBuilder
from apicommons.services.pageable import PageableExtractor


def get_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or default_settings


def get_translator(request: Request) -> Translator:
    translator = getattr(request.app.state, "translator", None)
    if translator is None:
        translator = Translator(default_locale=get_settings(request).default_locale)
    return translator


def get_error_builder(request: Request) -> ErrorEnvelopeBuilder:
    builder = getattr(request.app.state, "error_builder", None)
    return builder or ErrorEnvelopeBuilder(get_translator(request))


def get_pageable_extractor(request: Request) -> PageableExtractor:
    extractor = getattr(request.app.state, "pageable_extractor", None)
    if extractor is None:
        config = get_settings(request)
        extractor = PageableExtractor(
            default_size=config.default_page_size, max_size=config.max_page_size
        )
    return extractor


def get_locale(request: Request) -> str:
    """Locale negotiated from the Accept-Language header."""
    return locale_from_header(
        request.headers.get(ACCEPT_LANGUAGE_HEADER), get_translator(request)
    )


def get_pageable(request: Request) -> Pageable:
    """Pageable materialized by the request middleware, or extracted on demand."""
    pageable = getattr(request.state, "pageable", None)
    if isinstance(pageable, Pageable):
        return pageable
    return get_pageable_extractor(request).extract(request.query_params)


def get_tenant_id(request: Request) -> str | None:
    return request.headers.get(TENANT_KEY_HEADER)


def get_cookie(request: Request) -> str:
    """Request cookies rendered as a Cookie header value."""
    if not request.cookies:
        return ""
    return "; ".join(f"{name}={value}" for name, value in request.cookies.items())


def get_jwt(request: Request) -> str:
    """Raw bearer token from the Authorization header."""
    token = extract_bearer_token(request.headers.get(AUTHORIZATION_HEADER))
    if token is None:
        raise UnauthorizedError()
    return token


def _claim(request: Request, attr: str) -> str:
    value = getattr(request.state, attr, None)
    if value is None:
        raise UnauthorizedError()
    return str(value)


def get_jwt_principal(request: Request) -> str:
    return _claim(request, JWT_SUBJECT_ATTR)


# Alias kept for handlers that only care about "who is calling".
get_principal = get_jwt_principal


def get_jwt_id(request: Request) -> str:
    return _claim(request, JWT_CLAIM_ID_ATTR)


def get_jwt_email(request: Request) -> str:
    return _claim(request, JWT_CLAIM_EMAIL_ATTR)


def get_cookie_from_jwt(request: Request) -> dict[str, str]:
    """Session cookie header carrying the authenticated principal."""
    principal = get_jwt_principal(request)
    return {COOKIE: f"{SESSION_COOKIE}={principal};"}
