from fastapi import Request, Response

from apicommons.api.deps import get_pageable_extractor, get_settings
from apicommons.core.config import Settings
from apicommons.core.constants import (
    API_VERSION_HEADER,
    AUTHORIZATION_HEADER,
    JWT_CLAIM_ATTRS,
    SERVER_HEADER,
)
from apicommons.core.security import decode_token, extract_bearer_token


def stamp_headers(response: Response, config: Settings) -> Response:
    """Add the server and API version headers every response carries."""
    response.headers[SERVER_HEADER] = f"Powered by {config.powered_by}"
    response.headers[API_VERSION_HEADER] = config.project_version
    return response


def bind_jwt_claims(request: Request) -> None:
    """Copy the verified bearer token's claims onto ``request.state``."""
    token = extract_bearer_token(request.headers.get(AUTHORIZATION_HEADER))
    if token is None:
        return
    payload = decode_token(token, get_settings(request))
    if payload is None:
        return
    for claim, attr in JWT_CLAIM_ATTRS.items():
        if payload.get(claim) is not None:
            setattr(request.state, attr, str(payload[claim]))


async def request_context_middleware(request: Request, call_next):
    """Materialize per-request context before routing and stamp response headers."""
    request.state.pageable = get_pageable_extractor(request).extract(request.query_params)
    bind_jwt_claims(request)

    response = await call_next(request)
    return stamp_headers(response, get_settings(request))
