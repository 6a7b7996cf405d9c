from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from apicommons.api.deps import get_settings
from apicommons.core.config import Settings
from apicommons.core.constants import JSON_MIME, OVERVIEW_PATH, TEXT_PLAIN_MIME

router = APIRouter(tags=["admin"])


@router.get(
    "/ping",
    response_class=PlainTextResponse,
    responses={200: {"content": {TEXT_PLAIN_MIME: {"example": "pong!"}}}},
)
def ping():
    return "pong!"


@router.get(
    "/admin/info",
    responses={200: {"content": {JSON_MIME: {"example": {"status": "up!"}}}}},
)
def info(config: Settings = Depends(get_settings)):
    """Liveness and build information."""
    return {
        "status": "up!",
        "name": config.project_name,
        "version": config.project_version,
        "stage": config.stage,
    }


overview_router = APIRouter(tags=["admin"])

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@overview_router.get(OVERVIEW_PATH, include_in_schema=False)
def route_overview(request: Request):
    """
    List the documented routes. Only mounted in development.

    Built from the OpenAPI schema so routes added through nested
    ``include_router`` calls are listed too.
    """
    paths = request.app.openapi().get("paths", {})
    return [
        {
            "path": path,
            "methods": sorted(m.upper() for m in operations if m in HTTP_METHODS),
            "name": next(
                (operations[m].get("operationId") for m in operations if m in HTTP_METHODS),
                None,
            ),
        }
        for path, operations in paths.items()
    ]
