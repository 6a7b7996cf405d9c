from typing import Any

from apicommons.core.config import Settings
from apicommons.core.i18n import I18nKeys, Translator
from apicommons.schemas.error import ResponseError


def openapi_options(settings: Settings, translator: Translator) -> dict[str, Any]:
    """FastAPI constructor arguments for OpenAPI metadata and Swagger UI paths."""
    options: dict[str, Any] = {
        "title": settings.project_name,
        "version": settings.project_version,
        "description": settings.project_description,
        "docs_url": f"{settings.context_path}{settings.swagger_context_path}",
        "openapi_url": f"{settings.context_path}{settings.swagger_json_path}",
        "redoc_url": None,
        "swagger_ui_parameters": {"docExpansion": "none"},
        # Every operation documents ResponseError as its fallback response.
        "responses": {
            "default": {
                "model": ResponseError,
                "description": translator.resolve(
                    I18nKeys.error_unknow_server_error, settings.default_locale
                ),
            }
        },
    }
    if not (settings.is_dev() or settings.is_test()):
        options["docs_url"] = None
        options["openapi_url"] = None
    if settings.swagger_contact_name:
        options["contact"] = {"name": settings.swagger_contact_name}
    return options

