import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from apicommons.api.exception_handlers import register_exception_handlers
from apicommons.api.middleware import request_context_middleware
from apicommons.api.openapi import openapi_options
from apicommons.api.routers import admin
from apicommons.core.config import Settings, settings as default_settings
from apicommons.core.i18n import Translator
from apicommons.core.logging import configure_logging
from apicommons.services.error_envelope import ErrorEnvelopeBuilder
from apicommons.services.pageable import PageableExtractor

logger = logging.getLogger(__name__)


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        logger.info("Server is starting in %s", settings.stage.upper())
        logger.info("____________________________________________________")
        for name, value in settings.summary().items():
            logger.info("%s: %s", name, value)
        logger.info("____________________________________________________")
        yield
        logger.info("Server stopped")

    return lifespan


def create_app(
    settings: Settings | None = None,
    translator: Translator | None = None,
    configure: Callable[[FastAPI], None] | None = None,
) -> FastAPI:
    """
    Build a FastAPI app wired with the shared conventions.

    Args:
        settings: Application settings; the module-level settings by default.
        translator: Message catalogs for error envelopes.
        configure: Called with the app so the caller can include its own routers.
    """
    settings = settings or default_settings
    translator = translator or Translator(default_locale=settings.default_locale)
    configure_logging(settings)

    app = FastAPI(lifespan=_lifespan(settings), **openapi_options(settings, translator))
    app.state.settings = settings
    app.state.translator = translator
    app.state.error_builder = ErrorEnvelopeBuilder(translator)
    app.state.pageable_extractor = PageableExtractor(
        default_size=settings.default_page_size, max_size=settings.max_page_size
    )

    if settings.frontend_url:
        parsed = urlparse(settings.frontend_url)
        origins = [f"{parsed.scheme}://{parsed.netloc}"]
        allow_credentials = True
    else:
        origins = ["*"]
        allow_credentials = False
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)

    register_exception_handlers(app)
    app.include_router(admin.router, prefix=settings.context_path)
    if settings.is_dev():
        app.include_router(admin.overview_router, prefix=settings.context_path)

    if configure is not None:
        configure(app)
    return app
