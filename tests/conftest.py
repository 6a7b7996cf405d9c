import os

# Set environment variables BEFORE any imports that might use settings
os.environ["STAGE"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"

import jwt
import pytest
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from apicommons.api.deps import (
    get_cookie,
    get_cookie_from_jwt,
    get_jwt,
    get_jwt_email,
    get_jwt_id,
    get_jwt_principal,
    get_pageable,
    get_principal,
    get_tenant_id,
)
from apicommons.api.factory import create_app
from apicommons.core.config import Settings
from apicommons.core.i18n import Translator
from apicommons.core.security import create_access_token
from apicommons.domain.pageable import Pageable
from apicommons.errors import (
    BadRequestError,
    ForbiddenError,
    HttpResponseError,
    NotFoundError,
    UnauthorizedError,
    UnknownObjectError,
)

ERRORS = {
    "bad_request": lambda: BadRequestError(),
    "unauthorized": lambda: UnauthorizedError(),
    "forbidden": lambda: ForbiddenError(),
    "not_found": lambda: NotFoundError("Widget not found"),
    "unknown_object": lambda: UnknownObjectError(),
    "upstream": lambda: HttpResponseError(409, "conflict upstream", {"email": "already taken"}),
    "runtime": lambda: RuntimeError("boom"),
    "sql": lambda: SQLAlchemyError("database unavailable"),
    "security": lambda: jwt.ExpiredSignatureError("Signature has expired"),
}


def _test_routes(app: FastAPI) -> None:
    router = APIRouter()

    @router.get("/items")
    def list_items(pageable: Pageable = Depends(get_pageable)):
        return pageable

    @router.get("/errors/{kind}")
    def raise_error(kind: str):
        raise ERRORS[kind]()

    @router.get("/numbers/{number}")
    def get_number(number: int):
        return {"number": number}

    @router.get("/me")
    def me(
        principal: str = Depends(get_jwt_principal),
        user_id: str = Depends(get_jwt_id),
        email: str = Depends(get_jwt_email),
        token: str = Depends(get_jwt),
        cookie: dict = Depends(get_cookie_from_jwt),
    ):
        return {
            "principal": principal,
            "id": user_id,
            "email": email,
            "token": token,
            "cookie": cookie,
        }

    @router.get("/whoami")
    def whoami(principal: str = Depends(get_principal)):
        return {"principal": principal}

    @router.get("/context")
    def context(
        tenant: str | None = Depends(get_tenant_id),
        cookie: str = Depends(get_cookie),
    ):
        return {"tenant": tenant, "cookie": cookie}

    app.include_router(router)


@pytest.fixture(scope="function")
def settings() -> Settings:
    return Settings(
        stage="test",
        secret_key="test-secret-key-min-32-characters-long-for-testing",
        project_name="apicommons-test",
        project_version="1.2.3",
        powered_by="apicommons",
        default_page_size=20,
        max_page_size=100,
        default_locale="en",
    )


@pytest.fixture(scope="function")
def translator() -> Translator:
    return Translator(default_locale="en")


@pytest.fixture(scope="function")
def app(settings: Settings, translator: Translator) -> FastAPI:
    return create_app(settings, translator, configure=_test_routes)


@pytest.fixture(scope="function")
def client(app: FastAPI):
    """Test client that returns 500 responses instead of re-raising."""
    yield TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def user_token(settings: Settings) -> str:
    """Get JWT token for a test user."""
    return create_access_token(
        data={"sub": "alice", "id": 7, "email": "alice@example.com"}, settings=settings
    )
