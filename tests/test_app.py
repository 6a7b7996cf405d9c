from fastapi.testclient import TestClient

from apicommons.api.factory import create_app


def test_ping(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.text == "pong!"
    assert response.headers["content-type"].startswith("text/plain")


def test_admin_info(client):
    response = client.get("/admin/info")
    assert response.status_code == 200
    assert response.json() == {
        "status": "up!",
        "name": "apicommons-test",
        "version": "1.2.3",
        "stage": "test",
    }


def test_response_headers(client):
    response = client.get("/ping")
    assert response.headers["server"] == "Powered by apicommons"
    assert response.headers["x-api-version"] == "1.2.3"


def test_error_responses_carry_headers(client):
    for path, status_code in [("/errors/not_found", 404), ("/errors/runtime", 500)]:
        response = client.get(path)
        assert response.status_code == status_code
        assert response.headers["server"] == "Powered by apicommons"
        assert response.headers["x-api-version"] == "1.2.3"


def test_tenant_and_cookie_context(client):
    client.cookies.set("theme", "dark")
    client.cookies.set("lang", "pt")
    response = client.get("/context", headers={"X-Tenant-Id": "acme"})
    assert response.status_code == 200
    data = response.json()
    assert data["tenant"] == "acme"
    assert set(data["cookie"].split("; ")) == {"theme=dark", "lang=pt"}


def test_context_without_tenant_or_cookies(client):
    response = client.get("/context")
    assert response.json() == {"tenant": None, "cookie": ""}


def test_openapi_documents_error_envelope(client):
    response = client.get("/swagger-docs")
    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "apicommons-test"
    assert schema["info"]["version"] == "1.2.3"
    assert "ResponseError" in schema["components"]["schemas"]
    ping = schema["paths"]["/ping"]["get"]
    assert ping["responses"]["default"]["description"] == "unknown server error"


def test_swagger_ui_is_served(client):
    assert client.get("/swagger-ui").status_code == 200


def test_docs_are_disabled_in_production(settings):
    app = create_app(settings.model_copy(update={"stage": "production"}))
    client = TestClient(app)
    assert client.get("/swagger-docs").status_code == 404
    assert client.get("/swagger-ui").status_code == 404


def test_overview_only_in_development(client, settings):
    assert client.get("/overview").status_code == 404

    dev_client = TestClient(create_app(settings.model_copy(update={"stage": "development"})))
    response = dev_client.get("/overview")
    assert response.status_code == 200
    routes = {route["path"]: route for route in response.json()}
    assert routes["/ping"]["methods"] == ["GET"]
    assert routes["/admin/info"]["methods"] == ["GET"]
    assert "/overview" not in routes


def test_context_path_prefixes_routes(settings):
    app = create_app(settings.model_copy(update={"context_path": "/api"}))
    client = TestClient(app)
    assert client.get("/api/ping").text == "pong!"
    assert client.get("/api/swagger-docs").status_code == 200
    assert client.get("/ping").status_code == 404


def test_lifespan_runs(app, caplog):
    with caplog.at_level("INFO", logger="apicommons"):
        with TestClient(app) as client:
            assert client.get("/ping").status_code == 200
    assert any("Server is starting in TEST" in r.getMessage() for r in caplog.records)
