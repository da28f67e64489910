"""Application wiring: health, docs, CORS, error bodies and settings."""

from __future__ import annotations

import logging

from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.core.logging_config import setup_logging
from catalog_api.app.main import create_app


def test_health_reports_ok(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["uptime"] >= 0
    assert body["timestamp"]


def test_openapi_document_describes_both_collections(client: TestClient) -> None:
    document = client.get("/api/openapi.json").json()

    assert document["info"]["title"] == "Catalog API"
    assert {tag["name"] for tag in document["tags"]} == {"users", "products"}
    paths = document["paths"]
    assert {"get", "post"} <= paths["/api/users/"].keys()
    assert {"get", "put", "patch", "delete"} <= paths["/api/users/{user_id}"].keys()
    assert "patch" in paths["/api/products/{product_id}/stock"]
    schemas = document["components"]["schemas"]
    assert "isAvailable" in schemas["Product"]["properties"]
    assert set(schemas["ProductCategory"]["enum"]) == {
        "electronics",
        "clothing",
        "books",
        "home",
        "sports",
        "toys",
        "other",
    }


def test_swagger_ui_is_served(client: TestClient) -> None:
    response = client.get("/api-docs")

    assert response.status_code == 200
    assert "swagger" in response.text.lower()


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    response = client.get("/api/orders/")

    assert response.status_code == 404
    assert response.json()["path"] == "/api/orders/"


def test_cors_preflight_is_answered(client: TestClient) -> None:
    response = client.options(
        "/api/users/",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in {"*", "http://example.com"}


def test_unexpected_errors_become_500(settings: Settings, caplog) -> None:
    app = create_app(settings=settings)

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as client:
        with caplog.at_level(logging.ERROR):
            response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["message"] == "Internal server error"
    assert "Unhandled error on GET /boom" in caplog.text


def test_seeded_app_serves_demo_records() -> None:
    app = create_app(settings=Settings(seed_data=True))

    with TestClient(app) as client:
        emails = [u["email"] for u in client.get("/api/users/").json()]
        skus = [p["sku"] for p in client.get("/api/products/").json()]

    assert emails == ["admin@example.com", "john.doe@example.com"]
    assert skus == ["WH-001", "RS-001", "BK-001"]


def test_custom_prefix_moves_the_routes() -> None:
    app = create_app(settings=Settings(seed_data=False, api_prefix="/v2"))

    with TestClient(app) as client:
        assert client.get("/v2/users/").json() == []
        assert client.get("/api/users/").status_code == 404


def test_cors_origin_list_parses_commas() -> None:
    settings = Settings(cors_origins="http://a.test, http://b.test,,")

    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


def test_setup_logging_writes_to_file(tmp_path, monkeypatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "logs" / "catalog.log"

    setup_logging("debug", str(logfile))
    logging.getLogger("catalog_api.test").debug("hello from the test")
    for handler in root.handlers:
        handler.flush()
        handler.close()

    assert root.level == logging.DEBUG
    assert "[DEBUG] catalog_api.test: hello from the test" in logfile.read_text(encoding="utf-8")
