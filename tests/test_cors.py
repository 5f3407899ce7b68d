"""Tests for the CORS middleware."""

import pytest

from tareas_api.middleware import CORS_HEADERS

TASKS_URL = "/api/v1/tareas"


def assert_cors_headers(response):
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type"


class TestPreflight:
    """Test OPTIONS requests are answered by the middleware."""

    @pytest.mark.parametrize("path", [TASKS_URL, f"{TASKS_URL}/1", f"{TASKS_URL}/abc", "/health", "/no/such/route"])
    def test_options_any_path(self, client, store, path):
        response = client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert_cors_headers(response)
        assert store.count() == 0

    def test_browser_preflight(self, client):
        response = client.options(
            TASKS_URL,
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.content == b""
        assert_cors_headers(response)

    def test_options_with_body_does_not_create(self, client, store):
        response = client.request("OPTIONS", TASKS_URL, json={"titulo": "ignored"})

        assert response.status_code == 200
        assert store.count() == 0
        assert client.get(TASKS_URL).json() == []


class TestCorsHeaders:
    """Test every response carries the CORS headers."""

    def test_header_values(self):
        assert CORS_HEADERS == {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        }

    def test_success_responses(self, client):
        assert_cors_headers(client.get("/health"))
        assert_cors_headers(client.get(TASKS_URL))
        assert_cors_headers(client.post(TASKS_URL, json={"titulo": "t"}))
        assert_cors_headers(client.put(f"{TASKS_URL}/1", json={"titulo": "u"}))
        assert_cors_headers(client.delete(f"{TASKS_URL}/1"))

    def test_error_responses(self, client):
        assert_cors_headers(client.get(f"{TASKS_URL}/abc"))
        assert_cors_headers(client.get(f"{TASKS_URL}/1"))
        assert_cors_headers(client.post(TASKS_URL, json={}))
        assert_cors_headers(client.get("/no/such/route"))

    def test_internal_error_response(self, app, store, monkeypatch):
        from fastapi.testclient import TestClient

        def broken():
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(store, "list_all", broken)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(TASKS_URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Error interno del servidor"}
        assert_cors_headers(response)
