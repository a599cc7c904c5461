"""
Health, not-found and request context tests
"""
import pytest
from fastapi.testclient import TestClient

from exam_relay.main import create_app


class TestHealth:
    """GET /health"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "Server is running!"}


class TestNotFound:
    """Catch-all 404"""

    @pytest.mark.parametrize("method,path", [
        ("GET", "/nope"),
        ("POST", "/api/exams/unknown"),
        ("GET", "/api/exams/generate"),
        ("DELETE", "/generate-exam"),
        ("POST", "/health"),
    ])
    def test_unknown_route(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_not_found_logged(self, client, capture_logs):
        client.get("/missing/page")

        records = [r for r in capture_logs.records if r.getMessage() == "not_found"]
        assert len(records) == 1
        assert records[0].method == "GET"
        assert records[0].path == "/missing/page"


class TestRequestContext:
    """X-Request-Id handling"""

    def test_request_id_generated(self, client):
        response = client.get("/health")

        assert response.headers.get("X-Request-Id")

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-Id": "req-123"})

        assert response.headers["X-Request-Id"] == "req-123"
        assert "X-Request-Id" in response.headers["Access-Control-Expose-Headers"]

    def test_request_id_on_errors(self, client):
        response = client.post(
            "/api/exams/generate",
            json={"topic": "Addition", "questionCount": 0},
            headers={"X-Request-Id": "req-400"},
        )

        assert response.status_code == 400
        assert response.headers["X-Request-Id"] == "req-400"


class TestUnhandledError:
    """Catch-all 500"""

    def test_unexpected_exception(self, test_settings, gemini_client, capture_logs):
        app = create_app(test_settings, gemini_client)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error."}
        assert "kaboom" not in response.text

        records = [r for r in capture_logs.records if r.getMessage() == "unhandled_exception"]
        assert len(records) == 1
        assert records[0].error_code == "INTERNAL_ERROR"
        assert records[0].error_type == "RuntimeError"
