"""
Tests for Application Setup

Health and root endpoints, startup seeding and settings validation.
"""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from pydantic import ValidationError

from book_catalog import main
from book_catalog.config import Settings
from book_catalog.main import app


class TestHealth:
    """Tests for GET /health and GET /."""

    def test_health_check(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["catalog"]["books"] == 6
        assert data["catalog"]["reviews"] == 3

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["docs"] == "/docs"


class TestLifespan:
    """Tests for store creation at startup."""

    def test_startup_seeds_store(self):
        """Without overrides, routes use the store created by the lifespan."""
        with TestClient(app) as test_client:
            response = test_client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 6

    def test_each_startup_gets_a_fresh_store(self):
        with TestClient(app) as test_client:
            test_client.post(
                "/api/v1/books/1/reviews", json={"username": "U", "rating": 1}
            )
            assert test_client.get("/api/v1/books/1").json()["rating"] == 3.3

        with TestClient(app) as test_client:
            assert test_client.get("/api/v1/books/1").json()["rating"] == 4.5


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_version == "v1"
        assert settings.similar_books_limit == 4
        assert settings.featured_books_limit == 5

    def test_log_level_uppercased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="qa")

    def test_is_production(self):
        assert Settings(_env_file=None, environment="Production").is_production
        assert not Settings(_env_file=None).is_production

    def test_allowed_origins_list(self):
        settings = Settings(
            _env_file=None, allowed_origins="http://a.test, http://b.test,"
        )

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]


class TestErrorHandler:
    """Tests for the catch-all exception handler."""

    @staticmethod
    def _failing_client(monkeypatch, **overrides) -> TestClient:
        monkeypatch.setattr(main, "settings", Settings(_env_file=None, **overrides))
        failing_app = main.create_app()

        @failing_app.get("/fail")
        def fail():
            raise RuntimeError("catalog exploded")

        return TestClient(failing_app, raise_server_exceptions=False)

    def test_details_hidden_by_default(self, monkeypatch):
        response = self._failing_client(monkeypatch).get("/fail")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "An internal error occurred."}

    def test_details_shown_in_debug(self, monkeypatch):
        response = self._failing_client(monkeypatch, debug=True).get("/fail")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "catalog exploded"}

    def test_details_hidden_in_production_even_in_debug(self, monkeypatch):
        response = self._failing_client(
            monkeypatch, debug=True, environment="production"
        ).get("/fail")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "An internal error occurred."}
