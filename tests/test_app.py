# =============================================================================
# tests/test_app.py - Application, Config and Health Tests
# =============================================================================

from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import build_config_service, build_user_service
from app.main import create_app
from core.repositories import InMemoryUserRepository
from core.services.config_service import AppConfig


class TestSettings:
    """Test Settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.delenv("FEATURE_FLAG", raising=False)

        loaded = Settings(_env_file=None)

        assert loaded.API_KEY == "default-api-key"
        assert loaded.FEATURE_FLAG is True

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "from-env")

        assert Settings(_env_file=None).API_KEY == "from-env"

    def test_app_config(self):
        loaded = Settings(_env_file=None, API_KEY="k", FEATURE_FLAG=False)

        assert loaded.app_config == AppConfig(api_key="k", feature_flag=False)

    def test_cors_origins_list(self):
        loaded = Settings(_env_file=None, CORS_ORIGINS="http://a.com, https://b.com")

        assert loaded.cors_origins_list == ["http://a.com", "https://b.com"]


class TestCompositionRoot:
    """Test service construction."""

    def test_default_repository_is_in_memory(self):
        service = build_user_service()
        assert isinstance(service.repository, InMemoryUserRepository)

    def test_uses_given_repository(self, repository):
        assert build_user_service(repository).repository is repository

    def test_config_service(self):
        loaded = Settings(_env_file=None, API_KEY="k")
        config = build_config_service(loaded).get_config()

        assert config.api_key == "k"


class TestHealth:
    """Test health endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["feature_flag"] is True
        assert "api_key" not in body

    def test_ready_reports_user_count(self, client):
        client.post("/user", json={"name": "Alice"})

        body = client.get("/health/ready").json()

        assert body["status"] == "ready"
        assert body["user_count"] == 1

    def test_live(self, client):
        assert client.get("/health/live").json()["status"] == "alive"

    def test_root(self, client):
        body = client.get("/").json()

        assert body["name"] == "User API"
        assert body["health"] == "/health"


class TestHealthBeforeStartup:
    """Health endpoints when the lifespan has not run."""

    def test_ready_degraded(self):
        # Without the context manager the lifespan never runs
        client = TestClient(create_app())

        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "degraded"
        assert body["user_service"] == "missing"
        assert body["user_count"] is None

    def test_health_service_not_ready(self):
        client = TestClient(create_app())

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["code"] == "SERVICE_NOT_READY"
        assert response.json()["details"] == {"service": "config_service"}
