"""
Basic test to verify the application wiring.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app, create_app
from app.config.settings import Settings, get_settings
from app.core.dependencies import ServiceContainer


def test_app_creation():
    """Test that the FastAPI app can be created successfully."""
    assert app is not None
    assert app.title == get_settings().app_name


def test_routes_registered():
    routed = create_app()
    assert routed.url_path_for("root") == "/"
    assert routed.url_path_for("health_check") == "/health"
    assert routed.url_path_for("ai_chat") == "/ai-chat"
    assert routed.url_path_for("voice_agent") == "/voice-agent"


def test_root_endpoint():
    """Test the root endpoint returns expected response."""
    client = TestClient(app)
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert data["version"] == get_settings().app_version
    assert "X-Request-ID" in response.headers


def test_request_id_is_echoed():
    client = TestClient(app)
    response = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_health_endpoint_with_lifespan():
    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] in {"healthy", "degraded"}
    assert "configured" in data["ai_gateway"]
    assert data["knowledge_base"]["cache_age_seconds"] is None


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.chat_history_window == 6
    assert settings.ai_gateway.chat_max_tokens == 500
    assert settings.ai_gateway.chat_temperature == 0.7
    assert settings.knowledge.cache_ttl_seconds == 300
    assert settings.get_cors_config()["allow_origins"] == ["*"]


def test_api_key_read_from_legacy_variable(monkeypatch):
    monkeypatch.setenv("LOVABLE_API_KEY", "from-env")
    monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
    assert Settings(_env_file=None).ai_gateway.api_key == "from-env"


def test_cors_origins_from_csv(monkeypatch):
    monkeypatch.setenv("SECURITY_CORS_ORIGINS", "https://a.example, https://b.example")
    settings = Settings(_env_file=None)
    assert settings.security.cors_origins == ["https://a.example", "https://b.example"]


@pytest.mark.asyncio
async def test_service_container_lifecycle():
    container = ServiceContainer(Settings(_env_file=None))
    await container.initialize_services()
    try:
        assert container.is_initialized
        assert container.get_chat_service() is not None
        assert container.get_voice_agent_service() is not None
    finally:
        await container.cleanup_services()

    assert not container.is_initialized
    with pytest.raises(RuntimeError):
        container.get_chat_service()


if __name__ == "__main__":
    pytest.main([__file__])
