from app.config.loader import ConfigLoader
from app.config.settings import Environment


def test_missing_env_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = ConfigLoader.load_environment_config("staging")
    assert settings.environment == Environment.STAGING


def test_sample_file_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = ConfigLoader.create_sample_env_file("testing")

    content = (tmp_path / path).read_text(encoding="utf-8")
    assert "LOVABLE_API_KEY=" in content
    assert "SUPABASE_URL=" in content
    # Samples are not listed as usable environments
    assert ConfigLoader.get_available_environments() == []


def test_available_and_validated_environments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
    monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
    (tmp_path / ".env.development").write_text("DEBUG=true\n", encoding="utf-8")
    (tmp_path / ".env.production").write_text("DEBUG=false\n", encoding="utf-8")

    assert ConfigLoader.get_available_environments() == ["development", "production"]
    assert ConfigLoader.validate_environment_config("development") is True
    # Production needs the gateway key
    assert ConfigLoader.validate_environment_config("production") is False
    assert ConfigLoader.validate_environment_config("nonsense") is False


def test_env_file_reaches_nested_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
    monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
    (tmp_path / ".env.production").write_text(
        "LOVABLE_API_KEY=prod-key\nKNOWLEDGE_CACHE_TTL_SECONDS=60\n", encoding="utf-8"
    )

    settings = ConfigLoader.load_environment_config("production")

    assert settings.ai_gateway.api_key == "prod-key"
    assert settings.knowledge.cache_ttl_seconds == 60
    assert ConfigLoader.validate_environment_config("production") is True
