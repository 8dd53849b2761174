"""Tests for environment-driven server and client configuration."""

import pytest

from config import client as client_config
from config import server as server_config
from core.config import Settings
from core.exceptions import ConfigurationError
from core.utils.env import get_env


def test_development_origins_by_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NODE_ENV", "development")
    monkeypatch.delenv("SITE_CORS_ORIGINS", raising=False)

    assert server_config.get_cors_origins() == server_config.DEVELOPMENT_CORS_ORIGINS


def test_production_origins(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.delenv("SITE_CORS_ORIGINS", raising=False)

    assert server_config.get_cors_origins() == ["https://yourdomain.com"]


def test_cors_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SITE_CORS_ORIGINS", "https://a.example, https://b.example ,")

    assert server_config.get_cors_origins() == ["https://a.example", "https://b.example"]


def test_max_body_bytes(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SITE_MAX_BODY_BYTES", raising=False)
    assert server_config.get_max_body_bytes() == 10 * 1024 * 1024

    monkeypatch.setenv("SITE_MAX_BODY_BYTES", "2048")
    assert server_config.get_max_body_bytes() == 2048


def test_malformed_integer_raises(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ConfigurationError) as exc_info:
        server_config.get_port()

    assert exc_info.value.key == "PORT"


def test_required_env_missing(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SITE_SOMETHING_REQUIRED", raising=False)

    with pytest.raises(ConfigurationError):
        get_env("SITE_SOMETHING_REQUIRED", required=True)


def test_blank_webhook_is_disabled(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SITE_SUBSCRIBE_WEBHOOK_URL", "   ")

    assert server_config.get_subscribe_webhook_url() is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SITE_CONTACT_WEBHOOK_URL", "https://hooks.example/contact")
    monkeypatch.setenv("SITE_MAX_BODY_BYTES", "4096")

    settings = Settings()

    assert settings.contact_webhook_url == "https://hooks.example/contact"
    assert settings.max_body_bytes == 4096
    assert settings.field_max_length == 1000


def test_client_base_url_strips_trailing_slash(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SITE_API_BASE_URL", "https://api.example/api/")

    assert client_config.get_api_base_url() == "https://api.example/api"
