"""
Tests for settings loading and logging configuration.
"""

import logging

import pytest

from config import get_settings
from logging_config import HealthCheckFilter, configure_logging, get_logging_config


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("JWT_SECRET", "TOKEN_TTL_SECONDS", "COOKIE_SECURE", "BCRYPT_ROUNDS",
                 "SEED_USERS", "SEED_PASSWORD", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_secret_fails(clean_env):
    with pytest.raises(ValueError):
        get_settings()


def test_defaults(clean_env):
    clean_env.setenv("JWT_SECRET", "s3cret")

    settings = get_settings()

    assert settings.jwt_secret == "s3cret"
    assert settings.token_ttl_seconds == 3600
    assert settings.cookie_secure is False
    assert settings.bcrypt_rounds == 10
    assert settings.seed_users is True
    assert settings.cors_origins == ["http://localhost:3000"]


def test_overrides(clean_env):
    clean_env.setenv("JWT_SECRET", "s3cret")
    clean_env.setenv("COOKIE_SECURE", "true")
    clean_env.setenv("SEED_USERS", "0")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.cookie_secure is True
    assert settings.seed_users is False
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.log_level == "DEBUG"


def _record(name, message):
    return logging.LogRecord(name, logging.INFO, __file__, 1, message, None, None)


def test_health_checks_filtered_from_access_log():
    health_filter = HealthCheckFilter()

    assert health_filter.filter(_record("uvicorn.access", 'GET /health HTTP/1.1" 200')) is False
    assert health_filter.filter(_record("uvicorn.access", 'GET /tasks HTTP/1.1" 200')) is True
    assert health_filter.filter(_record("routes.auth", "GET /health")) is True


def test_logging_config_level():
    config = get_logging_config("DEBUG")

    assert config["root"]["level"] == "DEBUG"
    assert config["handlers"]["access"]["filters"] == ["health_check_filter"]


def test_seeding_can_be_disabled(settings):
    from fastapi.testclient import TestClient
    from main import create_app

    app = create_app(settings.model_copy(update={"seed_users": False}))
    with TestClient(app) as client:
        response = client.post("/login", json={"email": "admin@test.com", "password": "password123"})

    assert response.status_code == 400
    assert app.state.user_store.list_all() == []


def test_configure_logging_sets_root_level():
    configure_logging("debug")
    try:
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").propagate is False
    finally:
        configure_logging("INFO")


def test_create_app_configures_logging_once(settings, monkeypatch):
    import main

    calls = []
    monkeypatch.setattr(main, "configure_logging", lambda level: calls.append(level))

    main.create_app(settings.model_copy(update={"log_level": "WARNING"}))

    assert calls == ["WARNING"]
