import logging
from logging.handlers import RotatingFileHandler

import pytest

from app.core.config import get_settings
from app.core.env_config import ConfigurationError
from app.core.logging_config import REQUEST_LOGGER, setup_logging


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["status"] == "ok"


def test_unknown_route_uses_envelope(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Route /api/nothing-here not found", "data": None}


def test_malformed_json_body(client, auth_headers):
    resp = client.post(
        "/api/members",
        content="{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 422
    assert resp.json()["success"] is False


def test_responses_use_camel_case(client, member):
    assert "registrationNumber" in member
    assert "registration_number" not in member
    assert "createdAt" in member


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_missing_required_setting_aborts(monkeypatch, fresh_settings):
    monkeypatch.delenv("SECRET_KEY")

    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()
    assert "SECRET_KEY" in exc_info.value.missing_vars


def test_settings_read_from_environment(monkeypatch, fresh_settings):
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")

    settings = get_settings()
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert settings.ALGORITHM == "HS256"
    assert settings.bootstrap_admin_configured is False


def test_request_lines_go_to_their_own_log(tmp_path):
    settings = get_settings()
    setup_logging(log_dir=str(tmp_path), environment="production")
    try:
        request_files = [
            h.baseFilename for h in logging.getLogger(REQUEST_LOGGER).handlers if isinstance(h, RotatingFileHandler)
        ]
        assert str(tmp_path / "requests.log") in request_files
        assert logging.getLogger("app").level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
    finally:
        setup_logging(log_dir=settings.LOG_DIR, environment=settings.ENVIRONMENT)
