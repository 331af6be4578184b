"""Testes do bootstrap: validação de settings no startup e factories."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from app.bootstrap import validate_runtime_settings
from app.bootstrap.clients import create_firebase_app
from config.settings import FcmSettings, get_base_settings, get_fcm_settings, get_relay_settings
from utils.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "ENVIRONMENT",
        "RELAY_BIND",
        "RELAY_MAX_QUEUE_SIZE",
        "RELAY_MAX_WORKERS",
        "FCM_CREDENTIALS_FILE_PATH",
        "GOOGLE_APPLICATION_CREDENTIALS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_base_settings.cache_clear()
    get_relay_settings.cache_clear()
    get_fcm_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_relay_settings.cache_clear()
    get_fcm_settings.cache_clear()


class TestValidateRuntimeSettings:
    def test_development_only_warns_for_missing_credentials(self) -> None:
        validate_runtime_settings()

    def test_production_requires_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        with pytest.raises(ConfigurationError, match="FCM_CREDENTIALS_FILE_PATH"):
            validate_runtime_settings()

    def test_production_with_injected_delivery(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        validate_runtime_settings(require_credentials=False)

    def test_invalid_queue_size_is_always_fatal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELAY_MAX_QUEUE_SIZE", "0")
        with pytest.raises(ConfigurationError, match="RELAY_MAX_QUEUE_SIZE"):
            validate_runtime_settings(require_credentials=False)

    def test_production_with_credentials_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        credentials = tmp_path / "sa.json"
        credentials.write_text("{}")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("FCM_CREDENTIALS_FILE_PATH", str(credentials))
        validate_runtime_settings()


class TestCreateFirebaseApp:
    def test_missing_credentials_path(self) -> None:
        with pytest.raises(ConfigurationError):
            create_firebase_app(FcmSettings())

    def test_invalid_credentials_file(self, tmp_path) -> None:
        credentials = tmp_path / "sa.json"
        credentials.write_text("{}")
        with pytest.raises(ConfigurationError, match="Error setting up FCM client"):
            create_firebase_app(FcmSettings(credentials_file_path=str(credentials)))
