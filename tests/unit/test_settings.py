"""
설정 및 진입점 단위 테스트
"""

import asyncio
import pytest
from pydantic import ValidationError

from climate_monitor.main import build_settings, build_secret_store
from climate_monitor.adapters.secrets import StaticSecretStore, SQLiteSecretStore
from climate_monitor.settings import Settings


class TestSettingsDefaults:
    """기본 설정 테스트"""

    def test_defaults(self):
        s = Settings()

        assert s.device_auth.secrets == []
        assert s.device_auth.header_name == "x-device-shared-secret"
        assert s.thresholds.temperature_min is None
        assert s.thresholds.humidity_max is None
        assert s.thresholds.humidity_plausible_min is None
        assert s.thresholds.humidity_plausible_max is None
        assert s.observability.metrics_enabled is True

    def test_log_level_normalized(self):
        s = Settings.model_validate({"observability": {"log_level": "debug"}})
        assert s.observability.log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings.model_validate({"observability": {"log_level": "LOUD"}})


class TestBuildSettings:
    """환경 변수 설정 테스트"""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("DEVICE_SECRETS", "DEVICE_SECRETS_DB", "DEVICE_SECRET_HEADER",
                     "TEMPERATURE_MIN", "TEMPERATURE_MAX", "HUMIDITY_MIN", "HUMIDITY_MAX",
                     "HUMIDITY_PLAUSIBLE_MIN", "HUMIDITY_PLAUSIBLE_MAX",
                     "HTTP_HOST", "HTTP_PORT", "METRICS_ENABLED", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DEVICE_SECRETS", "a, b,,c ")
        monkeypatch.setenv("TEMPERATURE_MIN", "-10")
        monkeypatch.setenv("TEMPERATURE_MAX", "35.5")
        monkeypatch.setenv("HUMIDITY_MAX", "")
        monkeypatch.setenv("HUMIDITY_PLAUSIBLE_MIN", "0")
        monkeypatch.setenv("HUMIDITY_PLAUSIBLE_MAX", "100")
        monkeypatch.setenv("HTTP_PORT", "9000")
        monkeypatch.setenv("METRICS_ENABLED", "false")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        s = build_settings()

        assert s.device_auth.secrets == ["a", "b", "c"]
        assert s.thresholds.temperature_min == -10.0
        assert s.thresholds.temperature_max == 35.5
        assert s.thresholds.humidity_max is None
        assert s.thresholds.humidity_plausible_min == 0.0
        assert s.thresholds.humidity_plausible_max == 100.0
        assert s.observability.http_port == 9000
        assert s.observability.metrics_enabled is False
        assert s.observability.log_level == "WARNING"

    def test_inconsistent_thresholds_rejected(self, monkeypatch):
        monkeypatch.setenv("HUMIDITY_MIN", "80")
        monkeypatch.setenv("HUMIDITY_MAX", "20")

        with pytest.raises(ValidationError):
            build_settings()

    def test_static_store_by_default(self, monkeypatch):
        monkeypatch.setenv("DEVICE_SECRETS", "valid-secret")

        store = asyncio.run(build_secret_store(build_settings()))

        assert isinstance(store, StaticSecretStore)
        assert store.is_authorized("valid-secret") is True

    def test_sqlite_store_when_configured(self, monkeypatch, temp_db_path):
        monkeypatch.setenv("DEVICE_SECRETS_DB", temp_db_path)

        store = asyncio.run(build_secret_store(build_settings()))

        assert isinstance(store, SQLiteSecretStore)
        assert asyncio.run(store.get_count()) == 0
