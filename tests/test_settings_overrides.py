from __future__ import annotations

from typing import Iterable

from cli.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, load_config
from datastore.sensor_registry import build_default_registry
from services.sensors import build_default_service
from settings import get_settings


def _clear_caches(caches: Iterable) -> None:
    for cache in caches:
        cache.cache_clear()


_CACHES = (get_settings, build_default_registry, build_default_service)


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("SENSOR_REGISTRY_SEED", "false")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:5173, https://dash.example ,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    _clear_caches(_CACHES)

    try:
        settings = get_settings()
        assert settings.seed_registry is False
        assert settings.cors_allow_origins == ("http://localhost:5173", "https://dash.example")
        assert settings.log_level == "DEBUG"
        assert build_default_service().list_sensors() == []
    finally:
        _clear_caches(_CACHES)


def test_invalid_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("SENSOR_REGISTRY_SEED", "maybe")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " , ")
    monkeypatch.setenv("LOG_LEVEL", "  ")
    _clear_caches(_CACHES)

    try:
        settings = get_settings()
        assert settings.seed_registry is True
        assert settings.cors_allow_origins == ("*",)
        assert settings.log_level == "INFO"
        assert len(build_default_registry()) == 3
    finally:
        _clear_caches(_CACHES)


def test_cli_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://sensors.local:3001/")
    monkeypatch.setenv("CLI_TIMEOUT", "not-a-number")

    config = load_config()

    assert config.base_url == "http://sensors.local:3001"
    assert config.timeout == DEFAULT_TIMEOUT


def test_cli_config_flags_win_over_environment(monkeypatch) -> None:
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.setenv("CLI_TIMEOUT", "12")

    assert load_config().base_url == DEFAULT_BASE_URL
    assert load_config().timeout == 12.0
    assert load_config(timeout=3.0).timeout == 3.0
