"""
Tests for frontkit/config/settings.py
"""

from pathlib import Path

import pytest

from frontkit.config.settings import (
    FormattingSettings,
    NetworkSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

ENV_VARS = (
    "FRONTKIT_STORAGE_PATH",
    "FRONTKIT_DEFAULT_LOCALE",
    "FRONTKIT_DOWNLOAD_DIR",
    "FRONTKIT_HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.storage.storage_path is None
    assert settings.formatting.default_locale == "en"
    assert settings.network.download_dir == Path(".")
    assert settings.network.timeout_seconds == 30


def test_values_from_environment(clean_env, tmp_path):
    clean_env.setenv("FRONTKIT_STORAGE_PATH", str(tmp_path / "store.json"))
    clean_env.setenv("FRONTKIT_DEFAULT_LOCALE", "bg-BG")
    clean_env.setenv("FRONTKIT_DOWNLOAD_DIR", str(tmp_path / "downloads"))
    clean_env.setenv("FRONTKIT_HTTP_TIMEOUT_SECONDS", "5")

    settings = Settings.from_env()

    assert settings.storage.storage_path == tmp_path / "store.json"
    assert settings.formatting.default_locale == "bg-BG"
    assert settings.network.download_dir == tmp_path / "downloads"
    assert settings.network.timeout_seconds == 5


def test_blank_storage_path_means_memory(clean_env):
    clean_env.setenv("FRONTKIT_STORAGE_PATH", "   ")
    assert StorageSettings.from_env().storage_path is None


def test_storage_path_must_not_be_directory(tmp_path):
    with pytest.raises(ValueError, match="must point to a file"):
        StorageSettings(storage_path=tmp_path)


def test_empty_locale_rejected(clean_env):
    clean_env.setenv("FRONTKIT_DEFAULT_LOCALE", " ")
    with pytest.raises(ValueError, match="FRONTKIT_DEFAULT_LOCALE"):
        FormattingSettings.from_env()


@pytest.mark.parametrize("timeout", ["abc", "1.5"])
def test_non_integer_timeout_rejected(clean_env, timeout):
    clean_env.setenv("FRONTKIT_HTTP_TIMEOUT_SECONDS", timeout)
    with pytest.raises(ValueError, match="must be an integer"):
        NetworkSettings.from_env()


@pytest.mark.parametrize("timeout", [0, -1])
def test_non_positive_timeout_rejected(timeout):
    with pytest.raises(ValueError, match="must be positive"):
        NetworkSettings(timeout_seconds=timeout)


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.formatting = FormattingSettings("de")


def test_get_settings_is_cached_until_reset(clean_env):
    first = get_settings()
    clean_env.setenv("FRONTKIT_DEFAULT_LOCALE", "de")

    assert get_settings() is first
    assert get_settings().formatting.default_locale == "en"

    reset_settings()
    assert get_settings().formatting.default_locale == "de"
