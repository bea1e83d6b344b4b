"""
Configuration settings for frontkit helpers.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). Settings are validated when
constructed, so a bad value fails fast at startup instead of surfacing later
as a confusing storage or download error.

**What is configurable?**
  - Storage: where the persistent JSON key/value store lives on disk.
  - Formatting: the default locale used by the date formatters.
  - Network: download directory and HTTP timeout for file downloads.

Every helper that reads configuration also accepts an explicit settings
object, so tests never need to touch the process environment.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op when the file is absent)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class StorageSettings:
    """
    Configuration for the default persistent key/value store.

    **Conceptual**: The storage helpers wrap a string-keyed store. When a
    storage path is configured, the default store is a JSON file at that
    path (it survives process restarts). Without a path, an in-memory store
    is used and data lives only as long as the process.

    Attributes:
        storage_path: Path of the JSON file backing the persistent store,
                      or None for an in-memory store.
    """
    storage_path: Optional[Path] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.storage_path is not None and self.storage_path.is_dir():
            raise ValueError(
                f"FRONTKIT_STORAGE_PATH must point to a file, got directory: {self.storage_path}"
            )

    @classmethod
    def from_env(cls) -> "StorageSettings":
        """
        Load storage settings from environment variables.

        **Environment variables**:
          - FRONTKIT_STORAGE_PATH (optional): JSON file for persistent storage.
            Defaults to None (in-memory store).

        Returns:
            StorageSettings object with values loaded from environment.

        Raises:
            ValueError: If FRONTKIT_STORAGE_PATH points at a directory.
        """
        raw_path = os.getenv("FRONTKIT_STORAGE_PATH", "").strip()
        return cls(storage_path=Path(raw_path).expanduser() if raw_path else None)


@dataclass(frozen=True)
class FormattingSettings:
    """
    Configuration for locale-aware formatting.

    Attributes:
        default_locale: Locale tag used when a formatter is called without
                        one (e.g. "en", "en_US", "bg_BG"). Default "en".
    """
    default_locale: str = "en"

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.default_locale:
            raise ValueError(
                "FRONTKIT_DEFAULT_LOCALE must not be empty. "
                "Unset it to use the default locale 'en'."
            )

    @classmethod
    def from_env(cls) -> "FormattingSettings":
        """
        Load formatting settings from environment variables.

        **Environment variables**:
          - FRONTKIT_DEFAULT_LOCALE (optional): Default locale tag.
            Defaults to "en" if not set.
        """
        return cls(default_locale=os.getenv("FRONTKIT_DEFAULT_LOCALE", "en").strip())


@dataclass(frozen=True)
class NetworkSettings:
    """
    Configuration for file downloads.

    **Conceptual**: download_file() fetches a URL once and writes the body to
    disk. Relative file names are resolved under download_dir, and the request
    is bounded by timeout_seconds so a dead server cannot hang the caller.

    Attributes:
        download_dir: Directory that relative download targets resolve under.
                      Defaults to the current working directory.
        timeout_seconds: HTTP request timeout in seconds (default 30).
    """
    download_dir: Path = Path(".")
    timeout_seconds: int = 30

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got: {self.timeout_seconds}"
            )

    @classmethod
    def from_env(cls) -> "NetworkSettings":
        """
        Load network settings from environment variables.

        **Environment variables**:
          - FRONTKIT_DOWNLOAD_DIR (optional): Directory for downloads.
            Defaults to the current working directory.
          - FRONTKIT_HTTP_TIMEOUT_SECONDS (optional): HTTP timeout in seconds.
            Defaults to 30 if not set.

        Raises:
            ValueError: If FRONTKIT_HTTP_TIMEOUT_SECONDS is not a positive integer.
        """
        download_dir = os.getenv("FRONTKIT_DOWNLOAD_DIR", ".")
        timeout_str = os.getenv("FRONTKIT_HTTP_TIMEOUT_SECONDS", "30")

        try:
            timeout_seconds = int(timeout_str)
        except ValueError:
            raise ValueError(
                f"FRONTKIT_HTTP_TIMEOUT_SECONDS must be an integer, got: {timeout_str}"
            )

        return cls(
            download_dir=Path(download_dir).expanduser(),
            timeout_seconds=timeout_seconds,
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings aggregating every subsystem.

    **Usage pattern**:
      ```python
      from frontkit.config.settings import get_settings

      settings = get_settings()
      locale = settings.formatting.default_locale
      ```

    Attributes:
        storage: Persistent store settings.
        formatting: Locale/formatting settings.
        network: Download settings.
    """
    storage: StorageSettings = StorageSettings()
    formatting: FormattingSettings = FormattingSettings()
    network: NetworkSettings = NetworkSettings()

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any subsystem has an invalid value.
        """
        return cls(
            storage=StorageSettings.from_env(),
            formatting=FormattingSettings.from_env(),
            network=NetworkSettings.from_env(),
        )


# Lazily loaded on first get_settings() call. Tests inject their own Settings
# objects or call reset_settings().
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings, loading them from the environment on first call.

    Returns:
        Cached global Settings.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the cached global settings (for testing).

    The next get_settings() call reloads from the environment.
    """
    global _default_settings
    _default_settings = None
