"""
frontkit – Main entry point.

Minimal bootstrap script: loads settings and prints the resolved
configuration so a fresh checkout can be sanity-checked.
"""

from frontkit.config.settings import get_settings


def main() -> None:
    """Print the active configuration."""
    settings = get_settings()
    storage = settings.storage.storage_path or "in-memory"
    print("frontkit bootstrap complete")
    print(f"  storage: {storage}")
    print(f"  default locale: {settings.formatting.default_locale}")
    print(f"  download dir: {settings.network.download_dir} (timeout {settings.network.timeout_seconds}s)")


if __name__ == "__main__":
    main()
