"""
Fetch-and-save file downloads.

**Conceptual**: download_file() is a single boundary for "save this URL as a
file". It never raises: network errors, HTTP error statuses and disk errors
all come back as {"error": "File is not downloaded"}, and the details go to
the module logger. The request is made once, with the configured timeout,
and is not retried.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import requests

from frontkit.config.settings import NetworkSettings, get_settings

logger = logging.getLogger(__name__)

DOWNLOAD_FAILED = "File is not downloaded"
CHUNK_SIZE = 64 * 1024


def _resolve_target(file_name: Union[str, Path], settings: NetworkSettings) -> Path:
    target = Path(file_name)
    return target if target.is_absolute() else settings.download_dir / target


def download_file(
    file_url: str,
    file_name: Union[str, Path],
    settings: Optional[NetworkSettings] = None,
) -> Dict[str, Optional[str]]:
    """
    Download file_url and save the body as file_name.

    Args:
        file_url: URL to fetch.
        file_name: Target file. Relative names resolve under
                   settings.download_dir; parent directories are created.
        settings: Network settings (download_dir, timeout_seconds).
                  Defaults to get_settings().network.

    Returns:
        {"error": None} on success, {"error": "File is not downloaded"} otherwise.

    Example:
        >>> result = download_file("https://example.com/report.pdf", "report.pdf")
        >>> if result["error"]:
        ...     print(result["error"])
    """
    network_settings = settings if settings is not None else get_settings().network
    target = _resolve_target(file_name, network_settings)

    # The body lands in a sibling temp file; target only changes on success
    tmp_path = target.with_name(target.name + ".tmp")

    try:
        with requests.get(file_url, timeout=network_settings.timeout_seconds, stream=True) as response:
            response.raise_for_status()
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "wb") as handle:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        handle.write(chunk)
        tmp_path.replace(target)
    except (requests.RequestException, OSError) as e:
        logger.warning("Download of %s to %s failed: %s", file_url, target, e)
        if tmp_path.exists():
            tmp_path.unlink()
        return {"error": DOWNLOAD_FAILED}

    logger.debug("Downloaded %s to %s", file_url, target)
    return {"error": None}
