"""
Tests for frontkit/env/download.py

**Testing philosophy**: requests.get is mocked, so no network I/O happens.
Files are written under pytest's tmp_path.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from frontkit.config.settings import NetworkSettings
from frontkit.env.download import DOWNLOAD_FAILED, download_file


@pytest.fixture
def network_settings(tmp_path):
    return NetworkSettings(download_dir=tmp_path, timeout_seconds=5)


def _response(chunks=(b"hello ", b"world"), status_error=None):
    response = Mock()
    response.iter_content.return_value = iter(chunks)
    response.raise_for_status.side_effect = status_error
    return response


@patch("frontkit.env.download.requests.get")
def test_download_writes_file(mock_get, network_settings, tmp_path):
    mock_get.return_value.__enter__.return_value = _response()

    result = download_file("https://example.com/report.pdf", "reports/report.pdf", settings=network_settings)

    assert result == {"error": None}
    assert (tmp_path / "reports" / "report.pdf").read_bytes() == b"hello world"
    mock_get.assert_called_once_with("https://example.com/report.pdf", timeout=5, stream=True)


@patch("frontkit.env.download.requests.get")
def test_download_absolute_target(mock_get, network_settings, tmp_path):
    mock_get.return_value.__enter__.return_value = _response(chunks=(b"a", b"", b"b"))
    target = tmp_path / "elsewhere" / "file.bin"

    assert download_file("https://example.com/f", target, settings=network_settings) == {"error": None}
    assert target.read_bytes() == b"ab"


@patch("frontkit.env.download.requests.get")
def test_download_http_error(mock_get, network_settings, tmp_path):
    error = requests.HTTPError("404 Not Found")
    mock_get.return_value.__enter__.return_value = _response(status_error=error)

    result = download_file("https://example.com/missing", "missing.pdf", settings=network_settings)

    assert result == {"error": DOWNLOAD_FAILED}
    assert not (tmp_path / "missing.pdf").exists()


@pytest.mark.parametrize("error", [requests.ConnectionError("refused"), requests.Timeout("slow")])
@patch("frontkit.env.download.requests.get")
def test_download_network_error(mock_get, error, network_settings):
    mock_get.side_effect = error

    result = download_file("https://example.com/f", "f.bin", settings=network_settings)

    assert result == {"error": "File is not downloaded"}


@patch("frontkit.env.download.requests.get")
def test_download_disk_error(mock_get, network_settings, tmp_path):
    mock_get.return_value.__enter__.return_value = _response()
    # A file where the parent directory should be makes mkdir fail
    (tmp_path / "blocked").write_text("x")

    result = download_file("https://example.com/f", "blocked/f.bin", settings=network_settings)

    assert result == {"error": DOWNLOAD_FAILED}


@patch("frontkit.env.download.requests.get")
def test_download_uses_environment_settings(mock_get, tmp_path, monkeypatch):
    monkeypatch.setenv("FRONTKIT_DOWNLOAD_DIR", str(tmp_path))
    monkeypatch.setenv("FRONTKIT_HTTP_TIMEOUT_SECONDS", "12")
    mock_get.return_value.__enter__.return_value = _response()

    assert download_file("https://example.com/f", "f.bin") == {"error": None}
    assert (tmp_path / "f.bin").exists()
    assert mock_get.call_args.kwargs["timeout"] == 12


@patch("frontkit.env.download.requests.get")
def test_download_interrupted_stream_keeps_previous_file(mock_get, network_settings, tmp_path):
    """A body that breaks off midway never replaces an existing file."""
    target = tmp_path / "report.pdf"
    target.write_bytes(b"GOOD OLD CONTENT")

    def broken_stream(chunk_size):
        yield b"PARTIAL"
        raise requests.exceptions.ChunkedEncodingError("connection reset")

    response = _response()
    response.iter_content.side_effect = broken_stream
    mock_get.return_value.__enter__.return_value = response

    result = download_file("https://example.com/report.pdf", "report.pdf", settings=network_settings)

    assert result == {"error": DOWNLOAD_FAILED}
    assert target.read_bytes() == b"GOOD OLD CONTENT"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["report.pdf"]


@patch("frontkit.env.download.requests.get")
def test_download_replaces_existing_file(mock_get, network_settings, tmp_path):
    target = tmp_path / "report.pdf"
    target.write_bytes(b"old")
    mock_get.return_value.__enter__.return_value = _response(chunks=(b"new",))

    assert download_file("https://example.com/report.pdf", "report.pdf", settings=network_settings) == {"error": None}
    assert target.read_bytes() == b"new"
    assert not (tmp_path / "report.pdf.tmp").exists()
