"""Tests for DownloadService."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from ffdev_setup.core.download import DownloadService
from ffdev_setup.exceptions import DownloadError

from fakes import RecordingObserver


async def async_chunk_gen(chunks: list[bytes]):
    for chunk in chunks:
        yield chunk


def _response(status=200, chunks=(), headers=None, error=None):
    response = AsyncMock()
    response.__aenter__.return_value = response
    response.__aexit__.return_value = False
    response.status = status
    response.reason = "Not Found" if status == 404 else "OK"
    response.headers = headers or {}

    def iter_chunked(size):
        if error is not None:
            raise error
        return async_chunk_gen(list(chunks))

    response.content.iter_chunked = iter_chunked
    return response


@pytest.fixture
def tmp_file(tmp_path: Path) -> Path:
    """Destination path for downloads."""
    return tmp_path / "firefox-dev.tar.xz"


@pytest.mark.asyncio
async def test_download_file_streams_chunks(tmp_file):
    session = MagicMock()
    session.get.return_value = _response(
        chunks=[b"hello ", b"world"], headers={"Content-Length": "11"}
    )
    observer = RecordingObserver()

    result = await DownloadService(session, observer).download_file(
        "https://example.invalid/ff.tar.xz", tmp_file
    )

    assert result == tmp_file
    assert tmp_file.read_bytes() == b"hello world"
    assert observer.events == [
        ("advanced", tmp_file.name, 6, 11),
        ("advanced", tmp_file.name, 11, 11),
    ]


@pytest.mark.asyncio
async def test_unknown_length_reports_no_total(tmp_file):
    session = MagicMock()
    session.get.return_value = _response(chunks=[b"abc"])
    observer = RecordingObserver()

    await DownloadService(session, observer).download_file(
        "https://example.invalid/ff.tar.xz", tmp_file, title="archive"
    )

    assert observer.events == [("advanced", "archive", 3, None)]


@pytest.mark.asyncio
async def test_http_error_raises_and_leaves_no_file(tmp_file):
    session = MagicMock()
    session.get.return_value = _response(status=404)

    with pytest.raises(DownloadError, match="HTTP 404"):
        await DownloadService(session).download_file(
            "https://example.invalid/missing", tmp_file
        )

    assert not tmp_file.exists()


@pytest.mark.asyncio
async def test_network_error_removes_partial_file(tmp_file):
    session = MagicMock()
    session.get.return_value = _response(
        error=aiohttp.ClientPayloadError("connection reset")
    )

    with pytest.raises(DownloadError, match="connection reset"):
        await DownloadService(session).download_file(
            "https://example.invalid/ff.tar.xz", tmp_file
        )

    assert not tmp_file.exists()
