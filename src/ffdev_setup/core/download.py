"""Download service for the release archive.

Streams the archive with aiohttp in fixed-size chunks and reports byte
progress through the ``ProgressObserver`` protocol. There is no retry and
no resume: a failed download removes the partial file and raises
``DownloadError``.
"""

import contextlib
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiohttp

from ffdev_setup.constants import DEFAULT_TIMEOUT_SECONDS, DOWNLOAD_CHUNK_SIZE
from ffdev_setup.core.protocols import NullProgressObserver, ProgressObserver
from ffdev_setup.exceptions import DownloadError
from ffdev_setup.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def create_http_session(
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create an HTTP session for archive downloads.

    The total transfer time is unbounded; only connecting and individual
    socket reads are limited.

    Args:
        timeout_seconds: Connect timeout; reads get three times as long

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(
        total=None,
        sock_connect=timeout_seconds,
        sock_read=timeout_seconds * 3,
    )
    async with aiohttp.ClientSession(timeout=timeout) as session:
        yield session


class DownloadService:
    """Service for streaming a URL to a file."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        observer: ProgressObserver | None = None,
    ) -> None:
        """Initialize download service with HTTP session.

        Args:
            session: aiohttp session for downloads
            observer: Receives byte progress. Uses NullProgressObserver
                if not provided.

        """
        self.session = session
        self.observer = observer or NullProgressObserver()

    async def download_file(
        self, url: str, dest: Path, title: str | None = None
    ) -> Path:
        """Download ``url`` to ``dest``.

        Args:
            url: URL to download from (redirects are followed)
            dest: Destination path; its parent must exist
            title: Progress title (defaults to the file name)

        Returns:
            The destination path

        Raises:
            DownloadError: On HTTP errors, network errors or write errors

        """
        title = title or dest.name
        logger.debug("Downloading %s -> %s", url, dest)

        try:
            async with self.session.get(url) as response:
                if response.status >= 400:  # noqa: PLR2004
                    msg = f"HTTP {response.status} {response.reason or ''}"
                    raise DownloadError(msg.strip(), url)

                total = int(response.headers.get("Content-Length", 0)) or None
                completed = 0
                with dest.open("wb") as f:
                    async for chunk in response.content.iter_chunked(
                        DOWNLOAD_CHUNK_SIZE
                    ):
                        f.write(chunk)
                        completed += len(chunk)
                        self.observer.advanced(title, completed, total)
        except DownloadError:
            self._cleanup(dest)
            raise
        except (aiohttp.ClientError, TimeoutError, OSError) as e:
            self._cleanup(dest)
            raise DownloadError(str(e) or type(e).__name__, url) from e

        logger.debug("Download completed: %s (%d bytes)", dest, completed)
        return dest

    @staticmethod
    def _cleanup(dest: Path) -> None:
        if dest.exists():
            logger.debug("Removing partial download: %s", dest)
            with contextlib.suppress(OSError):
                dest.unlink()
