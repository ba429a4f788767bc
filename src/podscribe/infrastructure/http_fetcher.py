"""aiohttp implementation of the AudioFetcher interface."""

import aiofiles
import aiohttp

from podscribe.domain.models import AssetMetadata
from podscribe.exceptions import FetchError
from podscribe.logging import setup_logging

from .interfaces import AudioFetcher

logger = setup_logging()

CHUNK_SIZE = 1024 * 64


class HttpAudioFetcher(AudioFetcher):
    """Reads remote audio over HTTP(S)."""

    def __init__(self, timeout: aiohttp.ClientTimeout | None = None):
        self._timeout = timeout or aiohttp.ClientTimeout(
            total=1800, connect=30, sock_read=120
        )

    async def fetch_metadata(self, url: str) -> AssetMetadata:
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.head(url, allow_redirects=True) as response:
                    response.raise_for_status()
                    content_type = response.headers.get("Content-Type")
                    content_length = response.headers.get("Content-Length")
        except Exception as e:
            logger.exception("Fetching file metadata failed", extra={"url": url})
            raise FetchError(url, e) from e

        metadata = AssetMetadata(
            content_type=content_type,
            content_length=_parse_length(content_length),
        )
        logger.info(
            "File metadata fetched",
            extra={
                "url": url,
                "content_type": metadata.content_type,
                "content_length": metadata.content_length,
            },
        )
        return metadata

    async def fetch_to_file(self, url: str, file_path: str) -> int:
        written = 0
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url) as response:
                    response.raise_for_status()
                    async with aiofiles.open(file_path, "wb") as file:
                        async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                            await file.write(chunk)
                            written += len(chunk)
        except Exception as e:
            logger.exception(
                "Download failed", extra={"url": url, "file_path": file_path}
            )
            raise FetchError(url, e) from e

        logger.info(
            "File downloaded",
            extra={"url": url, "file_path": file_path, "byte_size": written},
        )
        return written


def _parse_length(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
