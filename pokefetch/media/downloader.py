"""
Handles the low-level downloading of sprite images over HTTP and writing them to disk.
"""

import asyncio
import logging
import os
from pathlib import Path

import aiofiles
import aiohttp

from pokefetch.exceptions import (
    SpriteDownloadError,
    SpriteSaveError,
    UnexpectedStatusError,
)
from pokefetch.utils.formatting import describe_error

log = logging.getLogger(__name__)

_connection_pool: aiohttp.ClientSession | None = None
_pool_lock = asyncio.Lock()


async def get_connection_pool(timeout: float = 30.0) -> aiohttp.ClientSession:
    """
    Gets or creates a shared aiohttp ClientSession for sprite downloads.

    Only one pool is created for the lifetime of the application run.
    """
    global _connection_pool
    async with _pool_lock:
        if _connection_pool and not _connection_pool.closed:
            return _connection_pool

        connector = aiohttp.TCPConnector(
            limit=4,
            ttl_dns_cache=300,
            enable_cleanup_closed=True,
        )
        _connection_pool = aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=timeout, sock_connect=15),
        )
        log.debug("Created sprite download pool")

    return _connection_pool


async def close_connection_pool() -> None:
    """Closes the shared global connection pool."""
    global _connection_pool
    async with _pool_lock:
        if _connection_pool and not _connection_pool.closed:
            await _connection_pool.close()
            _connection_pool = None
            log.debug("Shared sprite connection pool closed.")


class SpriteDownloader:
    """Downloads sprite images and saves them as files."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    async def download_sprite(self, url: str) -> bytes:
        """
        Downloads the image at `url` and returns its bytes.

        Raises:
            SpriteDownloadError: On connection failures, timeouts or body read errors.
            UnexpectedStatusError: If the server answers with anything but 200.
        """
        session = await get_connection_pool(self.timeout)
        try:
            async with session.get(url, allow_redirects=True) as response:
                if response.status != 200:
                    raise UnexpectedStatusError(response.status)
                try:
                    data = await response.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    raise SpriteDownloadError(
                        f"error reading sprite data: {describe_error(e)}"
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SpriteDownloadError(
                f"error downloading sprite: {describe_error(e)}"
            ) from e

        log.debug(f"Downloaded {len(data)} bytes from {url}")
        return data

    async def save_sprite(self, data: bytes, destination_path: Path | str) -> None:
        """
        Writes sprite bytes to `destination_path`, replacing any existing file.

        Raises:
            SpriteSaveError: If the file cannot be created or written.
        """
        try:
            f = await aiofiles.open(destination_path, "wb")
        except OSError as e:
            raise SpriteSaveError(f"error creating file: {e}") from e

        try:
            try:
                await f.write(data)
            finally:
                await f.close()
        except OSError as e:
            raise SpriteSaveError(f"error saving sprite: {e}") from e

        log.debug(
            f"Wrote {len(data)} bytes to '{os.path.basename(destination_path)}'"
        )
