"""
Async client for a PokeAPI-compatible JSON API.
"""

import asyncio
import logging
import time
from typing import Optional

import aiohttp

from pokefetch.exceptions import ApiRequestError, UnexpectedStatusError
from pokefetch.utils.formatting import describe_error

log = logging.getLogger(__name__)

USER_AGENT = "pokefetch (+https://github.com/pokefetch/pokefetch)"


class PokeAPIClient:
    """
    Thin async client around a single aiohttp session.

    The client only transports bytes; decoding the body is left to the caller.
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        """
        Initializes the API client.

        Args:
            base_url: Root of the API, e.g. 'https://pokeapi.co/api/v2'.
            timeout: Total timeout in seconds for a single request.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _initialize_session(self) -> None:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "User-Agent": USER_AGENT,
                    "Accept": "application/json",
                },
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "PokeAPIClient":
        await self._initialize_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def resource_url(self, identifier: str | int) -> str:
        """Builds the URL of the Pokémon resource for a name or number."""
        return f"{self.base_url}/pokemon/{identifier}/"

    async def fetch_resource(self, url: str) -> bytes:
        """
        Performs a single GET and returns the raw response body.

        Raises:
            ApiRequestError: On connection failures, timeouts or body read errors.
            UnexpectedStatusError: If the server answers with anything but 200.
        """
        await self._initialize_session()
        start_time = time.monotonic()

        try:
            async with self._session.get(url) as r:
                duration_ms = (time.monotonic() - start_time) * 1000
                log.debug(f"GET {url} -> {r.status} ({duration_ms:.0f} ms)")

                if r.status != 200:
                    raise UnexpectedStatusError(r.status)

                try:
                    body = await r.read()
                except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                    raise ApiRequestError(
                        f"error reading response body: {describe_error(e)}"
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ApiRequestError(f"HTTP request error: {describe_error(e)}") from e

        log.debug(f"Read {len(body)} bytes from {url}")
        return body

    async def fetch_pokemon(self, identifier: str | int) -> bytes:
        return await self.fetch_resource(self.resource_url(identifier))
