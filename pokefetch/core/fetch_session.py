"""
The orchestrator for a single fetch: API request, decoding, printing and sprite saving.
"""

import asyncio
import logging
from pathlib import Path

from rich.console import Console

from pokefetch.api.client import PokeAPIClient
from pokefetch.cli.formatters import print_pokemon, print_sprite_result
from pokefetch.exceptions import PokefetchError, SpriteSaveError
from pokefetch.media.downloader import SpriteDownloader
from pokefetch.models.config import FetchConfig
from pokefetch.models.pokemon import Pokemon, parse_pokemon
from pokefetch.models.session import FetchStats, SpriteResult
from pokefetch.utils.path import create_dir, sprite_path

log = logging.getLogger(__name__)


class FetchSession:
    """Runs fetch, decode, print and sprite saving for one resource."""

    def __init__(
        self,
        config: FetchConfig,
        api_client: PokeAPIClient,
        downloader: SpriteDownloader | None = None,
        console: Console | None = None,
    ):
        self.config = config
        self.api_client = api_client
        self.downloader = downloader or SpriteDownloader(timeout=config.timeout)
        self.console = console or Console()
        self.stats = FetchStats()

    async def fetch_pokemon(self) -> Pokemon:
        """
        Fetches and decodes the configured resource.

        The request runs as a background task; awaiting it yields either the
        body or the exception that ended it.
        """
        url = self.api_client.resource_url(self.config.identifier)
        log.debug(f"Fetching resource from {url}")

        worker = asyncio.create_task(
            self.api_client.fetch_resource(url), name=f"fetch {url}"
        )
        body = await worker
        return parse_pokemon(body)

    async def save_sprite(self, pokemon: Pokemon, side: str, url: str) -> SpriteResult:
        """
        Downloads one sprite and writes it to `<output_dir>/<name>_<side>.png`.

        Failures are captured on the returned result rather than raised.
        """
        result = SpriteResult(side=side, url=url)
        if result.skipped:
            log.debug(f"No {side} sprite URL; skipping.")
            return result

        destination = sprite_path(self.config.output_dir, pokemon.name, side)

        try:
            data = await self.downloader.download_sprite(url)
        except PokefetchError as e:
            result.error, result.failed_step = e, "download"
            return result

        try:
            create_dir(Path(self.config.output_dir))
        except OSError as e:
            result.error = SpriteSaveError(f"error creating file: {e}")
            result.failed_step = "save"
            return result

        try:
            await self.downloader.save_sprite(data, destination)
        except SpriteSaveError as e:
            result.error, result.failed_step = e, "save"
            return result

        result.path = destination
        result.size = len(data)
        return result

    async def save_sprites(self, pokemon: Pokemon) -> list[SpriteResult]:
        """Saves the front sprite, then the back one; one failure never stops both."""
        results = []
        for side, url in pokemon.sprites.by_side():
            result = await self.save_sprite(pokemon, side, url)
            self.stats.record(result)
            if not result.skipped:
                print_sprite_result(result, self.console)
            results.append(result)
        return results

    async def run(self) -> Pokemon:
        """
        Executes the full session.

        Raises:
            PokefetchError: If the resource cannot be fetched or decoded.
        """
        with self.console.status(
            f"[cyan]Fetching '{self.config.identifier}'...[/cyan]", spinner="dots"
        ):
            pokemon = await self.fetch_pokemon()

        print_pokemon(pokemon, self.console)

        if self.config.download_sprites:
            await self.save_sprites(pokemon)
        else:
            log.debug("Sprite download disabled.")

        return pokemon
