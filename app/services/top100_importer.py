"""
Imports the public Top-100 app feeds into the games table.

Each platform publishes one JSON document: an array of app entries, where an
element may itself be an array of entries (one level of nesting). Both feeds
are fetched concurrently; if either one fails nothing is inserted.
"""

import asyncio
import logging
from typing import Iterable, List, Optional

import httpx

from app.core.config import settings
from app.services.game_store import GameStore
from app.utils.error_handler import FeedFetchError

logger = logging.getLogger(__name__)


def flatten_one_level(document: Iterable) -> list:
    flat = []
    for item in document:
        if isinstance(item, list):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


def map_feed_entry(entry: dict) -> dict:
    """Feed entry → Game fields. Imported games are always published."""
    return {
        "publisher_id": entry.get("publisherId"),
        "name": entry.get("name"),
        "platform": entry.get("os"),
        "store_id": entry.get("appId"),
        "bundle_id": entry.get("bundle_id"),
        "app_version": entry.get("version"),
        "is_published": True,
    }


class Top100Importer:
    def __init__(
        self,
        url_template: Optional[str] = None,
        platforms: Optional[List[str]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url_template = url_template or settings.TOP100_URL_TEMPLATE
        self.platforms = list(platforms if platforms is not None else settings.TOP100_PLATFORMS)
        self.timeout = timeout if timeout is not None else settings.FEED_TIMEOUT_SECONDS
        self.transport = transport

    def feed_url(self, platform: str) -> str:
        return self.url_template.format(platform=platform)

    async def _fetch_feed(self, client: httpx.AsyncClient, platform: str) -> list:
        url = self.feed_url(platform)
        try:
            response = await client.get(url)
            response.raise_for_status()
            document = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FeedFetchError(f"Could not fetch top 100 feed for {platform}: {e}", url) from e
        except ValueError as e:
            raise FeedFetchError(f"Top 100 feed for {platform} is not valid JSON", url) from e

        if not isinstance(document, list):
            raise FeedFetchError(f"Top 100 feed for {platform} is not a JSON array", url)

        entries = flatten_one_level(document)
        if not all(isinstance(entry, dict) for entry in entries):
            raise FeedFetchError(f"Top 100 feed for {platform} has malformed entries", url)
        logger.info(f"Fetched {len(entries)} entries from {url}")
        return entries

    async def fetch_games(self) -> List[dict]:
        """Fetch every platform feed concurrently and return the mapped Game records, in platform order."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            results = await asyncio.gather(
                *(self._fetch_feed(client, platform) for platform in self.platforms),
                return_exceptions=True,
            )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        return [map_feed_entry(entry) for entries in results for entry in entries]

    async def populate(self, store: GameStore) -> int:
        logger.info(f"Populating games from top 100 feeds: {', '.join(self.platforms)}")
        records = await self.fetch_games()
        store.bulk_create(records)
        logger.info(f"Inserted {len(records)} top 100 games")
        return len(records)


def get_top100_importer() -> Top100Importer:
    return Top100Importer()
