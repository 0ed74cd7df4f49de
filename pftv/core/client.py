"""
PFTV Client - High-level facade over fetching, parsing and link resolution.

The client builds page URLs from the configured site layout, fetches them
through a shared DocumentLoader and hands the documents to the pure parsers.
"""

import logging
from typing import Optional
from urllib.parse import quote

from pftv.core.config_schemas import AppSettings
from pftv.core.dates import DateNormalizer
from pftv.core.loader import DocumentLoader
from pftv.core.models import EpisodeList, Show
from pftv.core.resolver_manager import ResolverManager
from pftv.core.utils import is_absolute_url, make_absolute
from pftv.parsers import parse_episode_list, parse_show_info


logger = logging.getLogger(__name__)


class PFTVClient:
    """
    Entry point for reading shows and episode lists.

    Example:
        async with PFTVClient() as client:
            show = await client.get_show_info("the-big-bang-theory")
            season = await client.get_episode_list("the-big-bang-theory", show.categories[0].id)
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        loader: Optional[DocumentLoader] = None,
        resolvers: Optional[ResolverManager] = None
    ):
        """
        Initialize the client.

        Args:
            settings: Application settings (defaults are used when omitted)
            loader: Document loader; one is created from the network settings if omitted
            resolvers: Resolver registry; one sharing the loader is created if omitted
        """
        self.settings = settings or AppSettings()
        self.loader = loader or DocumentLoader(self.settings.network)
        self.resolvers = resolvers or ResolverManager(self.loader)
        self.normalizer = DateNormalizer(self.settings.scraper.date_format)

    @property
    def tv_url(self) -> str:
        scraper = self.settings.scraper
        return f"{scraper.base_url}{scraper.tv_path}/" if scraper.tv_path else scraper.base_url

    def show_url(self, show_id: str) -> str:
        """URL of a show page."""
        return f"{self.tv_url}{quote(show_id.strip('/'))}/"

    def episode_list_url(self, show_id: str, category_id: str) -> str:
        """
        URL of a season page.

        The category id is the href of the season anchor on the show page.
        Absolute hrefs are used as they are, root-relative ones are joined
        to the site root and anything else is taken relative to the show.
        """
        if is_absolute_url(category_id):
            return category_id
        if category_id.startswith('/'):
            return make_absolute(category_id, self.settings.scraper.base_url)
        return f"{self.show_url(show_id)}{category_id}"

    async def get_show_info(self, show_id: str) -> Show:
        """
        Fetch and parse a show page.

        Args:
            show_id: Show identifier (URL slug)

        Returns:
            Show record

        Raises:
            NetworkError: If the page cannot be retrieved
            NotFoundError: If the page holds no show
        """
        url = self.show_url(show_id)
        logger.debug(f"Fetching show '{show_id}' from {url}")
        document = await self.loader.fetch_document(url)
        return parse_show_info(document, show_id, self.normalizer, base_url=url)

    async def get_episode_list(self, show_id: str, category_id: str) -> EpisodeList:
        """
        Fetch and parse a season page.

        Args:
            show_id: Show identifier (URL slug)
            category_id: Season identifier from ``Show.categories``

        Returns:
            EpisodeList record

        Raises:
            NetworkError: If the page cannot be retrieved
            NotFoundError: If the page holds no episodes
        """
        url = self.episode_list_url(show_id, category_id)
        logger.debug(f"Fetching episodes '{show_id}' / '{category_id}' from {url}")
        document = await self.loader.fetch_document(url)
        episodes = parse_episode_list(document, show_id, category_id, self.normalizer, base_url=url)
        logger.info(f"Parsed {len(episodes.episodes)} episodes with {episodes.link_count} links")
        return episodes

    async def resolve_link(self, embedded_url: str) -> str:
        """
        Resolve an embedded-player URL to a direct media URL.

        Raises:
            ResolverNotFoundError: If no resolver handles the URL's host
            ResolverError: If the resolver finds no direct link
        """
        return await self.resolvers.resolve(embedded_url)

    async def close(self) -> None:
        """Release network resources."""
        await self.loader.close()

    async def __aenter__(self) -> "PFTVClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


# Export client
__all__ = ["PFTVClient"]
