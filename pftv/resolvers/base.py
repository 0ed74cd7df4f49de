"""
Base Resolver Interface - Abstract base class for video host resolvers.

A resolver turns an embedded-player URL taken from a link row into the
direct media URL hidden in the player page. There is one resolver per
hosting domain; the ResolverManager picks it by the domain of the URL.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pftv.core.exceptions import ResolverError
from pftv.core.loader import DocumentLoader


class BaseResolver(ABC):
    """
    Abstract base class for video host resolvers.

    Subclasses set ``domain`` and implement ``extract_link``; fetching the
    player page is shared and goes through the client's loader.
    """

    #: Host domain this resolver is registered under, e.g. "example.com"
    domain: str = ""

    def __init__(self, loader: DocumentLoader):
        """
        Initialize the resolver.

        Args:
            loader: Shared document loader used to fetch player pages
        """
        self.loader = loader
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def extract_link(self, html: str) -> Optional[str]:
        """
        Find the direct media URL in a player page.

        Args:
            html: Raw source of the embedded player page

        Returns:
            Direct media URL, or None if the page holds none
        """
        pass

    async def resolve(self, embedded_url: str) -> str:
        """
        Resolve an embedded-player URL to a direct media URL.

        Args:
            embedded_url: Player page URL from a link row

        Returns:
            Direct media URL

        Raises:
            NetworkError: If the player page cannot be fetched
            ResolverError: If the page holds no direct link
        """
        html = await self.loader.fetch_text(embedded_url)
        direct_url = self.extract_link(html)

        if not direct_url:
            raise ResolverError(
                f"No direct link found on {self.domain} player page",
                domain=self.domain,
                url=embedded_url
            )

        self.logger.debug(f"Resolved {embedded_url} -> {direct_url}")
        return direct_url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(domain={self.domain!r})"


# Export base class
__all__ = ["BaseResolver"]
