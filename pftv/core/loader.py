"""
Document Loader - HTTP retrieval of listing pages.

This module fetches raw HTML with retry and timeout handling and hands
back a parsed BeautifulSoup tree. Parsing uses the lenient html.parser
backend because the site's markup is routinely malformed.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup

from pftv.core.config_schemas import NetworkSettings
from pftv.core.exceptions import NetworkError


logger = logging.getLogger(__name__)


class DocumentLoader:
    """
    Fetches pages over HTTP and parses them into document trees.

    One loader owns one aiohttp session; it is shared by the client and
    by every link resolver so connections are pooled.
    """

    def __init__(self, settings: Optional[NetworkSettings] = None):
        """
        Initialize the loader.

        Args:
            settings: Network settings (timeouts, retries, redirects)
        """
        self.settings = settings or NetworkSettings()
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session with proper configuration."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.settings.timeout)

            headers = {
                'User-Agent': self.settings.user_agent,
                'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
                'Accept-Language': 'en-US,en;q=0.5',
            }

            self._session = aiohttp.ClientSession(timeout=timeout, headers=headers)

        return self._session

    async def fetch_text(self, url: str) -> str:
        """
        Get text content from URL.

        Args:
            url: Absolute URL to fetch

        Returns:
            Response body as text

        Raises:
            NetworkError: On HTTP error status or after all retries fail
        """
        max_retries = self.settings.max_retries
        last_exception: Optional[BaseException] = None

        for attempt in range(max_retries + 1):
            try:
                logger.debug(f"Making GET request to {url} (attempt {attempt + 1})")

                async with self.session.get(
                    url,
                    allow_redirects=self.settings.max_redirects > 0,
                    max_redirects=self.settings.max_redirects,
                ) as response:
                    if response.status >= 400:
                        error_text = await response.text(errors='replace')
                        raise NetworkError(
                            f"HTTP {response.status} error for {url}",
                            url=url,
                            status_code=response.status,
                            details=error_text[:500]
                        )

                    return await response.text(errors='replace')

            except NetworkError as e:
                # Client errors will not change on retry
                if e.status_code is not None and e.status_code < 500:
                    raise
                last_exception = e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_exception = e

            logger.warning(f"Request failed (attempt {attempt + 1}): {last_exception}")
            if attempt < max_retries:
                await asyncio.sleep(self.settings.retry_delay * (attempt + 1))

        if isinstance(last_exception, NetworkError):
            raise last_exception
        raise NetworkError(
            f"Request failed after {max_retries + 1} attempts: {last_exception}",
            url=url,
            details=str(last_exception)
        )

    async def fetch_document(self, url: str) -> BeautifulSoup:
        """
        Fetch a page and parse it into a document tree.

        Args:
            url: Absolute URL to fetch

        Returns:
            Parsed document
        """
        html = await self.fetch_text(url)
        logger.info(f"Fetched {url} ({len(html)} characters)")
        return BeautifulSoup(html, 'html.parser')

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("HTTP session closed")
        self._session = None

    async def __aenter__(self) -> "DocumentLoader":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


# Export loader
__all__ = ["DocumentLoader"]
