"""Shared pytest fixtures: HTML pages and an offline document loader."""

from pathlib import Path
from typing import Dict, List, Optional

import pytest
from bs4 import BeautifulSoup

from pftv.core.config_schemas import NetworkSettings
from pftv.core.exceptions import NetworkError
from pftv.core.loader import DocumentLoader


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

SHOW_URL = "http://projectfreetv.club/internet/the-big-bang-theory/"
SEASON_URL = "http://projectfreetv.club/internet/the-big-bang-theory/season-1/"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FakeLoader(DocumentLoader):
    """DocumentLoader serving canned pages by URL instead of the network."""

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        super().__init__(NetworkSettings())
        self.pages = dict(pages or {})
        self.requested: List[str] = []

    async def fetch_text(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.pages:
            raise NetworkError(f"HTTP 404 error for {url}", url=url, status_code=404)
        return self.pages[url]


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_document():
    """Parse a fixture file the way the loader parses fetched pages."""
    def _load(name: str) -> BeautifulSoup:
        return BeautifulSoup(read_fixture(name), "html.parser")
    return _load


@pytest.fixture
def site_loader() -> FakeLoader:
    """Loader serving the show and season fixtures at their site URLs."""
    return FakeLoader({
        SHOW_URL: read_fixture("show.html"),
        SEASON_URL: read_fixture("episodes.html"),
    })
