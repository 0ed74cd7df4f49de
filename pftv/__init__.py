"""
PFTV - Scraper and command-line browser for Project Free TV listings.

Reads show pages and season pages into typed records, and resolves the
embedded-player links they list into direct media URLs.
"""

__version__ = "0.1.0"
__author__ = "PFTV Team"

# Package metadata
__title__ = "pftv"
__description__ = "Scraper and command-line browser for Project Free TV listings"
__license__ = "MIT"

# Version info tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split(".")))

# Export main components for easy importing
from pftv.core.models import Category, Episode, EpisodeList, Link, NextEpisode, Show
from pftv.core.client import PFTVClient
from pftv.cli.main import cli_main

__all__ = [
    "__version__",
    "__author__",
    "Category",
    "Episode",
    "EpisodeList",
    "Link",
    "NextEpisode",
    "Show",
    "PFTVClient",
    "cli_main",
]
