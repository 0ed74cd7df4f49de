"""
Core Layer - Records, configuration, retrieval and link resolution.

This module contains the data models, typed errors, settings handling,
document loader, resolver registry and the client facade that ties the
parsers to the network.
"""

from pftv.core.config_manager import ConfigManager
from pftv.core.config_schemas import AppSettings, LoggingSettings, NetworkSettings, ScraperSettings
from pftv.core.dates import DateNormalizer
from pftv.core.exceptions import (
    ConfigurationError,
    NetworkError,
    NotFoundError,
    PFTVError,
    ResolverError,
    ResolverNotFoundError,
)
from pftv.core.models import Category, Episode, EpisodeList, Link, NextEpisode, Show
from pftv.core.loader import DocumentLoader
from pftv.core.resolver_manager import ResolverManager
from pftv.core.client import PFTVClient

__all__ = [
    # Data Models
    "Category",
    "Episode",
    "EpisodeList",
    "Link",
    "NextEpisode",
    "Show",
    # Configuration Management
    "ConfigManager",
    "AppSettings",
    "LoggingSettings",
    "NetworkSettings",
    "ScraperSettings",
    # Services
    "DateNormalizer",
    "DocumentLoader",
    "ResolverManager",
    "PFTVClient",
    # Exceptions
    "PFTVError",
    "ConfigurationError",
    "NetworkError",
    "NotFoundError",
    "ResolverError",
    "ResolverNotFoundError",
]
