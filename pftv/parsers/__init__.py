"""
Parser Layer - Extraction of typed records from listing pages.

This package turns one fetched document into a Show or an EpisodeList
record using the query catalogue in ``pftv.parsers.queries``.
"""

from pftv.parsers.common import FieldExtractor
from pftv.parsers.show import ShowInfoParser, parse_show_info
from pftv.parsers.episodes import EpisodeListParser, parse_episode_list

__all__ = [
    "FieldExtractor",
    "ShowInfoParser",
    "EpisodeListParser",
    "parse_show_info",
    "parse_episode_list",
]
