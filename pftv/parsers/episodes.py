"""
Episode List Parser - Extracts episodes and their links from season pages.

A season page is one long table. Each episode row is followed by an
optional description row, then any number of link rows and placeholder
rows, until the next episode row:

    tr.episode        "1. Pilot" | "S01E01 - Air Date: 24 September 2007"
    tr                description
    tr.mnllinklist    link 1
    tr.none           placeholder
    tr.mnllinklist    link 2
    tr.episode        "2. The Big Bran Hypothesis" | ...

The link rows of an episode are the link rows between it and the next
episode row. For the last episode the boundary is the end of the page.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from pftv.core.dates import DateNormalizer
from pftv.core.exceptions import NotFoundError
from pftv.core.models import Episode, EpisodeList, Link
from pftv.parsers import queries as q
from pftv.parsers.common import (
    FieldExtractor,
    clean_text,
    match_groups,
    normalize_space,
    parse_number,
)


logger = logging.getLogger(__name__)

NameNumber = Tuple[Optional[float], Optional[str]]


def _numbered(raw: str) -> Optional[NameNumber]:
    """'12. Name' -> (12.0, 'Name')"""
    match = q.EPISODE_NUMBERED_RE.match(raw)
    if match is None:
        return None
    return parse_number(match.group('number')), clean_text(match.group('name'))


def _labelled(raw: str) -> Optional[NameNumber]:
    """'Season 1 Episode 12' -> (12.0, 'Season 1 Episode 12')"""
    match = q.EPISODE_LABELLED_RE.search(raw)
    if match is None:
        return None
    return parse_number(match.group('number')), raw


def _unnumbered(raw: str) -> Optional[NameNumber]:
    return None, raw


# Row formats the site has shipped over time; first match wins
NAME_STRATEGIES: Sequence[Callable[[str], Optional[NameNumber]]] = (
    _numbered,
    _labelled,
    _unnumbered,
)


def recover_name_number(text: Optional[str]) -> NameNumber:
    """
    Split an episode row's text into number and name.

    Args:
        text: Raw text of the episode name cell

    Returns:
        (number, name); number is None when no format matched
    """
    raw = clean_text(normalize_space(text))
    if raw is None:
        return None, None

    for strategy in NAME_STRATEGIES:
        result = strategy(raw)
        if result is not None:
            return result
    return None, raw


def parse_percent(text: Optional[str]) -> Optional[float]:
    """Parse a 0-100 percentage; anything else is treated as unparsable."""
    value = parse_number(text)
    if value is None or not 0 <= value <= 100:
        return None
    return value


def _has_class(row: Tag, class_name: str) -> bool:
    return class_name in (row.get('class') or [])


class EpisodeListParser:
    """Specialized parser for season (episode list) pages."""

    def __init__(
        self,
        document: BeautifulSoup,
        normalizer: Optional[DateNormalizer] = None,
        base_url: str = ""
    ):
        """
        Initialize episode list parser.

        Args:
            document: Parsed season page
            normalizer: Date normalizer for air dates
            base_url: Page URL for resolving relative links
        """
        self.fields = FieldExtractor(document, base_url)
        self.normalizer = normalizer or DateNormalizer()

    def parse(self, show_id: str, category_id: str) -> EpisodeList:
        """
        Parse the whole season page.

        Args:
            show_id: Requested show identifier, reported on failure
            category_id: Requested season identifier, reported on failure

        Returns:
            EpisodeList record

        Raises:
            NotFoundError: If the page has no episodes, show name or season label
        """
        show_name = self.parse_show_name()
        season_label = self.parse_season_label()
        episodes = self.parse_episodes()

        if not episodes and show_name is None and season_label is None:
            raise NotFoundError(
                f"No episodes found for '{show_id}' / '{category_id}'",
                show_id=show_id,
                category_id=category_id
            )

        return EpisodeList(
            show_name=show_name,
            season_label=season_label,
            episodes=episodes,
        )

    def parse_show_name(self) -> Optional[str]:
        return clean_text(self.fields.normalized_text(q.SHOW_NAME))

    def parse_season_label(self) -> Optional[str]:
        label = self.fields.text(q.SEASON_LABEL).replace(q.SEASON_SEPARATOR, " ")
        return clean_text(normalize_space(label))

    def parse_episodes(self) -> Tuple[Episode, ...]:
        """Parse every episode row, dropping rows that are not real episodes."""
        rows = self.fields.nodes(q.EPISODE_ROWS)
        count = len(rows)
        episodes: List[Episode] = []

        for ordinal, row in enumerate(rows, start=1):
            # None marks the end of the page for the last episode
            next_row = rows[ordinal] if ordinal < count else None
            episode = self.parse_episode(row, next_row)

            if episode is None:
                logger.debug(f"Dropped episode row {ordinal}/{count}")
                continue
            episodes.append(episode)

        return tuple(episodes)

    def parse_episode(self, row: Tag, next_row: Optional[Tag]) -> Optional[Episode]:
        """
        Parse one episode row together with the rows that follow it.

        Args:
            row: The episode row
            next_row: The next episode row, or None for the last episode

        Returns:
            Episode, or None when no name and number could be recovered
        """
        number, name = recover_name_number(self.fields.text(q.EPISODE_NAME, row))
        if name is None or number is None or number == 0:
            return None

        info = match_groups(q.EPISODE_INFO_RE, self.fields.normalized_text(q.EPISODE_INFO, row))

        return Episode(
            number=number,
            name=name,
            code=info['code'],
            air_date=self.normalizer.normalize(info['date']),
            description=self.parse_description(row),
            links=tuple(self.parse_link(link_row) for link_row in self.link_rows(row, next_row)),
        )

    def parse_description(self, row: Tag) -> Optional[str]:
        following = row.find_next_sibling(q.ROW_TAG)
        if following is None or _has_class(following, q.EPISODE_ROW_CLASS):
            return None
        return clean_text(self.fields.normalized_text(q.EPISODE_DESCRIPTION, following))

    def link_rows(self, row: Tag, next_row: Optional[Tag]) -> List[Tag]:
        """
        Collect the link rows belonging to an episode.

        Walks the rows after ``row`` in document order up to, but not
        including, ``next_row``. With ``next_row`` None the walk runs to
        the end of the document. Description and placeholder rows in
        between are skipped.
        """
        window: List[Tag] = []

        for element in row.next_elements:
            if element is next_row:
                break
            if isinstance(element, Tag) and element.name == q.ROW_TAG and _has_class(element, q.LINK_ROW_CLASS):
                window.append(element)

        return window

    def parse_link(self, row: Tag) -> Link:
        host_info = match_groups(
            q.LINK_HOST_INFO_RE,
            self.fields.normalized_text(q.LINK_HOST_INFO, row, separator=" ")
        )
        working = match_groups(q.LINK_WORKING_RE, self.fields.normalized_text(q.LINK_WORKING, row))

        return Link(
            url=clean_text(self.fields.attr(q.LINK_URL, 'href', row)),
            name=clean_text(self.fields.normalized_text(q.LINK_NAME, row)),
            host=host_info['host'],
            loading_time=host_info['loading_time'],
            submitted_by=host_info['submitted'],
            working_percent=parse_percent(working['percent']),
        )


def parse_episode_list(
    document: BeautifulSoup,
    show_id: str,
    category_id: str,
    normalizer: Optional[DateNormalizer] = None,
    base_url: str = ""
) -> EpisodeList:
    """Parse a season page into an EpisodeList record."""
    return EpisodeListParser(document, normalizer, base_url).parse(show_id, category_id)


# Export parser and helpers
__all__ = [
    "EpisodeListParser",
    "NAME_STRATEGIES",
    "parse_episode_list",
    "parse_percent",
    "recover_name_number",
]
