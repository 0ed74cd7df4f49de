"""
Show Parser - Extracts show records from show pages.

Each field is extracted independently: a missing or malformed fragment
only nulls that field. The page as a whole is rejected only when it has
neither a title nor any season blocks.
"""

import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from pftv.core.dates import DateNormalizer
from pftv.core.exceptions import NotFoundError
from pftv.core.models import Category, NextEpisode, Show
from pftv.parsers import queries as q
from pftv.parsers.common import (
    FieldExtractor,
    clean_text,
    direct_strings,
    match_groups,
    normalize_space,
    parse_count,
)


logger = logging.getLogger(__name__)


class ShowInfoParser:
    """Specialized parser for show pages."""

    def __init__(
        self,
        document: BeautifulSoup,
        normalizer: Optional[DateNormalizer] = None,
        base_url: str = ""
    ):
        """
        Initialize show parser.

        Args:
            document: Parsed show page
            normalizer: Date normalizer for the next-episode air date
            base_url: Page URL for resolving relative links
        """
        self.fields = FieldExtractor(document, base_url)
        self.normalizer = normalizer or DateNormalizer()

    def parse(self, show_id: str) -> Show:
        """
        Parse the whole show page.

        Args:
            show_id: Requested show identifier, reported on failure

        Returns:
            Show record, possibly with null fields

        Raises:
            NotFoundError: If the page has no title and no seasons
        """
        title = self.parse_title()
        categories = self.parse_categories()

        if title is None and not categories:
            raise NotFoundError(
                f"No show found for '{show_id}'",
                show_id=show_id
            )

        show = Show(
            title=title,
            plot=self.parse_plot(),
            image_url=self.parse_image_url(),
            trailers=self.parse_trailers(),
            next_episode=self.parse_next_episode(),
            categories=categories,
        )
        logger.debug(f"Parsed show '{show_id}': {len(show.categories)} categories")
        return show

    def parse_title(self) -> Optional[str]:
        return clean_text(self.fields.normalized_text(q.TITLE))

    def parse_plot(self) -> Optional[str]:
        """Plot text is split across inline nodes; join them in order."""
        return clean_text(normalize_space("".join(self.fields.text_nodes(q.PLOT))))

    def parse_image_url(self) -> Optional[str]:
        return clean_text(self.fields.attr(q.IMAGE, 'src'))

    def parse_trailers(self) -> Tuple[str, ...]:
        urls = (clean_text(href) for href in self.fields.all_attrs(q.TRAILER_LINKS, 'href'))
        return tuple(url for url in urls if url is not None)

    def parse_categories(self) -> Tuple[Category, ...]:
        """Parse season blocks in page order."""
        categories: List[Category] = []

        for block in self.fields.nodes(q.CATEGORY_BLOCKS):
            # Trailing free text reads like "24 Episodes, 312 Links"
            trailing = normalize_space(" ".join(direct_strings(block)))
            counts = match_groups(q.CATEGORY_COUNTS_RE, trailing)

            categories.append(Category(
                id=clean_text(self.fields.attr(q.CATEGORY_LINK, 'href', block, resolve=False)),
                name=clean_text(self.fields.normalized_text(q.CATEGORY_NAME, block)),
                episode_count=parse_count(counts['episodes']),
                link_count=parse_count(counts['links']),
            ))

        return tuple(categories)

    def parse_next_episode(self) -> Optional[NextEpisode]:
        """
        Parse the next-episode marker.

        The marker holds two text lines, "Next Episode: <date>" and
        "<code> - <name>". A marker reading "Finished" means the show
        has ended and no next episode is reported.
        """
        marker = self.fields.node(q.NEXT_EPISODE)
        if marker is None:
            return None

        if normalize_space(marker.get_text()).lower() == q.FINISHED_SENTINEL:
            return None

        lines = direct_strings(marker)
        date_line = clean_text(lines[0]) if len(lines) > 0 else None
        title_line = clean_text(lines[1]) if len(lines) > 1 else None

        date_fragment = match_groups(q.NEXT_AIR_DATE_RE, date_line)['date']
        code_name = match_groups(q.NEXT_CODE_NAME_RE, title_line)

        return NextEpisode(
            name=code_name['name'],
            code=code_name['code'],
            air_date=self.normalizer.normalize(date_fragment),
        )


def parse_show_info(
    document: BeautifulSoup,
    show_id: str,
    normalizer: Optional[DateNormalizer] = None,
    base_url: str = ""
) -> Show:
    """Parse a show page into a Show record."""
    return ShowInfoParser(document, normalizer, base_url).parse(show_id)


# Export parser
__all__ = ["ShowInfoParser", "parse_show_info"]
