"""
Date Normalization - Permissive date parsing with configurable output.

Dates on the listings site appear in several loose textual forms
("24 September 2007", "Sep 24, 2007", "24/09/2007"). The normalizer
parses any of them and renders the date in the configured format, or
returns None when no calendar date can be recognized.
"""

import logging
import re
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser


logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%d/%m/%Y"

# Token form -> strftime directive
_FORMAT_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "DD": "%d",
    "dddd": "%A",
    "ddd": "%a",
}
_FORMAT_TOKEN_RE = re.compile(
    "|".join(sorted(_FORMAT_TOKENS, key=len, reverse=True))
)

# Full calendar dates only; isoparse would fill in a missing month or day
_ISO_DATE_RE = re.compile(r"^\d{4}-?\d{2}-?\d{2}(?:[T ]|$)")

# Two defaults differing in year, month and day
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def to_strftime(date_format: str) -> str:
    """
    Translate a token format such as ``DD MMM YYYY`` into strftime form.

    Formats that already contain ``%`` directives are returned unchanged.
    """
    if '%' in date_format:
        return date_format
    return _FORMAT_TOKEN_RE.sub(lambda m: _FORMAT_TOKENS[m.group(0)], date_format)


class DateNormalizer:
    """Parse loose date fragments and re-render them in one output format."""

    def __init__(self, date_format: str = DEFAULT_DATE_FORMAT):
        """
        Initialize date normalizer.

        Args:
            date_format: Output format, strftime or token form
        """
        self.date_format = date_format
        self.output_format = to_strftime(date_format)

        # Numeric dates are read in the same day/month order the output uses,
        # so normalizing an already normalized value is stable.
        day_pos = self.output_format.find('%d')
        month_pos = self.output_format.find('%m')
        self.dayfirst = not (0 <= month_pos < day_pos) if day_pos >= 0 else True

    def parse(self, fragment: Optional[str]) -> Optional[datetime]:
        """
        Parse a fragment into a datetime.

        Args:
            fragment: Free text suspected to contain a date

        Returns:
            Parsed datetime or None if no date is recognizable
        """
        if fragment is None:
            return None

        text = fragment.strip()
        if not text:
            return None

        if _ISO_DATE_RE.match(text):
            try:
                return date_parser.isoparse(text)
            except (ValueError, OverflowError):
                pass

        # Parts missing from the fragment are filled from the default, so
        # they come out different under two defaults that share no part.
        try:
            first, second = (
                date_parser.parse(text, dayfirst=self.dayfirst, default=default)
                for default in _FILL_DEFAULTS
            )
        except (ValueError, OverflowError) as e:
            logger.debug(f"Unparsable date fragment {text!r}: {e}")
            return None

        if first.date() != second.date():
            logger.debug(f"No full calendar date in fragment {text!r}")
            return None
        return first

    def normalize(self, fragment: Optional[str]) -> Optional[str]:
        """
        Normalize a date fragment to the configured output format.

        Args:
            fragment: Free text suspected to contain a date

        Returns:
            Formatted date string or None if the fragment holds no date
        """
        parsed = self.parse(fragment)
        if parsed is None:
            return None
        return parsed.strftime(self.output_format)

    def __repr__(self) -> str:
        return f"DateNormalizer(date_format='{self.date_format}')"


# Export date helpers
__all__ = ["DEFAULT_DATE_FORMAT", "DateNormalizer", "to_strftime"]
