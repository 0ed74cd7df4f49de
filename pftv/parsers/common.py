"""
Parser Utilities - Tree queries and text helpers shared by page parsers.

This module provides the FieldExtractor, a thin query layer over a parsed
document, plus the helpers that decide when an extracted value counts
as empty. Queries that match nothing return empty results; they never
raise. Query results are returned untrimmed; callers trim explicitly.
"""

import re
import logging
from typing import Dict, List, Optional, Pattern, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment


logger = logging.getLogger(__name__)

Node = Union[BeautifulSoup, Tag]


class FieldExtractor:
    """Utility class for CSS-selector queries against one document."""

    def __init__(self, document: Node, base_url: str = ""):
        """
        Initialize field extractor.

        Args:
            document: Parsed document or sub-tree to query
            base_url: Base URL for resolving relative links
        """
        self.document = document
        self.base_url = base_url

    def _scope(self, node: Optional[Node]) -> Node:
        return self.document if node is None else node

    def node(self, selector: str, node: Optional[Node] = None) -> Optional[Tag]:
        """Return the first node matching the selector, or None."""
        return self._scope(node).select_one(selector)

    def nodes(self, selector: str, node: Optional[Node] = None) -> List[Tag]:
        """Return every node matching the selector in document order."""
        return self._scope(node).select(selector)

    def nth(self, selector: str, ordinal: int, node: Optional[Node] = None) -> Optional[Tag]:
        """
        Return the Nth node matching the selector.

        Args:
            selector: CSS selector string
            ordinal: 1-based position in document order
            node: Optional sub-tree to query instead of the document

        Returns:
            Matching node or None when there are fewer matches
        """
        if ordinal < 1:
            return None
        matches = self.nodes(selector, node)
        return matches[ordinal - 1] if ordinal <= len(matches) else None

    def count(self, selector: str, node: Optional[Node] = None) -> int:
        """Count the nodes matching the selector."""
        return len(self.nodes(selector, node))

    def text(self, selector: str, node: Optional[Node] = None, separator: str = "") -> str:
        """
        Find text content using CSS selector.

        Args:
            selector: CSS selector string
            node: Optional sub-tree to query instead of the document
            separator: String placed between the text of adjacent nodes

        Returns:
            Full text of the first match, or "" if nothing matches
        """
        element = self.node(selector, node)
        if element is None:
            return ""
        return element.get_text(separator)

    def normalized_text(self, selector: str, node: Optional[Node] = None, separator: str = "") -> str:
        """Text of the first match with runs of whitespace collapsed."""
        return normalize_space(self.text(selector, node, separator))

    def text_nodes(self, selector: str, node: Optional[Node] = None) -> List[str]:
        """
        All descendant text nodes of the first match, in document order.

        Comments are skipped; whitespace-only strings are kept so that
        concatenating the result reproduces the rendered spacing.
        """
        element = self.node(selector, node)
        if element is None:
            return []
        return [
            str(s) for s in element.find_all(string=True)
            if not isinstance(s, Comment)
        ]

    def attr(
        self,
        selector: str,
        attr: str,
        node: Optional[Node] = None,
        resolve: bool = True
    ) -> str:
        """
        Find attribute value using CSS selector.

        Args:
            selector: CSS selector string
            attr: Attribute name
            node: Optional sub-tree to query instead of the document
            resolve: Whether href/src values are made absolute

        Returns:
            Attribute value of the first match, or "" if absent
        """
        element = self.node(selector, node)
        if element is None or not element.has_attr(attr):
            return ""
        return self._attr_value(element, attr, resolve)

    def all_attrs(self, selector: str, attr: str, node: Optional[Node] = None) -> List[str]:
        """Attribute values of every match carrying the attribute."""
        return [
            self._attr_value(element, attr)
            for element in self.nodes(selector, node)
            if element.has_attr(attr)
        ]

    def _attr_value(self, element: Tag, attr: str, resolve: bool = True) -> str:
        value = element[attr]
        # Handle case where BeautifulSoup returns a list
        if isinstance(value, list):
            value = " ".join(value)
        if resolve and attr in ('href', 'src') and self.base_url and value.strip():
            return urljoin(self.base_url, value.strip())
        return value


def direct_strings(node: Optional[Tag]) -> List[str]:
    """
    Non-blank text children of a node, excluding nested elements.

    Used for markup that mixes inline elements with free text, such as
    ``<td><a>..</a> 24 Episodes</td>`` or ``<span>A<br>B</span>``.
    """
    if node is None:
        return []
    return [
        str(child) for child in node.children
        if isinstance(child, NavigableString)
        and not isinstance(child, Comment)
        and str(child).strip()
    ]


def normalize_space(text: Optional[str]) -> str:
    """Collapse whitespace runs (including non-breaking spaces) and trim."""
    if not text:
        return ""
    return " ".join(text.split())


def clean_text(text: Optional[str]) -> Optional[str]:
    """
    Trim extracted text, mapping empty and whitespace-only values to None.

    This is the single definition of an empty text field.
    """
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None


def match_groups(pattern: Pattern[str], text: Optional[str]) -> Dict[str, Optional[str]]:
    """
    Search text with a pattern and return its named groups.

    Unmatched groups (and every group when there is no match) map to
    None; group values are trimmed and blank values become None.
    """
    groups = {name: None for name in pattern.groupindex}
    if not text:
        return groups

    match = pattern.search(text)
    if match is None:
        logger.debug(f"Pattern {pattern.pattern!r} did not match {text!r}")
        return groups

    for name, value in match.groupdict().items():
        groups[name] = clean_text(value)
    return groups


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse a decimal string into a float, or None."""
    if text is None:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_count(text: Optional[str]) -> int:
    """Parse a non-negative integer count, defaulting to 0."""
    if text is None or not re.fullmatch(r'\d+', text):
        return 0
    return int(text)


# Export utility classes and functions
__all__ = [
    "FieldExtractor",
    "direct_strings",
    "normalize_space",
    "clean_text",
    "match_groups",
    "parse_number",
    "parse_count",
]
