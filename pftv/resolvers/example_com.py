"""
Example.com Resolver - Reference resolver for players that embed a JW-style
``file: "..."`` setup in inline script.

New hosts are added by copying this module, changing ``domain`` and the
pattern. Modules in this package are discovered automatically.
"""

import re
from typing import Optional

from pftv.resolvers.base import BaseResolver


FILE_RE = re.compile(r'file:.?"(?P<url>.*?)"', re.IGNORECASE)


class ExampleComResolver(BaseResolver):
    """Resolver for example.com player pages."""

    domain = "example.com"

    def extract_link(self, html: str) -> Optional[str]:
        match = FILE_RE.search(html)
        if match is None:
            return None
        return match.group('url').strip() or None


__all__ = ["ExampleComResolver"]
