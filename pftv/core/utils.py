"""
Core Utilities - URL helpers shared across PFTV.
"""

from typing import Optional
from urllib.parse import urljoin, urlparse


def is_absolute_url(url: str) -> bool:
    """Check if URL is absolute."""
    return bool(urlparse(url).netloc)


def make_absolute(url: str, base_url: str) -> str:
    """Convert relative URL to absolute."""
    if is_absolute_url(url):
        return url
    return urljoin(base_url, url)


def extract_domain(url: Optional[str]) -> Optional[str]:
    """
    Extract the resolver key from a URL.

    The host is lower-cased with any port and leading ``www.`` removed,
    so ``http://WWW.Example.com:8080/embed`` gives ``example.com``.
    Bare domains without a scheme are accepted too.
    """
    if not url:
        return None
    candidate = url.strip()
    if "//" not in candidate:
        candidate = "//" + candidate
    host = urlparse(candidate).hostname or ""
    if host.startswith("www."):
        host = host[4:]
    return host or None


__all__ = ["is_absolute_url", "make_absolute", "extract_domain"]
