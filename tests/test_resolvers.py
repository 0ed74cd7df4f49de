"""Resolver registry and the example.com resolver."""

import pytest

from pftv.core.exceptions import NetworkError, ResolverError, ResolverNotFoundError
from pftv.core.resolver_manager import ResolverManager
from pftv.resolvers.base import BaseResolver
from pftv.resolvers.example_com import ExampleComResolver

from conftest import FakeLoader


PLAYER_PAGE = """
<html><body><div id="player"></div>
<script>
jwplayer("player").setup({
    file: "http://cdn.example.com/media/abc123.mp4",
    image: "http://cdn.example.com/thumb.jpg"
});
</script></body></html>
"""


class VidHostResolver(BaseResolver):
    domain = "vidhost.net"

    def extract_link(self, html):
        return "http://vidhost.net/direct.mp4" if "ok" in html else None


@pytest.fixture
def loader():
    return FakeLoader({
        "http://www.example.com/embed/abc123": PLAYER_PAGE,
        "http://example.com/embed/empty": "<html><body>Removed</body></html>",
    })


@pytest.fixture
def manager(loader):
    return ResolverManager(loader)


def test_example_com_pattern():
    resolver = ExampleComResolver(FakeLoader())
    assert resolver.extract_link(PLAYER_PAGE) == "http://cdn.example.com/media/abc123.mp4"
    assert resolver.extract_link('FILE:"http://a/b.flv"') == "http://a/b.flv"
    assert resolver.extract_link("<html></html>") is None


def test_discovery_registers_resolver_modules(manager):
    assert "example.com" in manager.list_domains()
    assert isinstance(manager.get("example.com"), ExampleComResolver)
    status = manager.get_status()
    assert status["resolvers"]["example.com"]["class"] == "ExampleComResolver"
    assert status["errors"] == {}


def test_get_normalizes_domain_and_caches_instances(manager):
    resolver = manager.get("WWW.Example.com")
    assert resolver is manager.get("example.com")
    assert manager.get("unknown.org") is None


def test_get_or_raise_lists_available_domains(manager):
    with pytest.raises(ResolverNotFoundError) as exc_info:
        manager.get_or_raise("unknown.org")
    assert exc_info.value.domain == "unknown.org"
    assert "example.com" in str(exc_info.value)


def test_register_adds_domain(manager):
    manager.register(VidHostResolver)
    assert manager.list_domains() == ["example.com", "vidhost.net"]
    assert isinstance(manager.get("vidhost.net"), VidHostResolver)


def test_register_requires_domain(manager):
    class Nameless(BaseResolver):
        def extract_link(self, html):
            return None

    with pytest.raises(ResolverError):
        manager.register(Nameless)


def test_domain_for():
    assert ResolverManager.domain_for("http://www.example.com/embed/1") == "example.com"


@pytest.mark.asyncio
async def test_resolve_dispatches_by_domain(manager, loader):
    direct = await manager.resolve("http://www.example.com/embed/abc123")
    assert direct == "http://cdn.example.com/media/abc123.mp4"
    assert loader.requested == ["http://www.example.com/embed/abc123"]


@pytest.mark.asyncio
async def test_resolve_without_direct_link_raises(manager):
    with pytest.raises(ResolverError) as exc_info:
        await manager.resolve("http://example.com/embed/empty")
    assert not isinstance(exc_info.value, ResolverNotFoundError)
    assert exc_info.value.domain == "example.com"
    assert exc_info.value.url == "http://example.com/embed/empty"


@pytest.mark.asyncio
async def test_resolve_unknown_host_raises(manager, loader):
    with pytest.raises(ResolverNotFoundError):
        await manager.resolve("http://unknown.org/embed/1")
    assert loader.requested == []


@pytest.mark.asyncio
async def test_resolve_surfaces_retrieval_failure(manager):
    with pytest.raises(NetworkError):
        await manager.resolve("http://example.com/embed/missing")
