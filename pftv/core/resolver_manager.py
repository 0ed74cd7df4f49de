"""
Resolver Manager - Discovery and lookup of video host resolvers.

This module scans the ``pftv.resolvers`` package for BaseResolver
subclasses, registers each under its host domain and dispatches
embedded-player URLs to the matching resolver.
"""

import importlib
import inspect
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from pftv.core.exceptions import ResolverError, ResolverNotFoundError
from pftv.core.loader import DocumentLoader
from pftv.core.utils import extract_domain
from pftv.resolvers.base import BaseResolver


logger = logging.getLogger(__name__)


class ResolverManager:
    """
    Registry mapping host domains to resolver implementations.

    Resolver classes are discovered lazily on first lookup; instances are
    created on demand and share the manager's document loader.
    """

    def __init__(self, loader: DocumentLoader, resolvers_dir: Optional[Path] = None):
        """
        Initialize resolver manager.

        Args:
            loader: Document loader handed to every resolver instance
            resolvers_dir: Directory containing resolver modules (defaults to pftv/resolvers)
        """
        self.loader = loader
        self.resolvers_dir = resolvers_dir or Path(__file__).parent.parent / "resolvers"

        self._available_resolvers: Dict[str, Type[BaseResolver]] = {}
        self._loaded_resolvers: Dict[str, BaseResolver] = {}
        self._resolver_errors: Dict[str, Exception] = {}

        self._discovery_complete = False

    def discover(self) -> None:
        """
        Discover resolver modules in the resolvers directory.

        A module that fails to import is recorded in the status report and
        skipped; the remaining resolvers stay usable.
        """
        self._discovery_complete = True

        if not self.resolvers_dir.exists():
            logger.warning(f"Resolvers directory does not exist: {self.resolvers_dir}")
            return

        logger.debug(f"Discovering resolvers in {self.resolvers_dir}")

        resolver_files = sorted(self.resolvers_dir.glob("*.py"))
        resolver_files = [f for f in resolver_files if f.name not in ["__init__.py", "base.py"]]

        for resolver_file in resolver_files:
            try:
                self._discover_resolver_module(resolver_file)
            except ResolverError as e:
                self._resolver_errors[resolver_file.stem] = e
                logger.error(f"Failed to discover resolver {resolver_file.stem}: {e}")

        logger.info(f"Resolver discovery complete: {len(self._available_resolvers)} resolvers found")

    def _discover_resolver_module(self, resolver_file: Path) -> None:
        """
        Register the resolvers defined in one module file.

        Args:
            resolver_file: Path to the resolver module file
        """
        module_name = f"pftv.resolvers.{resolver_file.stem}"

        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            raise ResolverError(f"Failed to import resolver module {module_name}: {e}", details=str(e))

        found = False
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if (issubclass(obj, BaseResolver) and
                    obj is not BaseResolver and
                    not inspect.isabstract(obj) and
                    obj.__module__ == module.__name__):
                self.register(obj)
                found = True

        if not found:
            logger.warning(f"No resolver class found in {resolver_file}")

    def register(self, resolver_class: Type[BaseResolver]) -> None:
        """
        Register a resolver class under its domain.

        Args:
            resolver_class: Concrete BaseResolver subclass

        Raises:
            ResolverError: If the class declares no domain
        """
        domain = extract_domain(resolver_class.domain)
        if domain is None:
            raise ResolverError(f"Resolver {resolver_class.__name__} declares no domain")

        if domain in self._available_resolvers:
            logger.warning(
                f"Resolver for {domain} replaced: "
                f"{self._available_resolvers[domain].__name__} -> {resolver_class.__name__}"
            )

        self._available_resolvers[domain] = resolver_class
        self._loaded_resolvers.pop(domain, None)
        logger.debug(f"Registered resolver: {domain} ({resolver_class.__name__})")

    @staticmethod
    def domain_for(url: str) -> Optional[str]:
        """Registry key for a URL: lower-cased host without www. or port."""
        return extract_domain(url)

    def get(self, domain: str) -> Optional[BaseResolver]:
        """
        Get the resolver registered for a domain.

        Args:
            domain: Host domain (``www.`` and port are ignored)

        Returns:
            Resolver instance or None if no resolver is registered
        """
        if not self._discovery_complete:
            self.discover()

        key = extract_domain(domain)
        if key is None:
            return None

        if key in self._loaded_resolvers:
            return self._loaded_resolvers[key]

        resolver_class = self._available_resolvers.get(key)
        if resolver_class is None:
            return None

        resolver = resolver_class(self.loader)
        self._loaded_resolvers[key] = resolver
        return resolver

    def get_or_raise(self, domain: str, url: Optional[str] = None) -> BaseResolver:
        """
        Get the resolver registered for a domain.

        Raises:
            ResolverNotFoundError: If no resolver is registered for the domain
        """
        resolver = self.get(domain)
        if resolver is None:
            available = ", ".join(self.list_domains()) or "none"
            raise ResolverNotFoundError(
                f"No resolver registered for '{domain}'. Available resolvers: {available}",
                domain=domain,
                url=url
            )
        return resolver

    async def resolve(self, embedded_url: str) -> str:
        """
        Resolve an embedded-player URL with the resolver for its domain.

        Args:
            embedded_url: Player page URL from a link row

        Returns:
            Direct media URL

        Raises:
            ResolverNotFoundError: If no resolver handles the URL's domain
            ResolverError: If the resolver finds no direct link
            NetworkError: If the player page cannot be fetched
        """
        domain = self.domain_for(embedded_url)
        if domain is None:
            raise ResolverNotFoundError(
                f"Cannot determine host of '{embedded_url}'",
                url=embedded_url
            )

        resolver = self.get_or_raise(domain, url=embedded_url)
        logger.debug(f"Resolving {embedded_url} with {resolver!r}")
        return await resolver.resolve(embedded_url)

    def list_domains(self) -> List[str]:
        """Get the sorted list of registered domains."""
        if not self._discovery_complete:
            self.discover()
        return sorted(self._available_resolvers)

    def get_status(self) -> Dict[str, Any]:
        """
        Get status information for all resolvers.

        Returns:
            Dictionary with per-domain resolver info and discovery errors
        """
        if not self._discovery_complete:
            self.discover()

        return {
            "discovered": len(self._available_resolvers),
            "loaded": len(self._loaded_resolvers),
            "errors": {name: str(error) for name, error in self._resolver_errors.items()},
            "resolvers": {
                domain: {
                    "class": resolver_class.__name__,
                    "module": resolver_class.__module__,
                    "loaded": domain in self._loaded_resolvers,
                }
                for domain, resolver_class in sorted(self._available_resolvers.items())
            },
        }


# Export manager
__all__ = ["ResolverManager"]
