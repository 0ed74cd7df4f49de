"""
Core Exceptions - Custom exception classes for PFTV.

This module defines the typed failures surfaced by the scraper. Field-level
extraction problems never raise; only document-level failures do.
"""

from typing import Optional, Any


class PFTVError(Exception):
    """Base exception class for all PFTV-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize PFTV error.

        Args:
            message: Human-readable error message
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PFTVError):
    """Raised when configuration-related errors occur."""

    def __init__(self, message: str, config_path: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_path: Path to the problematic configuration file
            details: Additional error context
        """
        super().__init__(message, details)
        self.config_path = config_path


class NetworkError(PFTVError):
    """Raised when a document cannot be retrieved."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, details: Optional[Any] = None):
        """
        Initialize network error.

        Args:
            message: Error description
            url: URL that caused the error
            status_code: HTTP status code if applicable
            details: Additional error context
        """
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class NotFoundError(PFTVError):
    """Raised when a show (or show season) has no recoverable content."""

    def __init__(
        self,
        message: str,
        show_id: Optional[str] = None,
        category_id: Optional[str] = None,
        details: Optional[Any] = None
    ):
        """
        Initialize not-found error.

        Args:
            message: Error description
            show_id: Requested show identifier
            category_id: Requested season identifier, if any
            details: Additional error context
        """
        super().__init__(message, details)
        self.show_id = show_id
        self.category_id = category_id


class ResolverError(PFTVError):
    """Raised when an embedded link cannot be resolved to a direct URL."""

    def __init__(
        self,
        message: str,
        domain: Optional[str] = None,
        url: Optional[str] = None,
        details: Optional[Any] = None
    ):
        super().__init__(message, details)
        self.domain = domain
        self.url = url


class ResolverNotFoundError(ResolverError):
    """Raised when no resolver is registered for a host domain."""


# Export all exception classes
__all__ = [
    "PFTVError",
    "ConfigurationError",
    "NetworkError",
    "NotFoundError",
    "ResolverError",
    "ResolverNotFoundError",
]
