"""
Error Handler - Error panels with context and suggestions.

This module renders PFTV's typed errors as Rich panels, each with the
fields the error carries and a short list of things to try next.
"""

import traceback
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from pftv.core.exceptions import (
    ConfigurationError,
    NetworkError,
    NotFoundError,
    PFTVError,
    ResolverError,
    ResolverNotFoundError,
)
from pftv.ui.console import get_console
from pftv.ui.themes import get_palette


class ErrorHandler:
    """Handles error display with consistent formatting and helpful context."""

    def __init__(self):
        """Initialize error handler with current palette."""
        self.palette = get_palette()

    @property
    def console(self) -> Console:
        return get_console()

    def handle_error(
        self,
        error: Exception,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """
        Handle and display an error with appropriate formatting.

        Args:
            error: Exception to handle
            context: Additional context about where the error occurred
            show_traceback: Whether to show the full traceback
        """
        if isinstance(error, ConfigurationError):
            self._display_configuration_error(error, context, show_traceback)
        elif isinstance(error, NetworkError):
            self._display_network_error(error, context, show_traceback)
        elif isinstance(error, NotFoundError):
            self._display_not_found_error(error, context, show_traceback)
        elif isinstance(error, ResolverError):
            self._display_resolver_error(error, context, show_traceback)
        elif isinstance(error, PFTVError):
            self._render(
                "❌ Error", error.message, [], [], context,
                details=error.details, show_traceback=show_traceback
            )
        else:
            self._render(
                "💥 Unexpected Error",
                f"{error.__class__.__name__}: {error}",
                [],
                [
                    "Check the command syntax and arguments",
                    "Run again with [cyan]--debug[/cyan] for more detail",
                    "Report this issue if it persists",
                ],
                context,
                show_traceback=show_traceback
            )

    def _render(
        self,
        title: str,
        message: str,
        fields: List[str],
        suggestions: List[str],
        context: Optional[str] = None,
        details: Optional[object] = None,
        show_traceback: bool = False
    ) -> None:
        """Assemble and print one error panel."""
        content_parts = [f"[{self.palette.error}]{message}[/{self.palette.error}]"]
        content_parts.extend(fields)

        if context:
            content_parts.append(f"\n[dim]Context:[/dim] {context}")

        if suggestions:
            content_parts.append(f"\n\n[{self.palette.info}]💡 Suggestions:[/{self.palette.info}]")
            for suggestion in suggestions:
                content_parts.append(f"• {suggestion}")

        if show_traceback and details:
            content_parts.append(f"\n\n[dim]Details:[/dim]\n{details}")

        if show_traceback:
            content_parts.append(f"\n\n[dim]Traceback:[/dim]\n{traceback.format_exc()}")

        panel = Panel(
            "\n".join(content_parts),
            title=title,
            border_style=self.palette.error,
            padding=(1, 2)
        )

        self.console.print(panel)

    def _display_configuration_error(
        self,
        error: ConfigurationError,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """Display configuration error with specific suggestions."""
        fields = []
        if error.config_path:
            fields.append(f"\n[dim]Configuration file:[/dim] [cyan]{error.config_path}[/cyan]")

        suggestions = [
            "Check configuration file syntax and format",
            "Use [cyan]pftv config show[/cyan] to list valid keys",
            "Reset to defaults with [cyan]pftv config reset[/cyan]",
        ]

        self._render(
            "⚙️  Configuration Error", error.message, fields, suggestions, context,
            details=error.details, show_traceback=show_traceback
        )

    def _display_network_error(
        self,
        error: NetworkError,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """Display network error with connectivity suggestions."""
        fields = []
        if error.url:
            fields.append(f"\n[dim]URL:[/dim] [blue]{error.url}[/blue]")
        if error.status_code:
            fields.append(f"\n[dim]Status Code:[/dim] {error.status_code}")

        suggestions = [
            "Check your internet connection",
            "Verify the site is reachable at the configured base URL",
            "Try again in a few moments",
        ]

        if error.status_code:
            if error.status_code == 403:
                suggestions.insert(0, "The site may be blocking requests - try a different user agent")
            elif error.status_code == 404:
                suggestions.insert(0, "Check the show id; the page may have moved")
            elif error.status_code >= 500:
                suggestions.insert(0, "The site is experiencing issues")

        self._render(
            "🌐 Network Error", error.message, fields, suggestions, context,
            details=error.details, show_traceback=show_traceback
        )

    def _display_not_found_error(
        self,
        error: NotFoundError,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """Display not-found error for shows and seasons."""
        fields = []
        if error.show_id:
            fields.append(f"\n[dim]Show:[/dim] [cyan]{error.show_id}[/cyan]")
        if error.category_id:
            fields.append(f"\n[dim]Season:[/dim] [cyan]{error.category_id}[/cyan]")

        suggestions = [
            "Check the show id against the site's URL for the show",
            "List valid season ids with [cyan]pftv show SHOW_ID[/cyan]",
        ]

        self._render(
            "🔍 Not Found", error.message, fields, suggestions, context,
            details=error.details, show_traceback=show_traceback
        )

    def _display_resolver_error(
        self,
        error: ResolverError,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """Display link resolution error."""
        fields = []
        if error.domain:
            fields.append(f"\n[dim]Host:[/dim] [cyan]{error.domain}[/cyan]")
        if error.url:
            fields.append(f"\n[dim]URL:[/dim] [blue]{error.url}[/blue]")

        if isinstance(error, ResolverNotFoundError):
            suggestions = [
                "List supported hosts with [cyan]pftv resolvers[/cyan]",
                "Try another link for the same episode",
            ]
        else:
            suggestions = [
                "The host may have changed its player page",
                "Try another link for the same episode",
            ]

        self._render(
            "🔗 Resolver Error", error.message, fields, suggestions, context,
            details=error.details, show_traceback=show_traceback
        )

    def display_warning(self, message: str, title: str = "⚠️  Warning") -> None:
        """Display a warning message."""
        panel = Panel(
            f"[{self.palette.warning}]{message}[/{self.palette.warning}]",
            title=f"[{self.palette.warning}]{title}[/{self.palette.warning}]",
            border_style=self.palette.warning,
            padding=(1, 2)
        )

        self.console.print(panel)

    def display_info(self, message: str, title: str = "ℹ️  Information") -> None:
        """Display an information message."""
        panel = Panel(
            f"[{self.palette.info}]{message}[/{self.palette.info}]",
            title=f"[{self.palette.info}]{title}[/{self.palette.info}]",
            border_style=self.palette.info,
            padding=(1, 2)
        )

        self.console.print(panel)


# Global error handler instance
_error_handler = ErrorHandler()


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    return _error_handler


def handle_error(
    error: Exception,
    context: Optional[str] = None,
    show_traceback: bool = False
) -> None:
    """
    Handle and display an error using the global error handler.

    Args:
        error: Exception to handle
        context: Additional context
        show_traceback: Whether to show traceback
    """
    _error_handler.handle_error(error, context, show_traceback)


def display_warning(message: str, title: str = "⚠️  Warning") -> None:
    """Display a warning message using the global error handler."""
    _error_handler.display_warning(message, title)


def display_info(message: str, title: str = "ℹ️  Information") -> None:
    """Display an information message using the global error handler."""
    _error_handler.display_info(message, title)


# Export error handling functions
__all__ = [
    "ErrorHandler",
    "get_error_handler",
    "handle_error",
    "display_warning",
    "display_info",
]
