"""
UI Layer - Console, palette and error panels.

This module contains the Rich console setup and the error display used
by every CLI command.
"""

from pftv.ui.themes import ColorPalette, get_palette, get_theme
from pftv.ui.error_handler import ErrorHandler, handle_error, display_warning, display_info
from pftv.ui.console import get_console, setup_console

__all__ = [
    # Theme System
    "ColorPalette",
    "get_palette",
    "get_theme",
    # Error Handling
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
    # Console Management
    "get_console",
    "setup_console",
]
