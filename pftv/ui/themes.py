"""
Theme System - Color palette and styling configuration.

This module defines the palette used by every panel and table so the
record views and error panels share one look.
"""

from dataclasses import dataclass

from rich.theme import Theme


@dataclass(frozen=True)
class ColorPalette:
    """Color palette definition for the console theme."""

    # Primary colors
    primary: str = "blue"
    secondary: str = "cyan"
    accent: str = "magenta"

    # Status colors
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    info: str = "blue"

    # Text colors
    text_muted: str = "dim white"

    # Border colors
    border_primary: str = "blue"
    border_secondary: str = "dim blue"


DEFAULT_PALETTE = ColorPalette()


def create_rich_theme(palette: ColorPalette = DEFAULT_PALETTE) -> Theme:
    """
    Create a Rich Theme object from a color palette.

    Args:
        palette: Palette to derive the named styles from

    Returns:
        Rich Theme object
    """
    styles = {
        # Component styles
        "panel.border": palette.border_primary,
        "panel.title": f"bold {palette.primary}",
        "table.header": f"bold {palette.secondary}",
        "table.border": palette.border_secondary,

        # Status styles
        "success": palette.success,
        "warning": palette.warning,
        "error": palette.error,
        "info": palette.info,

        # Text styles
        "primary": palette.primary,
        "secondary": palette.secondary,
        "accent": palette.accent,
        "muted": palette.text_muted,

        # Semantic styles
        "title": f"bold {palette.primary}",
        "subtitle": palette.secondary,
        "highlight": f"bold {palette.accent}",
        "link": f"underline {palette.primary}",
        "code": f"bold {palette.accent}",

        # Link health indicators
        "health.good": palette.success,
        "health.fair": palette.warning,
        "health.poor": palette.error,
    }

    return Theme(styles)


def get_palette() -> ColorPalette:
    """Get the active color palette."""
    return DEFAULT_PALETTE


def get_theme() -> Theme:
    """Get the Rich Theme for the active palette."""
    return create_rich_theme(get_palette())


# Export theme system components
__all__ = [
    "ColorPalette",
    "DEFAULT_PALETTE",
    "create_rich_theme",
    "get_palette",
    "get_theme",
]
