"""
CLI Main Application - Typer app entry point.

This module provides the main CLI application entry point, global options,
logging setup and command registration.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.traceback import install as install_rich_traceback

from pftv import __version__
from pftv.core import AppSettings, ConfigManager
from pftv.core.exceptions import ConfigurationError, PFTVError
from pftv.ui import get_console, handle_error
from pftv.cli.context import get_config_manager, set_config_manager, set_settings


# Create main Typer application
app = typer.Typer(
    name="pftv",
    help="📺 Browse Project Free TV show listings from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        is_flag=True,
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory path",
        exists=False,
        file_okay=False,
        dir_okay=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed logging",
        is_flag=True,
    ),
    date_format: Optional[str] = typer.Option(
        None,
        "--date-format",
        help="Output date format for this run, e.g. 'DD MMM YYYY' or '%Y-%m-%d'",
    ),
) -> None:
    """
    📺 PFTV - Project Free TV listings browser.

    Read show pages and season pages, list episode links and resolve
    them to direct media URLs.
    """
    if version:
        console = get_console()
        console.print(f"[bold blue]PFTV[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()

    try:
        _initialize_application(
            config_dir=config_dir,
            debug=debug,
            date_format=date_format,
        )
    except PFTVError as e:
        handle_error(e, "During application initialization", show_traceback=debug)
        raise typer.Exit(1)


def _initialize_application(
    config_dir: Optional[Path] = None,
    debug: bool = False,
    date_format: Optional[str] = None,
) -> None:
    """
    Initialize the application with configuration and logging.

    Args:
        config_dir: Configuration directory override
        debug: Enable debug mode
        date_format: Date format override for this invocation

    Raises:
        ConfigurationError: If the configuration or an override is invalid
    """
    config_manager = ConfigManager(config_dir)
    set_config_manager(config_manager)

    _setup_logging(debug, config_manager.settings.logging.level)

    install_rich_traceback(show_locals=debug)

    if date_format is not None:
        set_settings(_with_date_format(config_manager.settings, date_format))


def _with_date_format(settings: AppSettings, date_format: str) -> AppSettings:
    """Validated copy of the settings with another output date format."""
    data = settings.model_dump()
    data["scraper"]["date_format"] = date_format
    try:
        return AppSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid --date-format {date_format!r}: {e.errors()[0]['msg']}",
            details=str(e)
        )


def _setup_logging(debug: bool = False, level_name: str = "WARNING") -> None:
    """
    Set up application logging.

    Args:
        debug: Enable debug logging (overrides the configured level)
        level_name: Configured logging level
    """
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.WARNING)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    logging.getLogger().setLevel(level)

    # Reduce noise from third-party libraries
    if not debug:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)


def _register_commands() -> None:
    """Register commands with the main app."""
    # Import commands here to avoid circular imports
    from pftv.cli.commands import config, episodes, resolve, show

    app.command(name="show")(show.show_command)
    app.command(name="episodes")(episodes.episodes_command)
    app.command(name="resolve")(resolve.resolve_command)
    app.command(name="resolvers")(resolve.resolvers_command)
    app.add_typer(config.app, name="config", help="⚙️  Manage configuration")


# Register commands at module level to ensure they're available for help
_register_commands()


def cli_main() -> None:
    """
    Main CLI entry point for the pftv command.

    This function is called when the user runs 'pftv' from the command line.
    """
    try:
        app()
    except KeyboardInterrupt:
        console = get_console()
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)  # Standard exit code for SIGINT


# Export main components
__all__ = [
    "app",
    "cli_main",
    "get_config_manager",
]
