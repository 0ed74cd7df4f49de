"""
Configuration Command - Settings management functionality.

This module implements commands for viewing, changing and resetting the
settings stored in settings.json.
"""

from typing import Any, Dict, Optional

import typer
from rich.markup import escape
from rich.table import Table

from pftv.cli.context import get_config_manager
from pftv.core.exceptions import ConfigurationError
from pftv.ui import display_info, get_console, handle_error

# Create config command group
app = typer.Typer(
    name="config",
    help="⚙️  Manage application configuration and settings",
    no_args_is_help=True,
)


def flatten_settings(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested settings into dot-path keys."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_settings(value, f"{path}."))
        else:
            flat[path] = value
    return flat


@app.command(name="show")
def show_config(
    section: Optional[str] = typer.Argument(
        None,
        help="Configuration section to display (scraper, network, logging)"
    ),
) -> None:
    """
    📋 Display current configuration.

    Optionally specify a section to show only that part of the config.
    """
    try:
        config_manager = get_config_manager()
        data = config_manager.settings.model_dump()

        if section is not None:
            if section not in data:
                raise ConfigurationError(
                    f"Unknown configuration section: {section}",
                    config_path=str(config_manager.settings_file)
                )
            data = {section: data[section]}
    except Exception as e:
        handle_error(e, "Failed to display configuration")
        raise typer.Exit(1)

    table = Table(
        title=f"⚙️  {escape(str(config_manager.settings_file))}",
        show_header=True,
        header_style="bold blue",
        border_style="blue"
    )
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in flatten_settings(data).items():
        table.add_row(key, escape(str(value)))

    get_console().print(table)


@app.command(name="set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (dot notation)"),
    value: str = typer.Argument(..., help="New value for the setting"),
) -> None:
    """
    🔧 Set a configuration value.

    Example: pftv config set scraper.date_format "DD MMM YYYY"
    """
    try:
        config_manager = get_config_manager()
        config_manager.update_setting(key, value)
    except Exception as e:
        handle_error(e, f"Failed to set configuration value '{key}'")
        raise typer.Exit(1)

    get_console().print(
        f"[success]✓[/success] {escape(key)} = {escape(str(config_manager.get_setting(key)))}"
    )


@app.command(name="reset")
def reset_config(
    confirm: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip confirmation prompt"
    ),
) -> None:
    """
    🔄 Reset configuration to defaults.

    This action requires confirmation unless --yes is used.
    """
    try:
        if not confirm:
            from rich.prompt import Confirm
            if not Confirm.ask(
                "[bold red]⚠️  This will reset ALL configuration to defaults. Continue?[/bold red]",
                default=False
            ):
                display_info("Configuration reset cancelled.", "ℹ️  Cancelled")
                return

        get_config_manager().reset_to_defaults()
        display_info(
            "Configuration has been reset to default values.",
            "✅ Configuration Reset"
        )

    except Exception as e:
        handle_error(e, "Failed to reset configuration")
        raise typer.Exit(1)


__all__ = ["app", "flatten_settings"]
