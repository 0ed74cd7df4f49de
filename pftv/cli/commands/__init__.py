"""
CLI Commands - Individual command implementations.

This module contains the show, episodes, resolver and configuration
command implementations.
"""

from pftv.cli.commands import config, episodes, resolve, show

__all__ = ["config", "episodes", "resolve", "show"]
