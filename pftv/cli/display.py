"""
Record Display - Rich formatting for shows, seasons and links.

This module renders the records returned by the client as panels and
tables, or as JSON for scripting.
"""

import logging
from typing import Any, Dict, List, Optional

import typer
from pydantic import BaseModel
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pftv.core.models import Episode, EpisodeList, Link, Show
from pftv.ui import get_console


logger = logging.getLogger(__name__)


def health_style(percent: Optional[float]) -> str:
    """Style name for a link's working percentage."""
    if percent is None:
        return "muted"
    if percent >= 75:
        return "health.good"
    if percent >= 40:
        return "health.fair"
    return "health.poor"


def _value(value: Optional[Any]) -> str:
    return escape(str(value)) if value is not None else "[muted]-[/muted]"


def print_json(record: BaseModel) -> None:
    """Write a record as JSON to stdout without any markup."""
    typer.echo(record.model_dump_json(indent=2))


class RecordDisplayManager:
    """
    Manages rich display formatting for scraped records.

    Provides display methods for show pages, season pages and the
    resolver registry with consistent Rich formatting.
    """

    def __init__(self):
        """Initialize display manager."""
        self.console = get_console()

    def show_details(self, show: Show) -> None:
        """
        Display a show with its seasons and trailers.

        Args:
            show: Show record to display
        """
        content_lines = []

        if show.plot:
            content_lines.append(escape(show.plot))
        else:
            content_lines.append("[muted]No plot available[/muted]")

        if show.image_url:
            content_lines.append(f"\n[dim]Poster:[/dim] [link]{escape(show.image_url)}[/link]")

        next_episode = show.next_episode
        if next_episode is not None:
            label = " - ".join(part for part in (next_episode.code, next_episode.name) if part)
            content_lines.append(
                f"\n[dim]Next episode:[/dim] [highlight]{escape(label or 'TBA')}[/highlight]"
                f" [dim]on[/dim] {_value(next_episode.air_date)}"
            )

        self.console.print(Panel(
            "\n".join(content_lines),
            title=f"📺 {escape(str(show))}",
            border_style="blue",
            padding=(1, 2)
        ))

        if show.categories:
            self.console.print(self.create_category_table(show))
        else:
            self.console.print("[warning]No seasons listed[/warning]")

        if show.trailers:
            self.console.print("\n[subtitle]Trailers[/subtitle]")
            for url in show.trailers:
                self.console.print(f"• [link]{escape(url)}[/link]")

    def create_category_table(self, show: Show) -> Table:
        """Create a table of the show's seasons in page order."""
        table = Table(
            title="🗂  Seasons",
            show_header=True,
            header_style="bold blue",
            border_style="blue",
            expand=True
        )

        table.add_column("Season", style="white", min_width=12)
        table.add_column("Episodes", style="cyan", justify="right", width=9)
        table.add_column("Links", style="cyan", justify="right", width=7)
        table.add_column("ID", style="dim")

        for category in show.categories:
            table.add_row(
                _value(category.name),
                str(category.episode_count),
                str(category.link_count),
                _value(category.id),
            )

        return table

    def episode_list(self, episode_list: EpisodeList, show_links: bool = True) -> None:
        """
        Display a season's episodes and, optionally, their links.

        Args:
            episode_list: EpisodeList record to display
            show_links: Whether to list each episode's links
        """
        heading = " - ".join(
            part for part in (episode_list.show_name, episode_list.season_label) if part
        )
        self.console.print(f"[title]{escape(heading or 'Episodes')}[/title]")

        if not episode_list.episodes:
            self.console.print("[warning]No episodes listed[/warning]")
            return

        self.console.print(self.create_episode_table(episode_list.episodes))

        if not show_links:
            return

        for episode in episode_list.episodes:
            if episode.links:
                self.console.print(self.create_link_table(episode))

    def create_episode_table(self, episodes: List[Episode]) -> Table:
        """Create a summary table of episodes."""
        table = Table(
            title="📺 Episodes",
            show_header=True,
            header_style="bold blue",
            border_style="blue",
            expand=True
        )

        table.add_column("#", style="dim", width=5)
        table.add_column("Code", style="cyan", width=8)
        table.add_column("Title", style="white", min_width=20)
        table.add_column("Air Date", style="dim", width=12)
        table.add_column("Links", justify="right", width=6)

        for episode in episodes:
            table.add_row(
                episode.display_number,
                _value(episode.code),
                escape(episode.name),
                _value(episode.air_date),
                str(len(episode.links)),
            )

        return table

    def create_link_table(self, episode: Episode) -> Table:
        """Create a table of one episode's links in page order."""
        table = Table(
            title=f"🔗 {escape(str(episode))}",
            show_header=True,
            header_style="bold cyan",
            border_style="dim blue",
            expand=True
        )

        table.add_column("Host", style="white", width=16)
        table.add_column("Working", justify="right", width=8)
        table.add_column("Loading", style="dim", width=10)
        table.add_column("URL", style="link", overflow="fold")

        for link in episode.links:
            table.add_row(
                _value(link.host or link.domain),
                self._format_working(link),
                _value(link.loading_time),
                _value(link.url),
            )

        return table

    @staticmethod
    def _format_working(link: Link) -> str:
        if link.working_percent is None:
            return "[muted]?[/muted]"
        style = health_style(link.working_percent)
        return f"[{style}]{link.working_percent:g}%[/{style}]"

    def resolver_status(self, status: Dict[str, Any]) -> None:
        """
        Display the resolver registry.

        Args:
            status: Status report from ResolverManager.get_status()
        """
        table = Table(
            title="🔌 Resolvers",
            show_header=True,
            header_style="bold blue",
            border_style="blue"
        )

        table.add_column("Domain", style="cyan")
        table.add_column("Resolver", style="white")
        table.add_column("Module", style="dim")

        for domain, info in status["resolvers"].items():
            table.add_row(domain, info["class"], info["module"])

        self.console.print(table)

        for name, error in status["errors"].items():
            self.console.print(f"[error]✗ {escape(name)}:[/error] {escape(error)}")


# Export display helpers
__all__ = ["RecordDisplayManager", "health_style", "print_json"]
