"""
Episodes Command - Display a season page with its links.
"""

import asyncio
from typing import Optional

import typer

from pftv.cli.context import create_client
from pftv.cli.display import RecordDisplayManager, print_json
from pftv.core.exceptions import NotFoundError
from pftv.core.models import EpisodeList
from pftv.ui import handle_error


def episodes_command(
    show_id: str = typer.Argument(..., help="Show identifier"),
    category_id: str = typer.Argument(..., help="Season identifier as listed by 'pftv show'"),
    episode: Optional[float] = typer.Option(
        None,
        "--episode",
        "-e",
        help="Only display this episode number"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
    no_links: bool = typer.Option(False, "--no-links", help="Hide the link tables"),
) -> None:
    """
    📋 List the episodes of a season and their links.

    Examples:

        pftv episodes the-big-bang-theory season-1/

        pftv episodes the-big-bang-theory season-1/ --episode 3 --json
    """
    try:
        episode_list = asyncio.run(_fetch_episodes(show_id, category_id))

        if episode is not None:
            selected = episode_list.find_episode(episode)
            if selected is None:
                raise NotFoundError(
                    f"Episode {episode:g} is not listed",
                    show_id=show_id,
                    category_id=category_id
                )
            episode_list = episode_list.model_copy(update={"episodes": (selected,)})
    except Exception as e:
        handle_error(e, f"While loading '{show_id}' / '{category_id}'")
        raise typer.Exit(1)

    if as_json:
        print_json(episode_list)
    else:
        RecordDisplayManager().episode_list(episode_list, show_links=not no_links)


async def _fetch_episodes(show_id: str, category_id: str) -> EpisodeList:
    async with create_client() as client:
        return await client.get_episode_list(show_id, category_id)
