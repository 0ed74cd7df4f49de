"""
Show Command - Display a show page.
"""

import asyncio

import typer

from pftv.cli.context import create_client
from pftv.cli.display import RecordDisplayManager, print_json
from pftv.core.models import Show
from pftv.ui import handle_error


def show_command(
    show_id: str = typer.Argument(..., help="Show identifier, e.g. 'the-big-bang-theory'"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
) -> None:
    """
    📺 Show a series with its seasons.

    Examples:

        pftv show the-big-bang-theory

        pftv show the-big-bang-theory --json
    """
    try:
        show = asyncio.run(_fetch_show(show_id))
    except Exception as e:
        handle_error(e, f"While loading show '{show_id}'")
        raise typer.Exit(1)

    if as_json:
        print_json(show)
    else:
        RecordDisplayManager().show_details(show)


async def _fetch_show(show_id: str) -> Show:
    async with create_client() as client:
        return await client.get_show_info(show_id)
