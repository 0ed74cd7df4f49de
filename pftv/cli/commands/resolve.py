"""
Resolver Commands - Link resolution and resolver listing.
"""

import asyncio

import typer

from pftv.cli.context import create_client
from pftv.cli.display import RecordDisplayManager
from pftv.ui import handle_error


def resolve_command(
    embedded_url: str = typer.Argument(..., help="Embedded player URL from a link row"),
) -> None:
    """
    🔗 Resolve an embedded player URL to a direct media URL.

    The direct URL is written to stdout on its own so it can be piped.
    """
    try:
        direct_url = asyncio.run(_resolve(embedded_url))
    except Exception as e:
        handle_error(e, "While resolving link")
        raise typer.Exit(1)

    typer.echo(direct_url)


async def _resolve(embedded_url: str) -> str:
    async with create_client() as client:
        return await client.resolve_link(embedded_url)


def resolvers_command() -> None:
    """🔌 List the hosts links can be resolved for."""
    client = create_client()
    RecordDisplayManager().resolver_status(client.resolvers.get_status())
