"""CLI entry point for sampling and serving character cards."""

import asyncio
import logging
import sys

import click

from .constants.config import DEFAULT_CHARACTER_COUNT, KNOWN_STATUSES


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log sampling progress to stderr")
def cli(verbose: bool):
    """Rick and Morty Cards - random character cards from the Rick and Morty API."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command("sample")
@click.option(
    "--count", "-n",
    default=DEFAULT_CHARACTER_COUNT,
    type=click.IntRange(min=1),
    help=f"Number of distinct characters to draw (default: {DEFAULT_CHARACTER_COUNT})"
)
@click.option(
    "--status", "-s",
    default="",
    type=click.Choice(["", *KNOWN_STATUSES], case_sensitive=False),
    help="Only draw characters with this status (default: any)"
)
@click.option(
    "--max-attempts",
    default=None,
    type=click.IntRange(min=1),
    help="Give up after this many page fetches (default: 10 per character)"
)
def sample(count: int, status: str, max_attempts: int | None):
    """Draw random distinct characters and print them as cards.

    Examples:

        rmcards sample

        rmcards sample --count 5 --status dead
    """
    from .models.sampling import SamplingExhausted, SamplingFailed
    from .processors.sampling import fetch_random_characters
    from .renderers.terminal import render_terminal_cards

    outcome = asyncio.run(fetch_random_characters(count, status, max_attempts=max_attempts))

    if isinstance(outcome, SamplingFailed):
        click.echo(f"Error: {outcome.error}", err=True)
        sys.exit(1)
    if isinstance(outcome, SamplingExhausted):
        click.echo(
            f"Error: only found {outcome.collected} of {outcome.target} distinct characters "
            f"after {outcome.attempts} attempts",
            err=True,
        )
        sys.exit(2)

    click.echo(render_terminal_cards(outcome.characters))


@cli.command("show")
@click.argument("character_id", type=click.IntRange(min=1))
def show(character_id: int):
    """Print the detail view of one character, with its episodes.

    Examples:

        rmcards show 1
    """
    from .errors import CharacterFetchError
    from .renderers.terminal import render_terminal_modal
    from .renderers.modal import load_character_modal

    try:
        modal = asyncio.run(load_character_modal(character_id))
    except CharacterFetchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(render_terminal_modal(modal))


@cli.command("serve")
@click.option(
    "--port",
    default=3000,
    type=int,
    help="Port to run the server on (default: 3000)"
)
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)"
)
@click.option("--debug", is_flag=True, help="Enable the Flask debugger and reloader")
def serve(port: int, host: str, debug: bool):
    """Start the character cards web server.

    Every page load draws a fresh set of characters; the count and status
    come from the ``count`` and ``status`` query parameters.

    Examples:

        rmcards serve

        rmcards serve --port 8080
    """
    from .server import run_server
    run_server(host=host, port=port, debug=debug)
