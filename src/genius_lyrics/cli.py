"""Command-line interface using Click."""

import json
import sys
from pathlib import Path

import click

from . import __version__
from .config import CREDENTIAL_VARS, load_credentials
from .core.genius import GeniusClient
from .exceptions import GeniusLyricsError, NoResults
from .utils.logging import setup_logging


def _make_client(ctx: click.Context) -> GeniusClient:
    credentials = load_credentials(ctx.obj.get("env_file"))
    return GeniusClient(credentials=credentials)


def _fail(ctx: click.Context, error: Exception) -> None:
    logger = ctx.obj["logger"]
    if isinstance(error, NoResults):
        click.echo("No results", err=True)
    else:
        logger.error(f"❌ {error.stage} failed: {error}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.option('--env-file', type=click.Path(dir_okay=False),
              help='Read credentials from this .env file')
@click.pass_context
def cli(ctx, verbose, log_file, env_file):
    """genius-lyrics - Fetch song lyrics from Genius."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger
    ctx.obj['env_file'] = env_file


@cli.command()
@click.argument('term')
@click.option('--raw', is_flag=True, help='Print extracted lyrics without normalizing')
@click.pass_context
def lyrics(ctx, term, raw):
    """Search for TERM and print the lyrics of the first hit."""
    try:
        with _make_client(ctx) as client:
            if raw:
                track = client.search_song_first_res(term)
                text = client.scrape_song_lyrics(track.lyrics_page_url)
            else:
                text = client.get_lyrics_for(term)
    except GeniusLyricsError as e:
        _fail(ctx, e)
        return
    click.echo(text)


@cli.command()
@click.argument('term')
@click.option('--json', 'as_json', is_flag=True, help='Print the hit as JSON')
@click.pass_context
def search(ctx, term, as_json):
    """Search for TERM and print the first hit."""
    try:
        with _make_client(ctx) as client:
            track = client.search_song_first_res(term)
    except GeniusLyricsError as e:
        _fail(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(track.to_dict(), indent=2, ensure_ascii=False))
        return
    click.echo(f"Title:  {track.full_title}")
    click.echo(f"Artist: {track.artist_names}")
    click.echo(f"State:  {track.lyrics_state}")
    click.echo(f"URL:    {track.lyrics_page_url}")


@cli.command()
@click.argument('url')
@click.option('--raw', is_flag=True, help='Print extracted lyrics without normalizing')
@click.pass_context
def scrape(ctx, url, raw):
    """Fetch a lyrics page URL and print its lyrics."""
    try:
        with _make_client(ctx) as client:
            if raw:
                text = client.scrape_song_lyrics(url)
            else:
                text = client.scrape_song_lyrics_processed(url)
    except GeniusLyricsError as e:
        _fail(ctx, e)
        return
    click.echo(text)


@cli.command('check-env')
@click.pass_context
def check_env(ctx):
    """Report which Genius credentials are configured."""
    credentials = load_credentials(ctx.obj.get("env_file"))
    for name in CREDENTIAL_VARS:
        status = "missing" if name in credentials.missing else "ok"
        click.echo(f"{name}: {status}")
    if not credentials.is_complete:
        sys.exit(1)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
