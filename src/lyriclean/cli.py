import logging
import sys
from pathlib import Path

import click

from .exceptions import FetchError, ParseError, UnsupportedSourceError
from .pipeline import clean_lyrics, explain
from .registry import get_source
from .sources.base import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def _is_url(source: str) -> bool:
    return "://" in source


def _read_source(source: str, timeout: float) -> str:
    """Return raw lyric text from a URL, a file path, or ``-`` (stdin)."""
    if source == "-":
        return click.get_text_stream("stdin").read()

    if _is_url(source):
        lyrics = get_source(source, timeout=timeout).scrape(source)
        logger.debug("scraped %r from %s", lyrics.title, lyrics.source_url)
        return lyrics.text

    path = Path(source)
    if not path.is_file():
        raise click.FileError(source, hint="no such file")
    return path.read_text(encoding="utf-8")


@click.command()
@click.argument("source")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write the cleaned lyrics to PATH instead of stdout.")
@click.option("--explain", "explain_lines", is_flag=True, default=False,
              help="Show how each input line is classified instead of cleaning.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float,
              envvar="LYRICLEAN_TIMEOUT", help="HTTP timeout in seconds for URL sources.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log pipeline and fetch details to stderr.")
def main(source: str, output_path: str | None, explain_lines: bool, timeout: float,
         verbose: bool) -> None:
    """Clean song lyrics: drop section markers, chord lines and repeated sections.

    \b
    SOURCE may be:
      - an http(s) URL of a lyrics page or a .txt file
      - a local file path
      - "-" to read from stdin
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=LOG_FORMAT)

    # --- Read ---
    try:
        raw = _read_source(source, timeout)
    except UnsupportedSourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Supported sources: http(s) URLs, file paths, '-' for stdin", err=True)
        sys.exit(1)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        if exc.status_code == 403:
            msg += ". The site blocks automated requests: save the page and pass the file path"
        click.echo(msg, err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # --- Explain ---
    if explain_lines:
        for kind, line in explain(raw):
            click.echo(f"{kind.name:<6} | {line}")
        return

    # --- Clean ---
    cleaned = clean_lyrics(raw)
    if not cleaned:
        click.echo("Error: No lyrics left after cleanup", err=True)
        sys.exit(1)

    # --- Output ---
    if output_path is None:
        click.echo(cleaned)
        return

    dest = Path(output_path)
    dest.write_text(cleaned + "\n", encoding="utf-8")
    click.echo(f"Written to {dest}")
