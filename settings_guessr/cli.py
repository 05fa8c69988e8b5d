# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Read a sample of documents, guess their search settings
#   and print them as pretty JSON on stdout.
#
# USAGE:
# ------
#   settings-guessr documents.json
#   cat documents.ndjson | settings-guessr
#   settings-guessr https://example.com/sample.json --sort-searchable
#   python -m settings_guessr documents.json --stats --verbose
#
# EXIT STATUS:
# ------------
#   0 → settings printed
#   1 → EmptyInput / InvalidDocument
#   2 → SourceUnavailable (nothing given, nothing piped, unreadable)
#
#   Status lines and errors go to stderr; stdout only ever carries JSON.
#
# ==============================================

import json
import logging
import sys
from typing import BinaryIO, Optional

import click

from settings_guessr import __version__
from settings_guessr.config import get_config
from settings_guessr.errors import EmptyInput, InvalidDocument, SourceUnavailable
from settings_guessr.guesser import SettingsGuesser
from settings_guessr.ingest import read_source

EXIT_INVALID_INPUT = 1
EXIT_SOURCE_UNAVAILABLE = 2


@click.command()
@click.argument("source", required=False)
@click.option("--sort-searchable", is_flag=True, help="Sort searchable attributes instead of keeping discovery order.")
@click.option("--stats", is_flag=True, help="Include per-field scores and entropies in the output.")
@click.option("-v", "--verbose", is_flag=True, help="Log scoring details to stderr.")
@click.version_option(version=__version__, prog_name="settings-guessr")
def main(source: Optional[str], sort_searchable: bool, stats: bool, verbose: bool) -> None:
    """Guess searchable, filterable and sortable fields from sample documents.

    SOURCE is a file path, an http(s) URL, or "-" for stdin. Without it,
    documents are read from piped stdin.
    """
    config = get_config()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        buffer = read_source(
            source,
            stdin=_binary_stdin(),
            http_timeout=config.source.http_timeout_seconds,
        )
    except SourceUnavailable as e:
        click.echo(str(e), err=True)
        sys.exit(EXIT_SOURCE_UNAVAILABLE)

    guesser = SettingsGuesser(config, searchable_order="sorted" if sort_searchable else None)

    try:
        documents = guesser.ingest_buffer(buffer)
    except (EmptyInput, InvalidDocument) as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(EXIT_INVALID_INPUT)

    settings = guesser.finish()

    output = settings.to_dict()
    if stats:
        output["fields"] = {
            name: score.to_dict() for name, score in guesser.get_field_scores().items()
        }

    click.echo(json.dumps(output, indent=config.output.indent, ensure_ascii=False))

    if verbose:
        status = guesser.get_status()
        click.echo(
            f"✓ Scored {status['fields_scored']} fields from {documents} documents",
            err=True,
        )


def _binary_stdin() -> Optional[BinaryIO]:
    # sys.stdin is None when the interpreter runs without a console
    if sys.stdin is None:
        return None
    return sys.stdin.buffer


if __name__ == "__main__":
    main()
