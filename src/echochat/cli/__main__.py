"""EchoChat command-line entry point.

Wires the process's stdin/stdout into an echo loop and maps the way the
loop ended onto an exit status:
- exit sentinel or end-of-input: 0
- Ctrl-C: 130

Usage:
    uv run echochat
    uv run echochat --lang ja
    uv run python -m echochat.cli --verbose
"""

import io
import logging
import sys
from enum import StrEnum
from typing import Annotated

import typer

from echochat.config import settings
from echochat.loop import EchoLoop
from echochat.messages import CATALOGS, get_catalog
from echochat.version import VERSION

logger = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 130


LanguageOption = StrEnum("LanguageOption", {lang: lang for lang in CATALOGS})


app = typer.Typer(
    name="echochat",
    help="Interactive echo chat loop",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"echochat {VERSION}")
        raise typer.Exit()


def _pass_undecodable_bytes(*streams: object) -> None:
    """Let bytes that do not decode round-trip from stdin to stdout unchanged."""
    for stream in streams:
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, stream=sys.stderr)


@app.command()
def chat(
    lang: Annotated[
        LanguageOption | None,
        typer.Option(
            "--lang", "-l", help="Message language (default: ECHOCHAT_LANG or en)"
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Echo each line back until 'exit' or end-of-input."""
    _configure_logging(verbose)

    _pass_undecodable_bytes(sys.stdin, sys.stdout)
    catalog = get_catalog(lang.value if lang else settings.lang)
    loop = EchoLoop(sys.stdin, sys.stdout, catalog)

    try:
        result = loop.run()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        sys.stdout.flush()
        logger.info("Interrupted by user")
        raise typer.Exit(code=INTERRUPTED_EXIT_CODE) from None

    logger.debug("Session ended: %s, %d turns", result.exit_reason, result.turns)


if __name__ == "__main__":
    app()
