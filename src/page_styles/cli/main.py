"""page-styles CLI entry point: Click group run by mdBook."""

from __future__ import annotations

import logging
import sys

import click

from page_styles import __version__
from page_styles.config import LOG_LEVELS, PageStylesSettings
from page_styles.protocol import PreprocessError, parse_input, write_output
from page_styles.styler import PageStyler
from page_styles.validation import ValidationError, validate_or_raise

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the book.

    Names outside LOG_LEVELS fall back to WARNING.
    """
    level = level.upper()
    logging.basicConfig(
        stream=sys.stderr,
        level=level if level in LOG_LEVELS else "WARNING",
        format="%(asctime)s [%(levelname)s] (%(name)s): %(message)s",
        force=True,
    )


def handle_preprocessing(preprocessor: PageStyler, strict: bool = False) -> None:
    """Read [context, book] from stdin, run *preprocessor*, write the book to stdout.

    mdBook always exchanges UTF-8 JSON, whatever the locale encoding is.
    """
    stdin = click.get_text_stream("stdin", encoding="utf-8", errors="strict")
    stdout = click.get_text_stream("stdout", encoding="utf-8", errors="strict")
    context, book = parse_input(stdin)
    if strict:
        validate_or_raise(preprocessor.style_config(context))
    book = preprocessor.run(context, book)
    write_output(book, stdout)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mdbook-page-styles")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: $PAGE_STYLES_LOG or WARNING).",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Fail the build when a chapter's config is not a table.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, strict: bool) -> None:
    """mdBook preprocessor applying per-chapter styles to headings.

    With no subcommand, reads the [context, book] JSON from stdin and writes
    the styled book JSON to stdout.
    """
    settings = PageStylesSettings.from_env()
    configure_logging(log_level or settings.log_level)
    preprocessor = PageStyler(settings=settings)
    ctx.obj = preprocessor

    if ctx.invoked_subcommand is not None:
        return

    logger.info("Starting preprocessor")
    try:
        handle_preprocessing(preprocessor, strict=strict)
    except (PreprocessError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# Import and register subcommands
from page_styles.cli.supports import supports  # noqa: E402

cli.add_command(supports)
