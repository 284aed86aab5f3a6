"""CLI command: mdbook-page-styles supports RENDERER."""

from __future__ import annotations

import sys

import click

from page_styles.styler import Preprocessor


@click.command()
@click.argument("renderer")
@click.pass_obj
def supports(preprocessor: Preprocessor, renderer: str) -> None:
    """Check whether RENDERER is supported by this preprocessor.

    Exits with code 0 if it is, 1 otherwise.
    """
    sys.exit(0 if preprocessor.supports_renderer(renderer) else 1)
