"""Reading mdBook's preprocessor input and writing the processed book."""

from __future__ import annotations

import json
import logging
from typing import IO, Any

from page_styles.model.book import ITEM_LIST_KEYS, Book
from page_styles.model.context import PreprocessorContext
from page_styles.protocol.errors import InputError, OutputError

logger = logging.getLogger(__name__)

__all__ = ["parse_input", "load_input", "write_output"]


def load_input(source: str) -> tuple[PreprocessorContext, Book]:
    """Parse a ``[context, book]`` JSON document."""
    try:
        data: Any = json.loads(source)
    except json.JSONDecodeError as exc:
        raise InputError(
            f"Invalid JSON on stdin: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc

    if not isinstance(data, list) or len(data) != 2:
        raise InputError("Expected a JSON array of [context, book]")

    raw_context, raw_book = data
    if not isinstance(raw_context, dict):
        raise InputError("Preprocessor context must be a JSON object")
    if not isinstance(raw_book, dict):
        raise InputError("Book must be a JSON object")
    if not any(isinstance(raw_book.get(key), list) for key in ITEM_LIST_KEYS):
        raise InputError(
            f"Book has no item list (expected one of: {', '.join(ITEM_LIST_KEYS)})"
        )

    context = PreprocessorContext.from_dict(raw_context)
    logger.debug(
        "Parsed input: renderer=%s mdbook_version=%s root=%s",
        context.renderer,
        context.mdbook_version,
        context.root,
    )
    return context, Book(raw_book)


def parse_input(stream: IO[str]) -> tuple[PreprocessorContext, Book]:
    """Read and parse the ``[context, book]`` pair from *stream*."""
    try:
        source = stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Could not read preprocessor input: {exc}") from exc
    return load_input(source)


def write_output(book: Book, stream: IO[str]) -> None:
    """Serialize *book* as JSON onto *stream*."""
    try:
        json.dump(book.to_dict(), stream, ensure_ascii=False)
        stream.flush()
    except (TypeError, ValueError) as exc:
        raise OutputError(f"Could not serialize book: {exc}") from exc
    except OSError as exc:
        raise OutputError(f"Could not write book: {exc}") from exc
