"""Base protocol for mdBook preprocessors."""

from __future__ import annotations

from typing import Protocol

from page_styles.model.book import Book
from page_styles.model.context import PreprocessorContext


class Preprocessor(Protocol):
    """A book-to-book transformation step run by mdBook before rendering."""

    @property
    def name(self) -> str: ...

    def run(self, context: PreprocessorContext, book: Book) -> Book: ...

    def supports_renderer(self, renderer: str) -> bool: ...
