"""page-styles model layer -- public type re-exports."""

from page_styles.model.book import Book, Chapter
from page_styles.model.context import PreprocessorContext
from page_styles.model.diagnostic import Diagnostic, Severity
from page_styles.model.style import StyleConfig

__all__ = [
    # book
    "Book",
    "Chapter",
    # context
    "PreprocessorContext",
    # style
    "StyleConfig",
    # diagnostic
    "Severity",
    "Diagnostic",
]
