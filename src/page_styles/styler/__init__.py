from page_styles.styler.base import Preprocessor
from page_styles.styler.lines import HEADING_KINDS, HEADING_SELECTORS, LineKind, classify
from page_styles.styler.markup import class_for, style_chapter, style_line, wrap
from page_styles.styler.preprocessor import PageStyler

__all__ = [
    "HEADING_KINDS",
    "HEADING_SELECTORS",
    "LineKind",
    "PageStyler",
    "Preprocessor",
    "class_for",
    "classify",
    "style_chapter",
    "style_line",
    "wrap",
]
