"""page-styles: mdBook preprocessor applying per-chapter heading classes."""
from __future__ import annotations

__version__ = "0.1.0"

from page_styles.config import PageStylesSettings  # noqa: E402
from page_styles.styler import PageStyler  # noqa: E402

__all__ = [
    "__version__",
    "PageStylesSettings",
    "PageStyler",
]
