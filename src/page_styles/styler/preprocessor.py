"""The page-styles preprocessor: applies chapter style tables to a book."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from page_styles.config import PageStylesSettings
from page_styles.model.book import Book
from page_styles.model.context import PreprocessorContext
from page_styles.model.style import StyleConfig
from page_styles.styler.markup import style_chapter

logger = logging.getLogger(__name__)


class PageStyler:
    """Wrap configured heading levels of each chapter in classed HTML tags.

    The style configuration is read from ``[preprocessor.page-styles]`` in
    ``book.toml``; each key is a chapter name mapping selectors (``h1`` ..
    ``h6``) to ``{ class = "..." }``.  When the book has no such section the
    ``default_config`` given at construction time is used.
    """

    def __init__(
        self,
        settings: PageStylesSettings | None = None,
        default_config: StyleConfig | None = None,
    ) -> None:
        self.settings = settings or PageStylesSettings()
        self.default_config = default_config or StyleConfig.empty()

    @property
    def name(self) -> str:
        return self.settings.preprocessor_name

    def supports_renderer(self, renderer: str) -> bool:
        supported = renderer in self.settings.supported_renderers
        logger.info("Supports %r? %s", renderer, supported)
        return supported

    def style_config(self, context: PreprocessorContext) -> StyleConfig:
        if context.preprocessor_table(self.name) is None:
            return self.default_config
        return StyleConfig.from_context(context, self.settings)

    def run(self, context: PreprocessorContext, book: Book) -> Book:
        from page_styles.validation import validate

        config = self.style_config(context)
        logger.info("Preprocessor config: %d chapter(s) configured", len(config))

        for diagnostic in validate(config):
            if diagnostic.is_error:
                # Reported when the chapter is reached.
                continue
            if diagnostic.is_warning:
                logger.warning("%s", diagnostic)
            else:
                logger.info("%s", diagnostic)

        seen: set[str] = set()
        for chapter in book.iter_chapters():
            entry = config.get(chapter.name)
            if entry is None:
                logger.info("Skipping chapter %s: no config values", chapter.name)
                continue
            seen.add(chapter.name)
            if not isinstance(entry, Mapping):
                logger.error(
                    "Invalid config for chapter %r: expected a table, got %s",
                    chapter.name,
                    type(entry).__name__,
                )
                continue
            logger.debug("Styling chapter %r", chapter.name)
            chapter.content = style_chapter(chapter.content, entry)

        for name in config:
            if name not in seen:
                logger.warning("Configured chapter %r not found in book", name)
        return book
