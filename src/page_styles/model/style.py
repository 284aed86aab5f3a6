"""Style configuration: chapter name -> per-chapter selector table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from page_styles.config import PageStylesSettings
from page_styles.model.context import PreprocessorContext


@dataclass(frozen=True)
class StyleConfig:
    """Immutable per-run style configuration.

    ``chapters`` holds the raw entry for every configured chapter name.  An
    entry is expected to be a table (``dict``) of selector records, but
    malformed entries are kept so the styler can report them when the
    chapter is reached.
    """

    chapters: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> StyleConfig:
        return cls(chapters={})

    @classmethod
    def from_table(
        cls,
        table: Mapping[str, Any] | None,
        settings: PageStylesSettings | None = None,
    ) -> StyleConfig:
        """Build a config from a ``[preprocessor.page-styles]`` table.

        Keys mdBook itself interprets (``command``, ``before``, ...) are
        dropped; everything else is treated as a chapter name.
        """
        if not table:
            return cls.empty()
        settings = settings or PageStylesSettings()
        chapters = {
            name: entry
            for name, entry in table.items()
            if name not in settings.reserved_keys
        }
        return cls(chapters=chapters)

    @classmethod
    def from_context(
        cls,
        context: PreprocessorContext,
        settings: PageStylesSettings | None = None,
    ) -> StyleConfig:
        settings = settings or PageStylesSettings()
        table = context.preprocessor_table(settings.preprocessor_name)
        return cls.from_table(table, settings)

    def get(self, chapter_name: str) -> Any | None:
        """Return the raw entry for *chapter_name*, or None if unconfigured."""
        return self.chapters.get(chapter_name)

    def __contains__(self, chapter_name: object) -> bool:
        return chapter_name in self.chapters

    def __iter__(self) -> Iterator[str]:
        return iter(self.chapters)

    def __len__(self) -> int:
        return len(self.chapters)
