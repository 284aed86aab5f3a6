"""Book model: a thin view over mdBook's serialized book.

mdBook serializes a book as ``{"sections": [item, ...]}`` (``"items"`` since
0.5).  Each item is ``{"Chapter": {...}}``, the string ``"Separator"`` or
``{"PartTitle": "..."}``.  Chapters nest through ``sub_items``.

The view never copies the underlying JSON: replacing a chapter's content
writes that one field back and leaves every other field untouched, so the
book round-trips exactly.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

ITEM_LIST_KEYS = ("sections", "items")


@dataclass
class Chapter:
    """A chapter inside the book JSON.  ``data`` is the inner chapter object."""

    data: dict[str, Any]

    @property
    def name(self) -> str:
        return str(self.data.get("name", ""))

    @property
    def content(self) -> str:
        content = self.data.get("content")
        return content if isinstance(content, str) else ""

    @content.setter
    def content(self, value: str) -> None:
        self.data["content"] = value

    @property
    def path(self) -> str | None:
        return self.data.get("path")

    @property
    def number(self) -> list[int] | None:
        return self.data.get("number")

    @property
    def sub_items(self) -> list[Any]:
        items = self.data.get("sub_items")
        return items if isinstance(items, list) else []

    @property
    def is_draft(self) -> bool:
        """Draft chapters are listed in SUMMARY.md but have no file."""
        return self.path is None

    def __repr__(self) -> str:
        return f"Chapter(name={self.name!r}, path={self.path!r})"


def _as_chapter(item: Any) -> Chapter | None:
    if isinstance(item, dict) and isinstance(item.get("Chapter"), dict):
        return Chapter(item["Chapter"])
    return None


@dataclass
class Book:
    """The serialized book.  ``data`` is the top-level JSON object."""

    data: dict[str, Any]

    @property
    def items_key(self) -> str:
        for key in ITEM_LIST_KEYS:
            if isinstance(self.data.get(key), list):
                return key
        raise KeyError(f"Book has none of {', '.join(ITEM_LIST_KEYS)}")

    @property
    def items(self) -> list[Any]:
        return self.data[self.items_key]

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter in document order, depth first."""
        stack = list(reversed(self.items))
        while stack:
            item = stack.pop()
            chapter = _as_chapter(item)
            if chapter is None:
                continue
            yield chapter
            stack.extend(reversed(chapter.sub_items))

    def chapters(self) -> list[Chapter]:
        return list(self.iter_chapters())

    def to_dict(self) -> dict[str, Any]:
        return self.data
