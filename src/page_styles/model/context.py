"""The context object mdBook hands to a preprocessor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PreprocessorContext:
    """Book root, configuration and renderer for the current build.

    ``config`` is the whole ``book.toml`` document as decoded from JSON.
    Fields this package does not use are kept in ``extra``.
    """

    root: str = ""
    config: dict[str, Any] = field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PreprocessorContext:
        known = {"root", "config", "renderer", "mdbook_version"}
        config = data.get("config")
        return cls(
            root=str(data.get("root", "")),
            config=config if isinstance(config, dict) else {},
            renderer=str(data.get("renderer", "")),
            mdbook_version=str(data.get("mdbook_version", "")),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def preprocessor_table(self, name: str) -> dict[str, Any] | None:
        """Return ``config["preprocessor"][name]`` if it is a table."""
        preprocessors = self.config.get("preprocessor")
        if not isinstance(preprocessors, dict):
            return None
        table = preprocessors.get(name)
        if not isinstance(table, dict):
            return None
        return table
