from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PageStylesSettings:
    preprocessor_name: str = "page-styles"
    supported_renderers: tuple[str, ...] = ("html",)
    log_level: str = "WARNING"
    log_env_var: str = "PAGE_STYLES_LOG"
    # Keys mdBook reads from a [preprocessor.<name>] table itself.
    reserved_keys: frozenset[str] = frozenset({
        "command",
        "renderer",
        "renderers",
        "before",
        "after",
        "optional",
    })

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PageStylesSettings:
        """Build settings, taking the log level from ``PAGE_STYLES_LOG`` if it names a level."""
        env = os.environ if environ is None else environ
        defaults = cls()
        level = env.get(defaults.log_env_var, "").strip().upper()
        if level not in LOG_LEVELS:
            return defaults
        return cls(log_level=level)
