"""Run the config rules and, for ``--strict`` builds, reject broken chapters."""

from __future__ import annotations

from page_styles.model.diagnostic import Diagnostic
from page_styles.model.style import StyleConfig
from page_styles.validation.rules import ALL_RULES


class ValidationError(Exception):
    """A chapter's style entry cannot be used at all (it is not a table)."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        self.chapters = [d.chapter for d in diagnostics if d.chapter is not None]
        names = ", ".join(repr(name) for name in self.chapters)
        super().__init__(
            f"Invalid page-styles config for chapter(s) {names}: "
            "each entry must be a table of selectors"
        )


def validate(config: StyleConfig) -> list[Diagnostic]:
    """Return every diagnostic for *config*, in rule order."""
    return [diagnostic for rule in ALL_RULES for diagnostic in rule(config)]


def validate_or_raise(config: StyleConfig) -> list[Diagnostic]:
    """Like :func:`validate`, but raise :class:`ValidationError` on errors.

    Returns the remaining warnings when every chapter entry is usable.
    """
    diagnostics = validate(config)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
