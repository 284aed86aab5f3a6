"""Validation rules for the page-styles configuration.

Each rule is a function taking a StyleConfig and returning a list of
Diagnostic objects.  Findings are advisory: the styler ignores anything it
cannot use, so no rule ever stops a build.
"""

from __future__ import annotations

from collections.abc import Mapping

from page_styles.model.diagnostic import Diagnostic, Severity
from page_styles.model.style import StyleConfig
from page_styles.styler.lines import HEADING_SELECTORS


def _chapter_tables(config: StyleConfig):
    for name in config:
        entry = config.get(name)
        if isinstance(entry, Mapping):
            yield name, entry


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_chapter_tables(config: StyleConfig) -> list[Diagnostic]:
    """Every chapter entry must be a table of selectors."""
    diagnostics: list[Diagnostic] = []
    for name in config:
        entry = config.get(name)
        if isinstance(entry, Mapping):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_chapter_tables",
                severity=Severity.ERROR,
                message=(
                    f"Chapter '{name}' must be a table of selectors, "
                    f"got {type(entry).__name__}. The chapter will not be styled."
                ),
                chapter=name,
                fix=f'Use [preprocessor.page-styles."{name}"] with entries like h1 = {{ class = "..." }}.',
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Selector rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_selectors_known(config: StyleConfig) -> list[Diagnostic]:
    """Selectors other than h1..h6 are accepted but never applied."""
    diagnostics: list[Diagnostic] = []
    for name, table in _chapter_tables(config):
        for selector in table:
            if selector in HEADING_SELECTORS:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_selectors_known",
                    severity=Severity.WARNING,
                    message=f"Unknown selector '{selector}' is ignored.",
                    chapter=name,
                    selector=selector,
                    fix="Supported selectors are h1, h2, h3, h4, h5 and h6.",
                )
            )
    return diagnostics


def check_selector_records(config: StyleConfig) -> list[Diagnostic]:
    """A heading selector needs a table with a string ``class`` field."""
    diagnostics: list[Diagnostic] = []
    for name, table in _chapter_tables(config):
        for selector, record in table.items():
            if selector not in HEADING_SELECTORS:
                continue
            if not isinstance(record, Mapping):
                problem = f"must be a table, got {type(record).__name__}"
            elif "class" not in record:
                problem = "has no 'class' field"
            elif not isinstance(record["class"], str):
                problem = f"'class' must be a string, got {type(record['class']).__name__}"
            else:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_selector_records",
                    severity=Severity.WARNING,
                    message=f"Selector '{selector}' {problem}; it is ignored.",
                    chapter=name,
                    selector=selector,
                    fix=f'Write {selector} = {{ class = "my-class" }}.',
                )
            )
    return diagnostics


def check_class_names(config: StyleConfig) -> list[Diagnostic]:
    """Class strings are inserted verbatim into a double-quoted attribute."""
    diagnostics: list[Diagnostic] = []
    for name, table in _chapter_tables(config):
        for selector, record in table.items():
            if selector not in HEADING_SELECTORS or not isinstance(record, Mapping):
                continue
            class_name = record.get("class")
            if not isinstance(class_name, str):
                continue
            if not class_name.strip():
                message = f"Selector '{selector}' has an empty class."
            elif '"' in class_name:
                message = f"Class for '{selector}' contains a double quote and will break the markup."
            else:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_class_names",
                    severity=Severity.WARNING,
                    message=message,
                    chapter=name,
                    selector=selector,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_chapter_tables,
    check_selectors_known,
    check_selector_records,
    check_class_names,
]
