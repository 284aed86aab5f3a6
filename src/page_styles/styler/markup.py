"""Wrapping heading lines in HTML with a configured class."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from page_styles.styler.lines import classify

logger = logging.getLogger(__name__)

__all__ = ["class_for", "wrap", "style_line", "style_chapter"]


def class_for(config: Mapping[str, Any], selector: str) -> str | None:
    """Look up ``config[selector]["class"]``.

    Returns None unless the selector exists, its value is a table and that
    table has a string ``class`` field.
    """
    record = config.get(selector)
    if not isinstance(record, Mapping):
        return None
    class_name = record.get("class")
    if not isinstance(class_name, str):
        return None
    return class_name


def wrap(line: str, tag_name: str, class_name: str, prefix: str) -> str:
    """Return ``<tag class="class_name">rest</tag>`` with *prefix* stripped.

    Raises ValueError if *line* does not start with *prefix*.
    """
    if not line.startswith(prefix):
        raise ValueError(f"Line {line!r} does not start with {prefix!r}")
    rest = line[len(prefix):]
    return f'<{tag_name} class="{class_name}">{rest}</{tag_name}>'


def style_line(line: str, config: Mapping[str, Any]) -> str:
    """Wrap a single heading line if its level has a class; else return it as-is."""
    # Keep a CRLF terminator outside the markup.
    body, ending = (line[:-1], "\r") if line.endswith("\r") else (line, "")
    kind = classify(body)
    if not kind.is_heading:
        return line
    class_name = class_for(config, kind.selector)
    if class_name is None:
        return line
    return wrap(body, kind.selector, class_name, kind.marker) + ending


def style_chapter(content: str, config: Mapping[str, Any]) -> str:
    """Style every heading line of *content*.

    Lines are split and rejoined on ``"\\n"`` so line count, order and a
    trailing newline are preserved.
    """
    lines = content.split("\n")
    styled = [style_line(line, config) for line in lines]
    logger.debug(
        "Styled %d of %d line(s)",
        sum(1 for before, after in zip(lines, styled) if before != after),
        len(lines),
    )
    return "\n".join(styled)
