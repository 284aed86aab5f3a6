"""Line classification by markdown heading prefix."""

from __future__ import annotations

from enum import Enum


class LineKind(Enum):
    """The kind of a single chapter line."""

    PLAIN = 0
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6

    @property
    def is_heading(self) -> bool:
        return self is not LineKind.PLAIN

    @property
    def selector(self) -> str | None:
        """Configuration key for this kind: ``"h1"`` .. ``"h6"``."""
        if self is LineKind.PLAIN:
            return None
        return f"h{self.value}"

    @property
    def marker(self) -> str:
        """Heading prefix, e.g. ``"## "`` for H2.  Empty for plain lines."""
        if self is LineKind.PLAIN:
            return ""
        return "#" * self.value + " "


# Checked in this order; the first matching marker wins.
HEADING_KINDS = (
    LineKind.H1,
    LineKind.H2,
    LineKind.H3,
    LineKind.H4,
    LineKind.H5,
    LineKind.H6,
)

HEADING_SELECTORS = frozenset(kind.selector for kind in HEADING_KINDS)


def classify(line: str) -> LineKind:
    """Return the heading level of *line*, or ``LineKind.PLAIN``.

    A heading is ``#`` repeated 1-6 times followed by a single space at the
    very start of the line.  ``"#"`` alone or ``"#Title"`` are plain.
    """
    for kind in HEADING_KINDS:
        if line.startswith(kind.marker):
            return kind
    return LineKind.PLAIN
