"""Diagnostic model: advisory findings about the style configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a chapter's style configuration.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        chapter: The chapter name involved, if applicable.
        selector: The selector key involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    chapter: str | None = None
    selector: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.chapter is not None and self.selector is not None:
            location = f" [chapter={self.chapter} selector={self.selector}]"
        elif self.chapter is not None:
            location = f" [chapter={self.chapter}]"
        return f"{self.severity.value}{location}: {self.message}"
