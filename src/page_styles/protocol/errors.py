"""Preprocessor error types."""


class PreprocessError(Exception):
    """Base class for failures that abort a preprocessor run."""


class InputError(PreprocessError):
    """Raised when the ``[context, book]`` input from mdBook cannot be parsed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        super().__init__(message)


class OutputError(PreprocessError):
    """Raised when the processed book cannot be serialized."""
