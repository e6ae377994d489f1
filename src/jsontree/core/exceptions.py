"""
Exception hierarchy for jsontree.

Core operations return these wrapped in ``Err`` (see ``core.result``);
the CLI layer raises or renders them.
"""


class JsonTreeError(Exception):
    """Base class for all jsontree errors."""


class InvalidJsonError(JsonTreeError):
    """Input text is not syntactically valid JSON."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"{message}{location}")


class EmptyQueryError(JsonTreeError):
    """Search invoked with no query text."""

    def __init__(self):
        super().__init__("Search query is empty")


class ConfigError(JsonTreeError):
    """Configuration file exists but could not be read."""
