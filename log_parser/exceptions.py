"""Errors raised while loading configs and parsing log files."""
from __future__ import annotations

from typing import Any, Iterable


class LogParserError(Exception):
    """Base class for every failure of the parsing pipeline.

    Attributes
    ----------
    operation : str
        The step that failed (e.g. ``"read file"``, ``"decode gzip"``).
    value : Any
        The offending raw value: a path, a pattern or the captured text.

    """

    def __init__(self, message: str, operation: str, value: Any = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.value = value


class ConfigurationError(LogParserError):
    """The parser config document is missing, malformed or invalid."""


class InvalidPatternError(ConfigurationError):
    """The message pattern is not a valid regular expression."""


class MissingCaptureGroupsError(InvalidPatternError):
    """The message pattern lacks one or more required named groups."""

    def __init__(self, pattern: str, missing: Iterable[str]) -> None:
        self.missing = tuple(sorted(missing))
        super().__init__(
            f"Message pattern is missing named capture groups: "
            f"{', '.join(self.missing)}",
            operation="validate message pattern",
            value=pattern,
        )


class FileReadError(LogParserError):
    """A discovered log file could not be read."""


class DecodeError(LogParserError):
    """Raw bytes could not be decompressed or decoded as UTF-8."""


class DataError(LogParserError):
    """Captured text could not be interpreted (e.g. a bad timestamp)."""
