"""Data model to define events extracted from log lines."""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

import yaml

from .types import JSONObjectType


class LogLevel(str, Enum):
    """Severity of an event.

    Values are the variant names, which is also how a level is serialized.
    Unrecognized text resolves to ``UNKNOWN``.
    """

    DEBUG = "Debug"
    INFO = "Info"
    WARNING = "Warning"
    WARN = "Warn"
    CRITICAL = "Critical"
    ERROR = "Error"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> "LogLevel":
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return cls.UNKNOWN

    @classmethod
    def parse(cls, text: str) -> "LogLevel":
        return cls(text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Event:
    """Class defining one record extracted from a single regex match.

    Attributes
    ----------
    timestamp : int
        Seconds since the Unix epoch.
    message : str
        The captured message, verbatim.
    level : LogLevel
        The captured severity.

    """

    timestamp: int
    message: str
    level: LogLevel = LogLevel.UNKNOWN

    @classmethod
    def from_capture(cls, timestamp: int, message: str, loglevel: str) -> "Event":
        return cls(timestamp=timestamp, message=message, level=LogLevel.parse(loglevel))

    def to_dict(self) -> JSONObjectType:
        return {
            "timestamp": self.timestamp,
            "message": self.message,
            "level": self.level.value,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), allow_unicode=True, sort_keys=False)

    def __str__(self) -> str:
        return f"{self.timestamp}:{self.level} - {self.message}"
