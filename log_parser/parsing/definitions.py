from __future__ import annotations

import calendar
import re
from datetime import datetime, timezone
from typing import Pattern

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from log_parser.exceptions import DataError, InvalidPatternError
from log_parser.models import CompressionFormat

REQUIRED_GROUPS = frozenset({"timestamp", "loglevel", "message"})

DEFAULT_MESSAGE_PATTERN = r"(?P<timestamp>\S+)\s+(?P<loglevel>\w+)\s+(?P<message>.*)"
DEFAULT_LOGFILE_PATTERN = "*.log"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ParserConfig(BaseModel):
    """How to find log files and how to turn their lines into events.

    An empty ``timestamp_format`` means captured timestamps are integer epoch
    seconds; otherwise it is a ``strftime``-style format. ``event_filter``
    (also read from ``message_filter``) drops every match whose message
    contains it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    timestamp_format: str = ""
    event_filter: str = Field(
        default="",
        validation_alias=AliasChoices("event_filter", "message_filter"),
    )
    compression: CompressionFormat = CompressionFormat.NONE
    message_pattern: str = DEFAULT_MESSAGE_PATTERN
    logfile_pattern: str = DEFAULT_LOGFILE_PATTERN

    @field_validator("compression", mode="before")
    @classmethod
    def _parse_compression(cls, value: object) -> CompressionFormat:
        if value is None:
            return CompressionFormat.NONE
        return CompressionFormat(value)

    @field_validator("timestamp_format", "event_filter", mode="before")
    @classmethod
    def _empty_when_null(cls, value: object) -> object:
        return "" if value is None else value

    def compile_message_pattern(self) -> Pattern[str]:
        try:
            return re.compile(self.message_pattern)
        except re.error as err:
            raise InvalidPatternError(
                f"Invalid logline pattern {self.message_pattern!r}: {err}",
                operation="compile message pattern",
                value=self.message_pattern,
            ) from err

    def read_timestamp(self, datestring: str) -> int:
        """Convert captured timestamp text to epoch seconds.

        Raises
        ------
        log_parser.exceptions.DataError
            If the text is not an integer (no format configured) or does not
            match ``timestamp_format``.

        """
        if not self.timestamp_format:
            if not _INTEGER.fullmatch(datestring):
                raise DataError(
                    f"Could not parse unix timestamp {datestring!r}",
                    operation="parse unix timestamp",
                    value=datestring,
                )
            unix = int(datestring)
            if not _I64_MIN <= unix <= _I64_MAX:
                raise DataError(
                    f"Unix timestamp {datestring!r} is out of range",
                    operation="parse unix timestamp",
                    value=datestring,
                )
            return unix

        try:
            date = datetime.strptime(datestring, self.timestamp_format)
        except ValueError as err:
            raise DataError(
                f"Could not parse datetime {datestring!r} with format "
                f"{self.timestamp_format!r}: {err}",
                operation="parse datetime",
                value=datestring,
            ) from err
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        return calendar.timegm(date.utctimetuple())

    def filter_event(self, message: str) -> bool:
        """Return True when ``message`` must be dropped."""
        return bool(self.event_filter) and self.event_filter in message

    def __str__(self) -> str:
        return (
            f"Timestamp format: {self.timestamp_format}, "
            f"Compression format: {self.compression.value}, "
            f"Message pattern: {self.message_pattern}, "
            f"Logfile pattern: {self.logfile_pattern}"
        )
