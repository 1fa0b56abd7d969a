"""Log parser turning discovered files into a sequence of events."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator, List, Match, Optional, Pattern

from verboselogs import VerboseLogger

from log_parser.decompression import DecoderRegistry, default_registry
from log_parser.exceptions import (
    DecodeError,
    FileReadError,
    LogParserError,
    MissingCaptureGroupsError,
)
from log_parser.models import Event

from .definitions import REQUIRED_GROUPS, ParserConfig
from .discovery import FileDiscoverer


class ParserState(Enum):
    UNINITIALIZED = "uninitialized"
    VALIDATED = "validated"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class LogParser:
    """
    Extracts events from every log file under a root directory.

    Each ``parse()`` call starts from an empty event list, validates the
    message pattern, then walks the discovered files in order: decode the
    declared compression, split on ``"\\n"``, and turn every regex match of
    every line into an ``Event`` unless the message filter drops it.
    """

    def __init__(
        self,
        root: str | Path,
        config: ParserConfig,
        logger: Optional[VerboseLogger] = None,
        decoders: Optional[DecoderRegistry] = None,
        discoverer: Optional[FileDiscoverer] = None,
    ) -> None:
        self.logger = logger or VerboseLogger(__name__)
        self._root = root
        self._config = config
        self._decoders = decoders or default_registry()
        self._discoverer = discoverer or FileDiscoverer(logger=self.logger)
        self._events: List[Event] = []
        self._state = ParserState.UNINITIALIZED

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def root(self) -> str | Path:
        return self._root

    @property
    def state(self) -> ParserState:
        return self._state

    def event_count(self) -> int:
        return len(self._events)

    def events(self) -> Iterator[Event]:
        return iter(self._events)

    def __iter__(self) -> Iterator[Event]:
        return self.events()

    def __len__(self) -> int:
        return self.event_count()

    def validate(self) -> Pattern[str]:
        """Compile the message pattern and check its named groups.

        Raises
        ------
        log_parser.exceptions.InvalidPatternError
            If the pattern does not compile.
        log_parser.exceptions.MissingCaptureGroupsError
            If ``timestamp``, ``loglevel`` or ``message`` is not a named group.

        """
        pattern = self._config.compile_message_pattern()
        missing = REQUIRED_GROUPS - set(pattern.groupindex)
        if missing:
            self.logger.warning(
                f"Incorrect named capture groups, {', '.join(sorted(REQUIRED_GROUPS))} "
                f"are required, {', '.join(sorted(missing))} not found"
            )
            raise MissingCaptureGroupsError(self._config.message_pattern, missing)
        self.logger.debug(f"Using message pattern {pattern.pattern!r}")
        return pattern

    def parse(self) -> None:
        """Run the pipeline over every discovered file.

        Raises
        ------
        log_parser.exceptions.LogParserError
            On an invalid pattern (before any file is touched) or on the first
            unreadable file, corrupt stream, invalid UTF-8 or bad timestamp.

        """
        self._events = []
        self._state = ParserState.UNINITIALIZED
        try:
            pattern = self.validate()
            self._state = ParserState.VALIDATED

            self._state = ParserState.RUNNING
            filecount = 0
            for path in self._discoverer.discover(self._root, self._config.logfile_pattern):
                filecount += 1
                for line in self.read_lines(path):
                    self._events.extend(self.extract(pattern, line))
        except LogParserError:
            self._state = ParserState.FAILED
            raise

        self._state = ParserState.COMPLETED
        self.logger.info(f"Parsed {filecount} logfiles successfully")

    def read_lines(self, path: Path) -> List[str]:
        """Read, decompress and split one log file."""
        compression = self._config.compression
        self.logger.verbose(f"Decompressing file {path}, using {compression.value}")

        try:
            raw = path.read_bytes()
        except OSError as err:
            raise FileReadError(
                f"Could not read log file '{path}': {err}",
                operation="read file",
                value=str(path),
            ) from err

        try:
            content = self._decoders.decode(compression, raw)
        except DecodeError as err:
            raise DecodeError(
                f"Could not decompress '{path}': {err}",
                operation=err.operation,
                value=str(path),
            ) from err

        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError(
                f"Invalid utf-8 sequence in '{path}': {err}",
                operation="decode utf-8",
                value=str(path),
            ) from err
        return text.split("\n")

    def extract(self, pattern: Pattern[str], line: str) -> Iterator[Event]:
        """Yield one event per non-overlapping match in ``line``."""
        for entry in pattern.finditer(line):
            message = _group(entry, "message")
            if self._config.filter_event(message):
                continue

            yield Event.from_capture(
                timestamp=self._config.read_timestamp(_group(entry, "timestamp")),
                message=message,
                loglevel=_group(entry, "loglevel"),
            )


def _group(entry: Match[str], name: str) -> str:
    # an optional group that did not participate reads as empty text
    return entry.group(name) or ""


def new_parser(
    root: str | Path,
    config: ParserConfig,
    logger: Optional[VerboseLogger] = None,
) -> LogParser:
    """Build a parser over ``root`` using ``config``."""
    return LogParser(root=root, config=config, logger=logger)
