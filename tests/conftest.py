from unittest.mock import MagicMock

import pytest
from verboselogs import VerboseLogger

from log_parser.parsing.definitions import ParserConfig


@pytest.fixture
def logger():
    return MagicMock(spec=VerboseLogger)


@pytest.fixture
def iso_config():
    return ParserConfig(
        timestamp_format="%Y-%m-%dT%H:%M:%SZ",
        message_pattern=r"(?P<timestamp>\S+) (?P<loglevel>\S+) (?P<message>.*)",
        logfile_pattern="*.log",
    )
