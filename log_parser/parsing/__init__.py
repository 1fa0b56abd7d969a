"""
This module provides the parsing pipeline: file discovery, the parser config
and the log parser turning log lines into events.
"""
from .definition_store import ConfigStore
from .definitions import REQUIRED_GROUPS, ParserConfig
from .discovery import FileDiscoverer
from .parser import LogParser, ParserState, new_parser

__all__ = [
    "REQUIRED_GROUPS",
    "ConfigStore",
    "FileDiscoverer",
    "LogParser",
    "ParserConfig",
    "ParserState",
    "new_parser",
]
