"""Module that contains data models."""
from .compression import CompressionFormat
from .event import Event, LogLevel
from .types import (
    JSONArrayType,
    JSONObjectType,
    JSONType,
    JSONValueType,
)

__all__ = [
    "CompressionFormat",
    "Event",
    "LogLevel",
    "JSONArrayType",
    "JSONObjectType",
    "JSONType",
    "JSONValueType",
]
