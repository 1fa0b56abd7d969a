"""Declared encoding of an input log file."""
from __future__ import annotations

from enum import Enum


class CompressionFormat(str, Enum):
    """Compression kinds a parser config can declare.

    Lookup is case-insensitive and never fails: any text that does not name a
    known kind resolves to ``NONE``.
    """

    GZIP = "gzip"
    TAR = "tar"
    ZIP = "zip"
    LZ4 = "lz4"
    ZLIB = "zlib"
    NONE = "none"

    @classmethod
    def _missing_(cls, value: object) -> "CompressionFormat":
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return cls.NONE

    @classmethod
    def parse(cls, text: str) -> "CompressionFormat":
        return cls(text)
