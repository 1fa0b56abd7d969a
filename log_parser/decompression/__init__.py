"""
Byte decoders for the compression kinds a parser config can declare.

Only GZIP, ZLIB and ZIP are real codecs; NONE, LZ4 and TAR pass content
through unchanged.
"""
from log_parser.models import CompressionFormat

from .decoders import (
    GzipDecoder,
    IdentityDecoder,
    Lz4Decoder,
    TarDecoder,
    ZipDecoder,
    ZlibDecoder,
)
from .registry import Decoder, DecoderRegistry


def default_registry() -> DecoderRegistry:
    registry = DecoderRegistry(fallback=IdentityDecoder())
    for impl in (
        IdentityDecoder(),
        GzipDecoder(),
        TarDecoder(),
        ZipDecoder(),
        Lz4Decoder(),
        ZlibDecoder(),
    ):
        registry.register(impl)
    return registry


def decode(fmt: CompressionFormat, data: bytes) -> bytes:
    """Decode ``data`` declared as ``fmt``.

    Raises
    ------
    log_parser.exceptions.DecodeError
        If the stream is corrupt.

    """
    return default_registry().decode(fmt, data)


__all__ = [
    "Decoder",
    "DecoderRegistry",
    "GzipDecoder",
    "IdentityDecoder",
    "Lz4Decoder",
    "TarDecoder",
    "ZipDecoder",
    "ZlibDecoder",
    "decode",
    "default_registry",
]
