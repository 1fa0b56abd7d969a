from __future__ import annotations

import gzip
import zlib
from io import BytesIO
from typing import Set
from zipfile import BadZipFile, ZipFile

from log_parser.exceptions import DecodeError
from log_parser.models import CompressionFormat

from .registry import Decoder


class IdentityDecoder(Decoder):
    """Passes bytes through untouched; used for uncompressed files."""

    def formats(self) -> Set[CompressionFormat]:
        return {CompressionFormat.NONE}

    def decode(self, data: bytes) -> bytes:
        return bytes(data)


class Lz4Decoder(IdentityDecoder):
    """No LZ4 codec is implemented: content is passed through as is."""

    def formats(self) -> Set[CompressionFormat]:
        return {CompressionFormat.LZ4}


class TarDecoder(IdentityDecoder):
    """No tar reader is implemented: content is passed through as is."""

    def formats(self) -> Set[CompressionFormat]:
        return {CompressionFormat.TAR}


class GzipDecoder(Decoder):
    def formats(self) -> Set[CompressionFormat]:
        return {CompressionFormat.GZIP}

    def decode(self, data: bytes) -> bytes:
        try:
            return gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as err:
            raise DecodeError(
                f"Could not decompress gzip stream: {err}",
                operation="decode gzip",
                value=data[:64],
            ) from err


class ZlibDecoder(Decoder):
    def formats(self) -> Set[CompressionFormat]:
        return {CompressionFormat.ZLIB}

    def decode(self, data: bytes) -> bytes:
        try:
            return zlib.decompress(data)
        except zlib.error as err:
            raise DecodeError(
                f"Could not decompress zlib stream: {err}",
                operation="decode zlib",
                value=data[:64],
            ) from err


class ZipDecoder(Decoder):
    """Concatenates every archive entry, in enumeration order, into one buffer.

    Entry names are not exposed and no entry can be selected: a zip holding
    several log files is read as if they were one file.
    """

    def formats(self) -> Set[CompressionFormat]:
        return {CompressionFormat.ZIP}

    def decode(self, data: bytes) -> bytes:
        chunks: list[bytes] = []
        try:
            with ZipFile(BytesIO(data)) as archive:
                for info in archive.infolist():
                    chunks.append(archive.read(info))
        except (BadZipFile, NotImplementedError, RuntimeError, EOFError, zlib.error) as err:
            raise DecodeError(
                f"Could not read zip archive: {err}",
                operation="decode zip",
                value=data[:64],
            ) from err
        return b"".join(chunks)
