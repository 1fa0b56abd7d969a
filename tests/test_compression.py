import gzip
import zlib
from io import BytesIO
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

import pytest

from log_parser.decompression import (
    DecoderRegistry,
    IdentityDecoder,
    decode,
    default_registry,
)
from log_parser.exceptions import DecodeError
from log_parser.models import CompressionFormat


SAMPLES = [b"", b"hello\nworld\n", bytes(range(256)), "äö€\n".encode("utf-8") * 50]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("gzip", CompressionFormat.GZIP),
        ("GZIP", CompressionFormat.GZIP),
        ("GZip", CompressionFormat.GZIP),
        ("tar", CompressionFormat.TAR),
        ("Tar", CompressionFormat.TAR),
        ("zip", CompressionFormat.ZIP),
        ("ZIP", CompressionFormat.ZIP),
        ("lz4", CompressionFormat.LZ4),
        ("LZ4", CompressionFormat.LZ4),
        ("zlib", CompressionFormat.ZLIB),
        ("ZLib", CompressionFormat.ZLIB),
        ("none", CompressionFormat.NONE),
        ("NONE", CompressionFormat.NONE),
    ],
)
def test_compression_format_is_case_insensitive(text, expected):
    assert CompressionFormat.parse(text) is expected


@pytest.mark.parametrize("text", ["", "bz2", "xz", "gz", " gzip", "7z"])
def test_unknown_compression_format_is_none(text):
    assert CompressionFormat.parse(text) is CompressionFormat.NONE


@pytest.mark.parametrize("data", SAMPLES)
def test_none_is_identity(data):
    assert decode(CompressionFormat.NONE, data) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_gzip_round_trip(data):
    assert decode(CompressionFormat.GZIP, gzip.compress(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_zlib_round_trip(data):
    assert decode(CompressionFormat.ZLIB, zlib.compress(data)) == data


def test_gzip_multi_member_stream():
    data = gzip.compress(b"first\n") + gzip.compress(b"second\n")
    assert decode(CompressionFormat.GZIP, data) == b"first\nsecond\n"


@pytest.mark.parametrize("fmt", [CompressionFormat.LZ4, CompressionFormat.TAR])
def test_unimplemented_formats_pass_through(fmt):
    compressed = gzip.compress(b"not extracted")
    assert decode(fmt, compressed) == compressed


def test_tar_has_its_own_decoder():
    registry = default_registry()
    tar = registry.for_format(CompressionFormat.TAR)
    assert tar is not registry.for_format(CompressionFormat.GZIP)
    assert CompressionFormat.TAR in tar.formats()


def test_every_format_is_registered():
    assert default_registry().registered() == set(CompressionFormat)


def test_unregistered_format_falls_back_to_identity():
    registry = DecoderRegistry(fallback=IdentityDecoder())
    compressed = gzip.compress(b"data")
    assert registry.decode(CompressionFormat.GZIP, compressed) == compressed


@pytest.mark.parametrize(
    "fmt, data",
    [
        (CompressionFormat.GZIP, b"definitely not gzip"),
        (CompressionFormat.GZIP, gzip.compress(b"truncated stream" * 10)[:-12]),
        (CompressionFormat.ZLIB, b"definitely not zlib"),
        (CompressionFormat.ZIP, b"definitely not a zip archive"),
    ],
)
def test_corrupt_stream_raises_decode_error(fmt, data):
    with pytest.raises(DecodeError) as excinfo:
        decode(fmt, data)
    assert excinfo.value.operation == f"decode {fmt.value}"


def _zip(entries, compression=ZIP_DEFLATED) -> bytes:
    buf = BytesIO()
    with ZipFile(buf, "w", compression=compression) as archive:
        for name, content in entries:
            archive.writestr(name, content)
    return buf.getvalue()


@pytest.mark.parametrize("compression", [ZIP_STORED, ZIP_DEFLATED])
def test_zip_entries_are_concatenated_in_archive_order(compression):
    data = _zip([("b.log", b"entry B\n"), ("a.log", b"entry A\n")], compression)
    assert decode(CompressionFormat.ZIP, data) == b"entry B\nentry A\n"


def test_empty_zip_decodes_to_nothing():
    assert decode(CompressionFormat.ZIP, _zip([])) == b""
