from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Set

from log_parser.models import CompressionFormat


class Decoder(ABC):
    @abstractmethod
    def formats(self) -> Set[CompressionFormat]: ...

    @abstractmethod
    def decode(self, data: bytes) -> bytes: ...


class DecoderRegistry:
    """Maps each compression format to the decoder handling it.

    A format nobody registered for falls back to ``fallback``, which is
    expected to pass bytes through unchanged.
    """

    def __init__(self, fallback: Decoder) -> None:
        self._fallback = fallback
        self._impls: Dict[CompressionFormat, Decoder] = {}

    def register(self, impl: Decoder) -> None:
        for fmt in impl.formats():
            self._impls[fmt] = impl

    def for_format(self, fmt: CompressionFormat) -> Decoder:
        return self._impls.get(CompressionFormat(fmt), self._fallback)

    def decode(self, fmt: CompressionFormat, data: bytes) -> bytes:
        return self.for_format(fmt).decode(data)

    def registered(self) -> Set[CompressionFormat]:
        return set(self._impls)
