"""Registry of the supported encoding variants."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Dict, Iterable, Union

from .ascii import ASCII
from .source import UnitSource
from .steps import CharDecoder
from .steps import decode_char as _decode_char
from .steps import decode_string as _decode_string
from .utf8 import UTF8
from .utf16 import UTF16, UTF16BE, UTF16LE
from .utf32 import UTF32, UTF32BE, UTF32LE


class Encoding(Enum):
    ASCII = "ascii"
    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF16_BE = "utf-16-be"
    UTF16_LE = "utf-16-le"
    UTF32 = "utf-32"
    UTF32_BE = "utf-32-be"
    UTF32_LE = "utf-32-le"

    @property
    def decoder(self) -> CharDecoder:
        return _DECODERS[self]

    @property
    def unit_width(self) -> int:
        return self.decoder.unit_width

    @property
    def native(self) -> bool:
        """True for the variants that read 16/32-bit units directly."""
        return self in (Encoding.UTF16, Encoding.UTF32)


_DECODERS: Dict[Encoding, CharDecoder] = {
    Encoding.ASCII: ASCII,
    Encoding.UTF8: UTF8,
    Encoding.UTF16: UTF16,
    Encoding.UTF16_BE: UTF16BE,
    Encoding.UTF16_LE: UTF16LE,
    Encoding.UTF32: UTF32,
    Encoding.UTF32_BE: UTF32BE,
    Encoding.UTF32_LE: UTF32LE,
}

EncodingLike = Union[Encoding, str]


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "-").replace(" ", "-")


_ALIASES: Dict[str, Encoding] = {}
for _encoding in Encoding:
    _ALIASES[_encoding.value] = _encoding
    _ALIASES[_encoding.value.replace("-", "")] = _encoding
    # utf-16be, utf-32le, ...
    _ALIASES[_encoding.value[:6] + _encoding.value[7:]] = _encoding
_ALIASES["us-ascii"] = Encoding.ASCII
del _encoding


def lookup(encoding: EncodingLike) -> Encoding:
    if isinstance(encoding, Encoding):
        return encoding
    try:
        return _ALIASES[_normalize(encoding)]
    except KeyError:
        raise LookupError(f"Unknown encoding: {encoding}") from None


def get_decoder(encoding: EncodingLike) -> CharDecoder:
    return lookup(encoding).decoder


def decode_char(source: UnitSource, encoding: EncodingLike) -> str:
    return _decode_char(get_decoder(encoding), source)


def decode_string(source: UnitSource, encoding: EncodingLike) -> str:
    return _decode_string(get_decoder(encoding), source)


def source_for(data: Union[bytes, bytearray, Iterable[int]], encoding: EncodingLike) -> UnitSource:
    """
    Build a source of the right unit width for `encoding`.

    Bytes given to a native UTF-16/UTF-32 variant are split into units in the
    host byte order; a trailing partial unit raises ValueError. Any other
    iterable is taken as already-formed units.
    """
    enc = lookup(encoding)
    width = enc.unit_width
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return UnitSource.from_units(data, width)
    if not enc.native:
        return UnitSource.from_bytes(data)
    size = width // 8
    raw = bytes(data)
    if len(raw) % size:
        raise ValueError(f"{len(raw)} bytes is not a whole number of {width}-bit units")
    units = [
        int.from_bytes(raw[i : i + size], sys.byteorder) for i in range(0, len(raw), size)
    ]
    return UnitSource.from_units(units, width)
