"""UTF-16 decoders over 16-bit units or big/little-endian bytes."""

from typing import NamedTuple

from .assemble import ByteOrderDecoder
from .errors import InvalidUtf16
from .source import UnitSource
from .steps import Accept, CharDecoder, Step, decode_char, decode_string


class HighSurrogate(NamedTuple):
    """A high surrogate waiting for its low half."""

    bits: int


class Utf16Decoder(CharDecoder):
    name = "UTF-16"
    unit_width = 16
    error_class = InvalidUtf16

    def start(self, unit: int) -> Step:
        if unit > 0xFFFF:
            return None
        tag = unit & 0xFC00
        if tag == 0xDC00:
            return None
        if tag != 0xD800:
            return Accept(unit)
        plane = ((unit & 0x3C0) >> 6) + 1
        return HighSurrogate((plane << 16) | ((unit & 0x3F) << 10))

    def advance(self, state: HighSurrogate, unit: int) -> Step:
        if unit > 0xFFFF or unit & 0xFC00 != 0xDC00:
            return None
        return Accept(state.bits | (unit & 0x3FF))


UTF16 = Utf16Decoder()
UTF16BE = ByteOrderDecoder(UTF16, "big", "UTF-16BE")
UTF16LE = ByteOrderDecoder(UTF16, "little", "UTF-16LE")


def utf16_char(source: UnitSource) -> str:
    return decode_char(UTF16, source)


def utf16_string(source: UnitSource) -> str:
    return decode_string(UTF16, source)


def utf16be_char(source: UnitSource) -> str:
    return decode_char(UTF16BE, source)


def utf16be_string(source: UnitSource) -> str:
    return decode_string(UTF16BE, source)


def utf16le_char(source: UnitSource) -> str:
    return decode_char(UTF16LE, source)


def utf16le_string(source: UnitSource) -> str:
    return decode_string(UTF16LE, source)
