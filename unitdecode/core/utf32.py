"""UTF-32 decoders over 32-bit units or big/little-endian bytes."""

from .assemble import ByteOrderDecoder
from .errors import InvalidUtf32
from .source import UnitSource
from .steps import Accept, CharDecoder, Step, decode_char, decode_string, is_scalar_value


class Utf32Decoder(CharDecoder):
    name = "UTF-32"
    unit_width = 32
    error_class = InvalidUtf32

    def start(self, unit: int) -> Step:
        return Accept(unit) if is_scalar_value(unit) else None

    def advance(self, state, unit: int) -> Step:
        return None


UTF32 = Utf32Decoder()
UTF32BE = ByteOrderDecoder(UTF32, "big", "UTF-32BE")
UTF32LE = ByteOrderDecoder(UTF32, "little", "UTF-32LE")


def utf32_char(source: UnitSource) -> str:
    return decode_char(UTF32, source)


def utf32_string(source: UnitSource) -> str:
    return decode_string(UTF32, source)


def utf32be_char(source: UnitSource) -> str:
    return decode_char(UTF32BE, source)


def utf32be_string(source: UnitSource) -> str:
    return decode_string(UTF32BE, source)


def utf32le_char(source: UnitSource) -> str:
    return decode_char(UTF32LE, source)


def utf32le_string(source: UnitSource) -> str:
    return decode_string(UTF32LE, source)
