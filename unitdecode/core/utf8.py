"""UTF-8 decoder."""

from typing import NamedTuple

from .errors import InvalidUtf8
from .source import UnitSource
from .steps import Accept, CharDecoder, Step, decode_char, decode_string

CONTINUATION = (0x80, 0xBF)

# Second-byte ranges that exclude overlong forms, encoded surrogates and
# values above U+10FFFF.
SECOND_BYTE = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


class Continuation(NamedTuple):
    """Lead byte seen; `needed` continuation bytes still to come."""

    needed: int
    bits: int
    low: int = CONTINUATION[0]
    high: int = CONTINUATION[1]


class Utf8Decoder(CharDecoder):
    name = "UTF-8"
    unit_width = 8
    error_class = InvalidUtf8

    def start(self, unit: int) -> Step:
        if unit <= 0x7F:
            return Accept(unit)
        if 0xC2 <= unit <= 0xDF:
            needed, bits = 1, unit & 0x1F
        elif 0xE0 <= unit <= 0xEF:
            needed, bits = 2, unit & 0x0F
        elif 0xF0 <= unit <= 0xF4:
            needed, bits = 3, unit & 0x07
        else:
            return None
        low, high = SECOND_BYTE.get(unit, CONTINUATION)
        return Continuation(needed, bits, low, high)

    def advance(self, state: Continuation, unit: int) -> Step:
        if unit & 0xC0 != 0x80 or not state.low <= unit <= state.high:
            return None
        bits = (state.bits << 6) | (unit & 0x3F)
        if state.needed == 1:
            return Accept(bits)
        return Continuation(state.needed - 1, bits)


UTF8 = Utf8Decoder()


def utf8_char(source: UnitSource) -> str:
    return decode_char(UTF8, source)


def utf8_string(source: UnitSource) -> str:
    return decode_string(UTF8, source)
