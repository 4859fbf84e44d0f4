"""7-bit ASCII decoder."""

from .errors import InvalidAscii
from .source import UnitSource
from .steps import Accept, CharDecoder, Step, decode_char, decode_string


class AsciiDecoder(CharDecoder):
    name = "ASCII"
    unit_width = 8
    error_class = InvalidAscii

    def start(self, unit: int) -> Step:
        return Accept(unit) if unit <= 0x7F else None

    def advance(self, state, unit: int) -> Step:
        return None


ASCII = AsciiDecoder()


def ascii_char(source: UnitSource) -> str:
    return decode_char(ASCII, source)


def ascii_string(source: UnitSource) -> str:
    return decode_string(ASCII, source)
