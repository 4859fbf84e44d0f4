"""Core decoders, unit source and stream decoding."""

from .ascii import ascii_char, ascii_string  # noqa: F401
from .codecs import Encoding, decode_char, decode_string, get_decoder, lookup, source_for  # noqa: F401
from .errors import DecodeError, InvalidAscii, InvalidUtf8, InvalidUtf16, InvalidUtf32  # noqa: F401
from .source import UnitSource  # noqa: F401
from .steps import Accept, CharDecoder, is_scalar_value  # noqa: F401
from .stream import StreamDecoder, iterdecode  # noqa: F401
from .trace import TraceLog  # noqa: F401
from .utf8 import utf8_char, utf8_string  # noqa: F401
from .utf16 import (  # noqa: F401
    utf16_char,
    utf16_string,
    utf16be_char,
    utf16be_string,
    utf16le_char,
    utf16le_string,
)
from .utf32 import (  # noqa: F401
    utf32_char,
    utf32_string,
    utf32be_char,
    utf32be_string,
    utf32le_char,
    utf32le_string,
)
