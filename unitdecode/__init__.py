"""Decoders from ASCII, UTF-8, UTF-16 and UTF-32 code units to Unicode scalar values."""

from .core import (  # noqa: F401
    DecodeError,
    Encoding,
    StreamDecoder,
    UnitSource,
    decode_char,
    decode_string,
    iterdecode,
    lookup,
    source_for,
)
