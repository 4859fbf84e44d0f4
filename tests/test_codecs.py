import sys

import pytest

from unitdecode.core import (
    Encoding,
    InvalidUtf8,
    InvalidUtf16,
    decode_char,
    decode_string,
    get_decoder,
    lookup,
    source_for,
)


def test_seven_variants_and_ascii():
    assert [e.value for e in Encoding] == [
        "ascii",
        "utf-8",
        "utf-16",
        "utf-16-be",
        "utf-16-le",
        "utf-32",
        "utf-32-be",
        "utf-32-le",
    ]
    assert Encoding.UTF16.unit_width == 16
    assert Encoding.UTF32.unit_width == 32
    assert Encoding.UTF16_BE.unit_width == 8
    assert Encoding.UTF16.native and not Encoding.UTF16_LE.native


@pytest.mark.parametrize(
    "name, expected",
    [
        ("UTF-8", Encoding.UTF8),
        ("utf8", Encoding.UTF8),
        ("UTF-16LE", Encoding.UTF16_LE),
        ("utf_16_be", Encoding.UTF16_BE),
        ("utf32", Encoding.UTF32),
        ("us-ascii", Encoding.ASCII),
        (Encoding.UTF32_LE, Encoding.UTF32_LE),
    ],
)
def test_lookup_aliases(name, expected):
    assert lookup(name) is expected


def test_lookup_unknown():
    with pytest.raises(LookupError):
        lookup("latin-1")


def test_decoder_names():
    assert get_decoder("utf-16-be").name == "UTF-16BE"
    assert get_decoder("utf-32-le").name == "UTF-32LE"
    assert get_decoder("utf-8").name == "UTF-8"


def test_source_for_native_units_uses_host_order():
    data = "\U0001D11Ex".encode("utf-16-le" if sys.byteorder == "little" else "utf-16-be")
    source = source_for(data, "utf-16")
    assert source.width == 16
    assert source.units == [0xD834, 0xDD1E, 0x78]
    assert decode_string(source, "utf-16") == "\U0001D11Ex"


def test_source_for_rejects_partial_unit():
    with pytest.raises(ValueError):
        source_for(b"\x00\x00\x00", Encoding.UTF32)


def test_source_for_units():
    source = source_for([0x41, 0x110000], "utf-32")
    assert decode_string(source, "utf-32") == "A"
    assert source.rest() == [0x110000]


def test_fallback_chaining_over_remaining_input():
    source = source_for(b"plain \xE3\x81\x82", "ascii")
    assert decode_string(source, "ascii") == "plain "
    assert decode_string(source, "utf-8") == "あ"
    assert source.at_end()


def test_errors_name_the_variant():
    with pytest.raises(InvalidUtf8):
        decode_char(source_for(b"\xFF", "utf-8"), "utf-8")
    with pytest.raises(InvalidUtf16) as excinfo:
        decode_char(source_for(b"\x00\xDC", "utf-16-le"), "utf-16-le")
    assert str(excinfo.value) == "invalid UTF-16LE sequence"
