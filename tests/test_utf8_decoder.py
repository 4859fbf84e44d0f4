import pytest

from unitdecode.core import InvalidUtf8, UnitSource, utf8_char, utf8_string

SCENARIO = b"A\xC3\x85\xE3\x81\x82\xF0\x9F\x92\xAF\xC0\xAF"


def reject(data: bytes) -> UnitSource:
    source = UnitSource.from_bytes(data)
    with pytest.raises(InvalidUtf8):
        utf8_char(source)
    assert source.position == 0
    return source


def test_scenario_chars():
    source = UnitSource.from_bytes(SCENARIO)
    assert utf8_char(source) == "A"
    assert utf8_char(source) == "Å"
    assert utf8_char(source) == "あ"
    assert utf8_char(source) == "\U0001F4AF"
    with pytest.raises(InvalidUtf8):
        utf8_char(source)
    assert source.rest() == [0xC0, 0xAF]


def test_scenario_string_leaves_overlong():
    source = UnitSource.from_bytes(SCENARIO)
    assert utf8_string(source) == "AÅあ\U0001F4AF"
    assert source.position == 10
    assert source.rest() == [0xC0, 0xAF]


def test_boundary_scalars():
    cases = {
        b"\x7F": "\x7F",
        b"\xC2\x80": "\x80",
        b"\xDF\xBF": "\u07ff",
        b"\xE0\xA0\x80": "\u0800",
        b"\xED\x9F\xBF": "\ud7ff",
        b"\xEE\x80\x80": "\ue000",
        b"\xEF\xBF\xBF": "\uffff",
        b"\xF0\x90\x80\x80": "\U00010000",
        b"\xF4\x8F\xBF\xBF": "\U0010FFFF",
    }
    for data, expected in cases.items():
        source = UnitSource.from_bytes(data)
        assert utf8_char(source) == expected
        assert source.at_end()


def test_invalid_lead_bytes():
    for lead in [0x80, 0xBF, 0xC0, 0xC1, 0xF5, 0xF8, 0xFF]:
        reject(bytes([lead, 0x80, 0x80, 0x80]))


def test_overlong_forms():
    reject(b"\xC0\xAF")
    reject(b"\xC1\xBF")
    reject(b"\xE0\x80\xAF")
    reject(b"\xE0\x9F\xBF")
    reject(b"\xF0\x80\x80\xAF")
    reject(b"\xF0\x8F\xBF\xBF")


def test_encoded_surrogates():
    reject(b"\xED\xA0\x80")
    reject(b"\xED\xBF\xBF")


def test_beyond_max_scalar():
    reject(b"\xF4\x90\x80\x80")
    reject(b"\xF4\xBF\xBF\xBF")


def test_bad_continuation_at_each_stage():
    reject(b"\xC3\x41")
    reject(b"\xE3\x81\x41")
    reject(b"\xE3\xC1\x82")
    reject(b"\xF0\x9F\x92\x41")
    reject(b"\xF0\x9F\xC0\xAF")


def test_truncated_sequences_rewind():
    reject(b"\xC3")
    reject(b"\xE3\x81")
    reject(b"\xF0\x9F\x92")


def test_string_stops_inside_text():
    source = UnitSource.from_bytes(b"ok\xE3\x81tail")
    assert utf8_string(source) == "ok"
    assert source.rest() == list(b"\xE3\x81tail")
