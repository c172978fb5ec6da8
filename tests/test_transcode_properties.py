"""Property checks of the transcoder against Python's own UTF-8 codec."""

import random

import pytest

from utf8coder.core import (
    InvalidSurrogatePair,
    UnexpectedLowSurrogate,
    UnitBuffer,
    decode,
    to_utf8_bytes,
    transcode,
    transcode_units,
)

SEED = 2781


def random_bmp_text(rng, length):
    chars = []
    while len(chars) < length:
        value = rng.randint(0, 0xFFFF)
        if 0xD800 <= value <= 0xDFFF:
            continue
        chars.append(chr(value))
    return "".join(chars)


def random_text(rng, length):
    chars = []
    while len(chars) < length:
        value = rng.randint(0, 0x10FFFF)
        if 0xD800 <= value <= 0xDFFF:
            continue
        chars.append(chr(value))
    return "".join(chars)


def test_bmp_text_matches_platform_encoding():
    rng = random.Random(SEED)
    for _ in range(200):
        text = random_bmp_text(rng, rng.randint(0, 40))
        assert transcode(text) == text.encode("utf-8")


def test_every_surrogate_pair_decodes_to_one_four_byte_code_point():
    rng = random.Random(SEED)
    pairs = [(0xD800, 0xDC00), (0xDBFF, 0xDFFF)]
    pairs += [(rng.randint(0xD800, 0xDBFF), rng.randint(0xDC00, 0xDFFF)) for _ in range(500)]
    for high, low in pairs:
        (code_point,) = decode(UnitBuffer.from_units([high, low]))
        assert 0x10000 <= code_point <= 0x10FFFF
        data = to_utf8_bytes([code_point])
        assert len(data) == 4
        assert data[0] >> 3 == 0b11110
        assert all(byte >> 6 == 0b10 for byte in data[1:])
        assert data == chr(code_point).encode("utf-8")


def test_well_formed_utf16_round_trips_through_utf8():
    rng = random.Random(SEED)
    for _ in range(200):
        text = random_text(rng, rng.randint(0, 30))
        units = text.encode("utf-16-le")
        raw = [int.from_bytes(units[i:i + 2], "little") for i in range(0, len(units), 2)]
        code_points = decode(UnitBuffer.from_units(raw))
        assert len(code_points) <= len(raw)
        decoded = to_utf8_bytes(code_points).decode("utf-8")
        assert [ord(c) for c in decoded] == code_points
        assert decoded == text


def test_random_unit_streams_fail_or_match_strict_codec():
    rng = random.Random(SEED)
    for _ in range(300):
        raw = [rng.choice([rng.randint(0, 0xFFFF), rng.randint(0xD800, 0xDFFF)]) for _ in range(8)]
        data = b"".join(unit.to_bytes(2, "little") for unit in raw)
        try:
            expected = data.decode("utf-16-le").encode("utf-8")
        except UnicodeDecodeError:
            with pytest.raises((InvalidSurrogatePair, UnexpectedLowSurrogate)):
                transcode_units(raw)
        else:
            assert transcode_units(raw) == expected
