import struct

import pytest

from dot11kit.radiotap_legacy import (
    LegacyRadiotapError,
    LegacyRadiotapIterator,
    channel_to_mhz,
)


def _header(length, present):
    return struct.pack("<BBHI", 0, 0, length, present)


def test_flags_rate_channel():
    data = (
        _header(14, 0b1110)
        + bytes([0x10, 0x02])
        + struct.pack("<HH", 2437, 0x00A0)
    )
    args = list(LegacyRadiotapIterator(data))
    assert [a.index for a in args] == [1, 2, 3]
    assert [a.offset for a in args] == [8, 9, 10]
    assert args[0].data == bytes([0x10])
    assert args[1].data == bytes([0x02])
    assert struct.unpack("<HH", args[2].data) == (2437, 0x00A0)
    assert all(a.is_radiotap_ns for a in args)


def test_alignment_padding():
    data = _header(14, 0b1100) + bytes([0x16, 0x00]) + struct.pack("<HH", 2412, 0)
    args = list(LegacyRadiotapIterator(data))
    assert [a.offset for a in args] == [8, 10]
    assert args[1].size == 4


def test_tsft_alignment():
    data = _header(24, 0b11) + struct.pack("<Q", 123456789) + bytes([0x10]) + bytes(7)
    args = list(LegacyRadiotapIterator(data))
    assert [a.index for a in args] == [0, 1]
    assert struct.unpack("<Q", args[0].data)[0] == 123456789
    assert args[1].offset == 16


def test_empty_bitmap():
    assert list(LegacyRadiotapIterator(_header(8, 0))) == []


def test_bits_beyond_known_fields_are_ignored():
    data = _header(9, (1 << 14) | 0b10) + bytes([0x01])
    assert [a.index for a in LegacyRadiotapIterator(data)] == [1]


def test_extended_bitmap_is_skipped():
    data = _header(13, (1 << 31) | 0b10) + struct.pack("<I", 0) + bytes([0x22])
    args = list(LegacyRadiotapIterator(data))
    assert [a.offset for a in args] == [12]
    assert args[0].data == bytes([0x22])


def test_bad_version():
    data = struct.pack("<BBHI", 1, 0, 8, 0)
    with pytest.raises(LegacyRadiotapError):
        LegacyRadiotapIterator(data)


def test_max_length_shorter_than_header_length():
    data = _header(9, 0b10) + bytes([0x01])
    with pytest.raises(LegacyRadiotapError):
        LegacyRadiotapIterator(data, 8)


def test_too_short_for_header():
    with pytest.raises(LegacyRadiotapError):
        LegacyRadiotapIterator(b"\x00\x00\x08")


def test_field_overruns_length():
    with pytest.raises(LegacyRadiotapError):
        next(LegacyRadiotapIterator(_header(8, 0b1)))


def test_extended_bitmap_runs_past_data():
    data = _header(12, 1 << 31) + struct.pack("<I", 1 << 31)
    with pytest.raises(LegacyRadiotapError):
        LegacyRadiotapIterator(data)


def test_channel_to_mhz_known_values():
    assert channel_to_mhz(1) == 2412
    assert channel_to_mhz(14) == 2484
    assert channel_to_mhz(36) == 5180


def test_channel_to_mhz_spacing():
    for channel in range(1, 13):
        assert channel_to_mhz(channel + 1) - channel_to_mhz(channel) == 5
    assert channel_to_mhz(14) > channel_to_mhz(13)