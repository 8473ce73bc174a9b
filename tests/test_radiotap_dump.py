import errno
import struct

import pytest

from dot11kit.radiotap import RadiotapError
from dot11kit.radiotap_defs import RadiotapField as F
from dot11kit.radiotap_dump import format_arguments, main


def rt(words, body=b""):
    fixed = struct.pack("<" + "I" * len(words), *words)
    length = 4 + len(fixed) + len(body)
    return struct.pack("<BBH", 0, 0, length) + fixed + body


def bits(*fields):
    return sum(1 << int(f) for f in fields)


def test_flags_and_rate():
    lines = format_arguments(rt([bits(F.FLAGS, F.RATE)], b"\x10\x04"))
    assert lines == ["\tflags: 10", "\trate: 2.000000"]


def test_tsft():
    body = struct.pack("<Q", 987654321)
    assert format_arguments(rt([bits(F.TSFT)], body)) == ["\tTSFT: 987654321"]


def test_rx_flags():
    lines = format_arguments(rt([bits(F.RX_FLAGS)], b"\x02\x00"))
    assert lines == ["\tRX flags: 0x0002"]


def test_fcs_header():
    raw = rt([bits(F.RX_FLAGS)], struct.pack("<I", 0xDEADBEEF))
    assert format_arguments(raw, fcshdr=True) == ["\tFCS in header: deadbeef"]


def test_unhandled_field_is_bogus():
    raw = rt([bits(F.MCS)], b"\x07\x00\x05")
    assert format_arguments(raw) == ["\tBOGUS DATA"]


def test_silent_field():
    raw = rt([bits(F.CHANNEL)], struct.pack("<HH", 2412, 0xA0))
    assert format_arguments(raw) == []


def test_raw_vendor_namespace():
    body = bytes([0x00, 0x11, 0x22, 0x03]) + struct.pack("<H", 2) + b"\xaa\xbb"
    lines = format_arguments(rt([bits(F.VENDOR_NAMESPACE)], body))
    assert lines == ["\tvendor NS (00-11-22:3, 2 bytes)", "\t\taa bb"]


def test_test_namespace():
    body = bytes(4) + struct.pack("<H", 4) + b"\x01\x02\x03\x04"
    raw = rt([bits(F.VENDOR_NAMESPACE, F.EXT), 1], body)
    assert format_arguments(raw) == ["\t00:00:00-00|0: 01/02/03/04"]


def test_malformed_data_raises():
    with pytest.raises(RadiotapError):
        format_arguments(rt([bits(F.FLAGS, F.RATE)], b"\x10"))


def test_main_prints_fields(tmp_path, capsys):
    path = tmp_path / "header.bin"
    path.write_bytes(rt([bits(F.FLAGS)], b"\x10"))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "\tflags: 10\n"


def test_main_fcshdr(tmp_path, capsys):
    path = tmp_path / "header.bin"
    path.write_bytes(rt([bits(F.RX_FLAGS)], struct.pack("<I", 0xDEADBEEF)))
    assert main(["--fcshdr", str(path)]) == 0
    assert capsys.readouterr().out == "\tFCS in header: deadbeef\n"


def test_main_usage(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.bin"
    assert main([str(missing)]) == 2
    assert "cannot open file" in capsys.readouterr().err


def test_main_malformed_header(tmp_path, capsys):
    path = tmp_path / "header.bin"
    path.write_bytes(b"\x01" + rt([0])[1:])
    assert main([str(path)]) == 3
    out = capsys.readouterr().out
    assert f"malformed radiotap header (init returns {-errno.EINVAL})" in out


def test_main_malformed_data(tmp_path, capsys):
    path = tmp_path / "header.bin"
    path.write_bytes(rt([bits(F.FLAGS, F.RATE)], b"\x10"))
    assert main([str(path)]) == 3
    out = capsys.readouterr().out
    assert out.splitlines() == ["\tflags: 10", "malformed radiotap data"]