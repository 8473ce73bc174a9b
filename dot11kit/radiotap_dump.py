"""Print the fields of a radiotap header stored in a file."""

from __future__ import annotations

import errno
import struct
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .radiotap import (
    AlignSize,
    Namespace,
    Override,
    RadiotapArgument,
    RadiotapError,
    RadiotapIterator,
)
from .radiotap_defs import RadiotapField as F

TEST_NAMESPACE = Namespace({0: AlignSize(1, 4), 52: AlignSize(1, 4)}, oui=0, subns=0)
FCS_OVERRIDES = (Override(field=int(F.RX_FLAGS), align=4, size=4),)

_USAGE = "usage: radiotap_dump [--fcshdr] <file>\n\t--fcshdr: read bit 14 as FCS"

_SILENT = frozenset(
    {
        F.CHANNEL,
        F.FHSS,
        F.DBM_ANTSIGNAL,
        F.DBM_ANTNOISE,
        F.LOCK_QUALITY,
        F.TX_ATTENUATION,
        F.DB_TX_ATTENUATION,
        F.DBM_TX_POWER,
        F.ANTENNA,
        F.DB_ANTSIGNAL,
        F.DB_ANTNOISE,
        F.TX_FLAGS,
        F.RTS_RETRIES,
        F.DATA_RETRIES,
    }
)


def _radiotap_line(arg: RadiotapArgument, fcshdr: bool) -> Optional[str]:
    index = arg.index
    if index == F.TSFT:
        return f"\tTSFT: {struct.unpack_from('<Q', arg.data)[0]}"
    if index == F.FLAGS:
        return f"\tflags: {arg.data[0]:02x}"
    if index == F.RATE:
        return f"\trate: {arg.data[0] / 2:f}"
    if index == F.RX_FLAGS:
        if fcshdr:
            return f"\tFCS in header: {struct.unpack_from('<I', arg.data)[0]:08x}"
        value = struct.unpack_from("<H", arg.data)[0]
        return f"\tRX flags: {f'0x{value:04x}' if value else '0000'}"
    if index in _SILENT:
        return None
    return "\tBOGUS DATA"


def _test_line(arg: RadiotapArgument) -> str:
    if arg.index in (0, 52):
        octets = "/".join(f"{b:02x}" for b in arg.data[:4])
        return f"\t00:00:00-00|{arg.index}: {octets}"
    return f"\tBOGUS DATA - vendor ns {arg.index}"


def _vendor_lines(arg: RadiotapArgument) -> Iterator[str]:
    head = arg.data
    yield (
        f"\tvendor NS ({head[0]:02x}-{head[1]:02x}-{head[2]:02x}:{head[3]}, "
        f"{arg.size - 6} bytes)"
    )
    parts = []
    for position, octet in enumerate(arg.data[6:], start=6):
        parts.append("\t\t" if position % 8 == 6 else " ")
        parts.append(f"{octet:02x}")
    yield "".join(parts)


def _lines(iterator: RadiotapIterator, fcshdr: bool) -> Iterator[str]:
    for arg in iterator:
        if arg.index == F.VENDOR_NAMESPACE:
            yield from _vendor_lines(arg)
        elif arg.is_radiotap_ns:
            line = _radiotap_line(arg, fcshdr)
            if line is not None:
                yield line
        elif arg.namespace is TEST_NAMESPACE:
            yield _test_line(arg)


def _open_iterator(data: bytes, fcshdr: bool) -> RadiotapIterator:
    return RadiotapIterator(
        data, (TEST_NAMESPACE,), FCS_OVERRIDES if fcshdr else None
    )


def format_arguments(data: bytes, fcshdr: bool = False) -> List[str]:
    """Return the printed lines for every field of a radiotap header.

    With *fcshdr*, bit 14 is read as a 32-bit FCS instead of RX flags.
    Raises RadiotapError if the header or its data is malformed.
    """
    return list(_lines(_open_iterator(bytes(data), fcshdr), fcshdr))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Dump the radiotap header in the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2) or (args[0] == "--fcshdr" and len(args) < 2):
        print(_USAGE, file=sys.stderr)
        return 2

    fcshdr = args[0] == "--fcshdr"
    path = args[1] if fcshdr else args[0]
    try:
        data = Path(path).read_bytes()
    except OSError:
        print(f"cannot open file {path}", file=sys.stderr)
        return 2

    try:
        iterator = _open_iterator(data, fcshdr)
    except RadiotapError:
        print(f"malformed radiotap header (init returns {-errno.EINVAL})")
        return 3

    try:
        for line in _lines(iterator, fcshdr):
            print(line)
    except RadiotapError:
        print("malformed radiotap data")
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())