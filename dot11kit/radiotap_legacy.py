"""A simpler radiotap walker that knows only the original fourteen fields.

This walker understands bits 0 to 13 of the first presence bitmap.  Extended
bitmaps are skipped to find the start of the field data, but the fields they
announce are not reported.  Vendor namespaces are not recognised.
"""

from __future__ import annotations

import struct
from typing import Dict, Iterator, Optional, Tuple, Union

from .radiotap import RADIOTAP_NAMESPACE, RadiotapArgument
from .radiotap_defs import PKTHDR_RADIOTAP_VERSION, RADIOTAP_HEADER_LEN, RadiotapField

Buffer = Union[bytes, bytearray, memoryview]

_EXT_MASK = 1 << int(RadiotapField.EXT)
_WORD = 4

# Alignment and size, in octets, of every field this walker knows.
_FIELD_LAYOUT: Dict[int, Tuple[int, int]] = {
    RadiotapField.TSFT: (8, 8),
    RadiotapField.FLAGS: (1, 1),
    RadiotapField.RATE: (1, 1),
    RadiotapField.CHANNEL: (2, 4),
    RadiotapField.FHSS: (2, 2),
    RadiotapField.DBM_ANTSIGNAL: (1, 1),
    RadiotapField.DBM_ANTNOISE: (1, 1),
    RadiotapField.LOCK_QUALITY: (2, 2),
    RadiotapField.TX_ATTENUATION: (2, 2),
    RadiotapField.DB_TX_ATTENUATION: (2, 2),
    RadiotapField.DBM_TX_POWER: (1, 1),
    RadiotapField.ANTENNA: (1, 1),
    RadiotapField.DB_ANTSIGNAL: (1, 1),
    RadiotapField.DB_ANTNOISE: (1, 1),
}
_KNOWN_BITS = len(_FIELD_LAYOUT)


class LegacyRadiotapError(ValueError):
    """The radiotap header or its field data is malformed."""


class LegacyRadiotapIterator:
    """Walks the present fields among bits 0 to 13 of a radiotap header."""

    def __init__(self, data: Buffer, max_length: Optional[int] = None) -> None:
        raw = bytes(data)
        if len(raw) < RADIOTAP_HEADER_LEN:
            raise LegacyRadiotapError("data is shorter than a radiotap header")
        limit = len(raw) if max_length is None else max_length
        version, _pad, length, present = struct.unpack_from("<BBHI", raw)
        if version != PKTHDR_RADIOTAP_VERSION:
            raise LegacyRadiotapError(f"unsupported radiotap version {version}")
        if limit < length or len(raw) < length:
            raise LegacyRadiotapError("radiotap length exceeds the available data")

        self._data = raw
        self.max_length = length
        self._arg_index = 0
        self._bitmap_shifter = present
        self._arg = RADIOTAP_HEADER_LEN

        if present & _EXT_MASK:
            while self._le32(self._arg) & _EXT_MASK:
                self._arg += _WORD
                if self._arg > self.max_length:
                    raise LegacyRadiotapError("extended bitmap runs past the header")
            self._arg += _WORD

    def _le32(self, offset: int) -> int:
        if offset + _WORD > len(self._data):
            raise LegacyRadiotapError("presence bitmap runs past the data")
        return struct.unpack_from("<I", self._data, offset)[0]

    def __iter__(self) -> Iterator[RadiotapArgument]:
        return self

    def __next__(self) -> RadiotapArgument:
        while self._arg_index < _KNOWN_BITS:
            index = self._arg_index
            present = bool(self._bitmap_shifter & 1)
            self._arg_index += 1
            self._bitmap_shifter >>= 1
            if not present:
                continue

            align, size = _FIELD_LAYOUT[index]
            pad = self._arg & (align - 1)
            if pad:
                self._arg += align - pad

            offset = self._arg
            self._arg += size
            if self._arg > self.max_length:
                raise LegacyRadiotapError("field data runs past the radiotap length")
            return RadiotapArgument(
                index=index,
                offset=offset,
                data=self._data[offset : offset + size],
                namespace=RADIOTAP_NAMESPACE,
                is_radiotap_ns=True,
            )
        raise StopIteration


def channel_to_mhz(channel: int) -> int:
    """Convert a channel number to its centre frequency in MHz."""
    if channel <= 14:
        return 2484 if channel == 14 else channel * 5 + 2407
    return (channel + 1000) * 5