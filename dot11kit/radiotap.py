"""Iteration over the fields of a radiotap capture header.

A radiotap header is a version octet, a pad octet, a little-endian 16-bit
total length and a chain of 32-bit presence bitmaps, followed by the data of
every field that is present.  Each field is aligned to its natural boundary,
counted from the start of the header.  Bits 29 and 30 of every bitmap switch
between the standard namespace and vendor namespaces; bit 31 says that another
bitmap follows.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from .radiotap_defs import PKTHDR_RADIOTAP_VERSION, RADIOTAP_HEADER_LEN, RadiotapField

_NS_BIT = int(RadiotapField.RADIOTAP_NAMESPACE)
_VENDOR_BIT = int(RadiotapField.VENDOR_NAMESPACE)
_EXT_BIT = int(RadiotapField.EXT)
_EXT_MASK = 1 << _EXT_BIT
_WORD = 4
_VENDOR_HEADER_LEN = 6

Buffer = Union[bytes, bytearray, memoryview]


class RadiotapError(ValueError):
    """The radiotap header or its field data is malformed."""


@dataclass(frozen=True)
class AlignSize:
    """Alignment and size, in octets, of one radiotap field."""

    align: int
    size: int


@dataclass(frozen=True, eq=False)
class Namespace:
    """Field layouts of one namespace, keyed by bit number.

    Vendor namespaces are identified by their OUI and sub-namespace number.
    Bits without an entry have no known layout.
    """

    align_size: Mapping[int, AlignSize]
    oui: int = 0
    subns: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "align_size", {int(k): v for k, v in self.align_size.items()}
        )

    @property
    def n_bits(self) -> int:
        """Number of bit positions the namespace describes."""
        return max(self.align_size, default=-1) + 1


RADIOTAP_NAMESPACE = Namespace(
    {
        RadiotapField.TSFT: AlignSize(8, 8),
        RadiotapField.FLAGS: AlignSize(1, 1),
        RadiotapField.RATE: AlignSize(1, 1),
        RadiotapField.CHANNEL: AlignSize(2, 4),
        RadiotapField.FHSS: AlignSize(2, 2),
        RadiotapField.DBM_ANTSIGNAL: AlignSize(1, 1),
        RadiotapField.DBM_ANTNOISE: AlignSize(1, 1),
        RadiotapField.LOCK_QUALITY: AlignSize(2, 2),
        RadiotapField.TX_ATTENUATION: AlignSize(2, 2),
        RadiotapField.DB_TX_ATTENUATION: AlignSize(2, 2),
        RadiotapField.DBM_TX_POWER: AlignSize(1, 1),
        RadiotapField.ANTENNA: AlignSize(1, 1),
        RadiotapField.DB_ANTSIGNAL: AlignSize(1, 1),
        RadiotapField.DB_ANTNOISE: AlignSize(1, 1),
        RadiotapField.RX_FLAGS: AlignSize(2, 2),
        RadiotapField.TX_FLAGS: AlignSize(2, 2),
        RadiotapField.RTS_RETRIES: AlignSize(1, 1),
        RadiotapField.DATA_RETRIES: AlignSize(1, 1),
        RadiotapField.MCS: AlignSize(1, 3),
        RadiotapField.AMPDU_STATUS: AlignSize(4, 8),
    }
)


@dataclass(frozen=True)
class Override:
    """Replacement layout for a field of the standard namespace."""

    field: int
    align: int
    size: int


@dataclass(frozen=True)
class RadiotapArgument:
    """One present field: its bit index, position and raw little-endian data.

    For a vendor namespace that was not registered, ``index`` is
    ``RadiotapField.VENDOR_NAMESPACE`` and ``data`` holds the six-octet vendor
    header followed by the whole of the vendor data.
    """

    index: int
    offset: int
    data: bytes
    namespace: Optional[Namespace]
    is_radiotap_ns: bool

    @property
    def size(self) -> int:
        return len(self.data)


class RadiotapIterator:
    """Walks the present fields of a radiotap header in order."""

    def __init__(
        self,
        data: Buffer,
        vendor_namespaces: Optional[Iterable[Namespace]] = None,
        overrides: Optional[Iterable[Override]] = None,
    ) -> None:
        raw = bytes(data)
        if len(raw) < RADIOTAP_HEADER_LEN:
            raise RadiotapError("data is shorter than a radiotap header")
        version, _pad, length, present = struct.unpack_from("<BBHI", raw)
        if version != PKTHDR_RADIOTAP_VERSION:
            raise RadiotapError(f"unsupported radiotap version {version}")
        if len(raw) < length:
            raise RadiotapError("radiotap length exceeds the available data")

        self._data = raw
        self.length = length
        self._vns: Tuple[Namespace, ...] = tuple(vendor_namespaces or ())
        self._overrides: Tuple[Override, ...] = tuple(overrides or ())
        self._arg_index = 0
        self._bitmap_shifter = present
        self._arg = RADIOTAP_HEADER_LEN
        self._next_bitmap = RADIOTAP_HEADER_LEN
        self._next_ns_data: Optional[int] = None
        self._reset_on_ext = False
        self.current_namespace: Optional[Namespace] = RADIOTAP_NAMESPACE
        self.is_radiotap_ns = True

        if present & _EXT_MASK:
            if self._arg + _WORD > length:
                raise RadiotapError("extended bitmap runs past the header")
            while self._le32(self._arg) & _EXT_MASK:
                self._arg += _WORD
                if self._arg + _WORD > length:
                    raise RadiotapError("extended bitmap runs past the header")
            self._arg += _WORD

    def _le32(self, offset: int) -> int:
        return struct.unpack_from("<I", self._data, offset)[0]

    def __iter__(self) -> Iterator[RadiotapArgument]:
        return self

    def _advance(self) -> None:
        self._bitmap_shifter >>= 1
        self._arg_index += 1

    def _find_override(self) -> Optional[Tuple[int, int]]:
        for override in self._overrides:
            if override.field == self._arg_index:
                if not override.align:
                    return None
                return override.align, override.size
        return None

    def _find_namespace(self, oui: int, subns: int) -> Optional[Namespace]:
        for namespace in self._vns:
            if namespace.oui == oui and namespace.subns == subns:
                return namespace
        return None

    def _layout(self, bit: int) -> Optional[Tuple[int, int]]:
        """Alignment and size of the current field, or None to skip the namespace."""
        if bit in (_NS_BIT, _EXT_BIT):
            return 1, 0
        if bit == _VENDOR_BIT:
            return 2, _VENDOR_HEADER_LEN
        override = self._find_override()
        if override is not None:
            return override
        namespace = self.current_namespace
        if namespace is None or self._arg_index >= namespace.n_bits:
            if namespace is RADIOTAP_NAMESPACE:
                raise StopIteration
            return None
        entry = namespace.align_size.get(self._arg_index)
        if entry is None or not entry.align:
            return None
        return entry.align, entry.size

    def _argument(self, index: int, offset: int, size: int) -> RadiotapArgument:
        return RadiotapArgument(
            index=index,
            offset=offset,
            data=self._data[offset : offset + size],
            namespace=self.current_namespace,
            is_radiotap_ns=self.is_radiotap_ns,
        )

    def __next__(self) -> RadiotapArgument:
        while True:
            bit = self._arg_index % 32
            present = bool(self._bitmap_shifter & 1)
            if bit == _EXT_BIT and not present:
                raise StopIteration
            if not present:
                self._advance()
                continue

            layout = self._layout(bit)
            if layout is None:
                # Nothing more can be understood in this namespace: jump past it.
                self._arg = (
                    self._next_ns_data if self._next_ns_data is not None else self.length
                )
                self.current_namespace = None
                self._advance()
                continue
            align, size = layout

            pad = self._arg & (align - 1)
            if pad:
                self._arg += align - pad

            if bit == _VENDOR_BIT:
                start = self._arg
                if start + size > self.length:
                    raise RadiotapError("vendor namespace header runs past the header")
                oui = int.from_bytes(self._data[start : start + 3], "big")
                subns = self._data[start + 3]
                self.current_namespace = self._find_namespace(oui, subns)
                vnslen = struct.unpack_from("<H", self._data, start + 4)[0]
                self._next_ns_data = start + size + vnslen
                if self.current_namespace is None:
                    size += vnslen

            index = self._arg_index
            offset = self._arg
            self._arg += size
            if self._arg > self.length:
                raise RadiotapError("field data runs past the radiotap length")

            if bit == _VENDOR_BIT:
                self._reset_on_ext = True
                self.is_radiotap_ns = False
                unknown = self.current_namespace is None
                self._advance()
                if unknown:
                    return self._argument(_VENDOR_BIT, offset, size)
                continue
            if bit == _NS_BIT:
                self._reset_on_ext = True
                self.current_namespace = RADIOTAP_NAMESPACE
                self.is_radiotap_ns = True
                self._advance()
                continue
            if bit == _EXT_BIT:
                self._bitmap_shifter = self._le32(self._next_bitmap)
                self._next_bitmap += _WORD
                self._arg_index = 0 if self._reset_on_ext else self._arg_index + 1
                self._reset_on_ext = False
                continue

            self._advance()
            return self._argument(index, offset, size)


def iterate(
    data: Buffer,
    vendor_namespaces: Optional[Iterable[Namespace]] = None,
    overrides: Optional[Iterable[Override]] = None,
) -> RadiotapIterator:
    """Return an iterator over the present fields of a radiotap header."""
    return RadiotapIterator(data, vendor_namespaces, overrides)