"""Known vendor MAC prefixes for wireless clients and access points.

Each entry is a prefix and a mask written as ``PPPPPPPPPPPP/MMMMMMMMMMMM``
(twelve hex digits each).  A MAC address belongs to an entry when the bits
selected by the mask equal those of the prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from itertools import repeat
from typing import Iterator, Union

MacLike = Union[bytes, bytearray, memoryview, str]

_MAC_LEN = 6

# Compact form of the tables: each token is the significant part of a prefix
# (three or four octets in hex), optionally followed by "*N" when the entry
# occurs N times in a row.  The mask covers exactly the significant octets.
_CLIENT_TABLE = """
00002222 00008F8F 000103 00010303*2 000124 0001F4F4 00022D 00022D2D*35
00026F 00026F6F*4 0002A5 0002A5A5*2 0002B3B3 00032F 00032F2F*3
00045A*3 00045A5A*5 000475 00047575*3 0004DBDB 0004E2 0004E2E2*5
00053C3C 00055D*2 00055D5D*12 000625*2 00062525*25
00070E 00070E0E*2 000750 00075050*2 000821 00082121*4 000943 00094343
00095B 00095B5B*7 00097C 00097C7C*2 00099292 0009B7B7*2 0009E8 0009E8E8
000A41 000A4141*5 000A8A*2 000A8A8A 000B5F5F 0020A6A6 0020D6D6
003065*2 00306565 0030AB 0030ABAB*7 0030BD*2 0030BDBD*6 00400505*6
004026 004096*2 00409696*11 005008 00500808*2 00508B8B*2 0050DA*2 0050DADA
0050F2F2*2 006001 00600101 00601D*2 00601D1D*7 00606D 00606D6D*3
0060B3 0060B3B3*5 00803737 0080C6 00904B4B 00909696 0090D1*2 0090D1D1*3
00A004 00A06565 00A0F8 00A0F8F8*2 00C04949 00E029 00E02929*3 080046 08004646
00000C 000074 000092 0000AA 0000C5 0000CE 0000DE 000103 000124 000138
000195 0001E6 0001F4 00022D 000244 00026F 000272 00028A 0002A5 0002B3
00030A 00032F 000352 000393 000423 00045A 000475 000476 0004DB 0004E2*2
00053C 00054E 00055D 000587 000625*3 0006B1 00070E 000713 000740 000750
000785 0007EB 000821 0008A1 000943 00095B*4 00097C 0009B7 0009E8
000A04 000A41 000A8A 000A95 000AB7 000AE9
000B5F 000B6B 000B6C 000B7D 000B85 000B86 000BAC 000BBE 000BCD 000BFD
000C30 000C41 000C85 000CCE 000CE5 000CF1
000D0B 000D14 000D28 000D29 000D3A 000D54 000D65 000D72 000D88 000D93
000D97 000D9D 000DBD 000DED
000E35 000E38 000E3B 000E58 000E6A 000E7F 000E83 000E84 000E9B 000EA6 000ED7
000F23 000F24 000F34 000F3D 000F66 000F8F 000F90 000FB5 000FEA 000FF7 000FF8
0010C6 0010E7
001109 00110A 001120 001121 001124 00112F 001150 00115C 001188 001192
001193 001195 0011BB 0011D8 0011F5
001200 001201 001217 001225 001243 00127F 001280 001288 0012D9 0012DA 0012F0
001310 001319 00131A 001346 001360 00137F 001380 0013C4
002000 0020A6 0020D8 0020E0
00301A 003065 00306E 0030AB 0030BD*3 0030F1
004001 004005 004026 004033 004036 004096
005008 005018 0050DA 0050F2 0050FC
006001 00601D 00606D 0060B3
008048 0080C6 0080C8
00900E 00904C 009096 0090D1
00A004 00A0C5 00A0F8 00B064 00C002 00C049 00D059
00E000 00E029 00E063 00E098 00E0B8 080046
"""

_ACCESSPOINT_TABLE = """
00000C 000074 000092 0000AA 0000C5 0000CE 0000DE 000103 000124 00012424
000138 000195 0001E6 0001F4 00022D 000244 00026F 000272 00028A 0002A5 0002B3
00030A 00032F 000352 000393 000423 00043A3A 00045A 00045A0E 00045A2E 00045A5A
000475 00047575 000476 0004DB 0004E2*2 0004E2E2 00053C 00054E 00055D 00055D5D
000587 000625*3 00062525*2 0006B1 00070E 000713 000740 000750 000785 0007EB
000821 0008A1 000943 00095B*4 00097C 00099292 0009B7 0009E8
000A04 000A41 000A8A 000A8A8A 000A95 000AB7 000AE9
000B5F 000B6B 000B6C 000B7D 000B85 000B86 000BAC 000BBE 000BCD 000BFD
000C30 000C41 000C85 000CCE 000CE5 000CF1
000D0B 000D14 000D28 000D29 000D3A 000D54 000D65 000D72 000D88 000D93
000D97 000D9D 000DBD 000DED
000E35 000E38 000E3B 000E58 000E6A 000E7F 000E83 000E84 000E9B 000EA6 000ED7
000F23 000F24 000F34 000F3D 000F66 000F8F 000F90 000FB5 000FEA 000FF7 000FF8
0010C6 0010E7
001109 00110A 001120 001121 001124 00112F 001150 00115C 001188 001192
001193 001195 0011BB 0011D8 0011F5
001200 001201 001217 001225 001243 00127F 001280 001288 0012D9 0012DA 0012F0
001310 001319 00131A 001346 001360 00137F 001380 0013C4
002000 0020A6 0020D8 0020E0
00301A 003065 00306565 00306E 0030AB 0030ABAB 0030BD*3 0030BDBD 0030F1
004001 004005 00400505*2 004026 00402626 004033 004036 004096 00409696*3
005008 005018 00508B8B 0050DA 0050DADA 0050F2 0050F2F2 0050FC
006001 00601D 00601D1D 00606D 0060B3
00803737 008048 0080C6 0080C6C6 0080C8
00900E 00904B4B 00904C 009096 0090D1 0090D1D1*2
00A004 00A00404 00A0C5 00A0F8 00B064 00C002 00C049 00D059
00E000 00E029 00E063 00E098 00E0B8 080046
"""


def _mac_bytes(mac: MacLike) -> bytes:
    """Normalise a MAC given as six bytes or as a hex string."""
    if isinstance(mac, str):
        digits = mac.replace(":", "").replace("-", "").replace(".", "")
        if len(digits) != 2 * _MAC_LEN:
            raise ValueError(f"invalid MAC address: {mac!r}")
        try:
            return bytes.fromhex(digits)
        except ValueError:
            raise ValueError(f"invalid MAC address: {mac!r}") from None
    raw = bytes(mac)
    if len(raw) != _MAC_LEN:
        raise ValueError(f"MAC address must be {_MAC_LEN} bytes, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class PrefixMask:
    """A vendor MAC prefix together with the mask of its significant bits."""

    prefix: bytes
    mask: bytes

    def __post_init__(self) -> None:
        if len(self.prefix) != _MAC_LEN or len(self.mask) != _MAC_LEN:
            raise ValueError("prefix and mask must both be 6 bytes long")
        object.__setattr__(self, "prefix", bytes(self.prefix))
        object.__setattr__(self, "mask", bytes(self.mask))

    def matches(self, mac: MacLike) -> bool:
        """Return True if the masked bits of *mac* equal those of the prefix."""
        raw = _mac_bytes(mac)
        return all(
            (octet & m) == (p & m)
            for octet, p, m in zip(raw, self.prefix, self.mask)
        )

    def __str__(self) -> str:
        return f"{self.prefix.hex().upper()}/{self.mask.hex().upper()}"


def _parse_hex_field(field: str, text: str) -> bytes:
    if len(field) != 2 * _MAC_LEN:
        raise ValueError(f"malformed vendor entry: {text!r}")
    try:
        return bytes.fromhex(field)
    except ValueError:
        raise ValueError(f"malformed vendor entry: {text!r}") from None


def parse_entry(text: str) -> PrefixMask:
    """Parse an entry of the form ``PPPPPPPPPPPP/MMMMMMMMMMMM``."""
    prefix_text, sep, mask_text = text.strip().partition("/")
    if not sep:
        raise ValueError(f"malformed vendor entry: {text!r}")
    return PrefixMask(
        _parse_hex_field(prefix_text, text), _parse_hex_field(mask_text, text)
    )


def _expand(table: str) -> Iterator[PrefixMask]:
    for token in table.split():
        significant, _, count = token.partition("*")
        width = len(significant)
        if width not in (6, 8):
            raise ValueError(f"bad table token: {token!r}")
        prefix = significant.ljust(2 * _MAC_LEN, "0")
        mask = ("F" * width).ljust(2 * _MAC_LEN, "0")
        yield from repeat(parse_entry(f"{prefix}/{mask}"), int(count or 1))


@lru_cache(maxsize=None)
def client_masks() -> tuple[PrefixMask, ...]:
    """Prefixes of vendors known to make wireless client devices."""
    return tuple(_expand(_CLIENT_TABLE))


@lru_cache(maxsize=None)
def accesspoint_masks() -> tuple[PrefixMask, ...]:
    """Prefixes of vendors known to make access points."""
    return tuple(_expand(_ACCESSPOINT_TABLE))


def is_known_client(mac: MacLike) -> bool:
    """Return True if *mac* carries a known client vendor prefix."""
    raw = _mac_bytes(mac)
    return any(entry.matches(raw) for entry in client_masks())


def is_known_accesspoint(mac: MacLike) -> bool:
    """Return True if *mac* carries a known access point vendor prefix."""
    raw = _mac_bytes(mac)
    return any(entry.matches(raw) for entry in accesspoint_masks())