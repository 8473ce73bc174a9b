"""Radiotap field indices and flag values.

The radiotap header precedes a captured 802.11 frame; all of its fields are
little endian.  The header itself is a version octet, a pad octet, a 16-bit
length and one or more 32-bit presence bitmaps.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag

PKTHDR_RADIOTAP_VERSION = 0
RADIOTAP_HEADER_LEN = 8


class RadiotapField(IntEnum):
    """Bit numbers of the radiotap presence bitmap."""

    TSFT = 0
    FLAGS = 1
    RATE = 2
    CHANNEL = 3
    FHSS = 4
    DBM_ANTSIGNAL = 5
    DBM_ANTNOISE = 6
    LOCK_QUALITY = 7
    TX_ATTENUATION = 8
    DB_TX_ATTENUATION = 9
    DBM_TX_POWER = 10
    ANTENNA = 11
    DB_ANTSIGNAL = 12
    DB_ANTNOISE = 13
    RX_FLAGS = 14
    TX_FLAGS = 15
    RTS_RETRIES = 16
    DATA_RETRIES = 17
    MCS = 19
    AMPDU_STATUS = 20
    # Valid in every presence bitmap, vendor namespaces included.
    RADIOTAP_NAMESPACE = 29
    VENDOR_NAMESPACE = 30
    EXT = 31


class ChannelFlags(IntFlag):
    """Flags carried with the channel frequency."""

    TURBO = 0x0010
    CCK = 0x0020
    OFDM = 0x0040
    GHZ_2 = 0x0080
    GHZ_5 = 0x0100
    PASSIVE = 0x0200
    DYN = 0x0400
    GFSK = 0x0800


class RadiotapFlags(IntFlag):
    """Values of the FLAGS field."""

    CFP = 0x01
    SHORTPRE = 0x02
    WEP = 0x04
    FRAG = 0x08
    FCS = 0x10
    DATAPAD = 0x20
    BADFCS = 0x40


# RX_FLAGS field
RX_FLAG_BADPLCP = 0x0002

# TX_FLAGS field
TX_FLAG_FAIL = 0x0001
TX_FLAG_CTS = 0x0002
TX_FLAG_RTS = 0x0004

# AMPDU_STATUS flags
AMPDU_REPORT_ZEROLEN = 0x0001
AMPDU_IS_ZEROLEN = 0x0002
AMPDU_LAST_KNOWN = 0x0004
AMPDU_IS_LAST = 0x0008
AMPDU_DELIM_CRC_ERR = 0x0010
AMPDU_DELIM_CRC_KNOWN = 0x0020


class McsKnown(IntFlag):
    """The 'known' octet of the MCS field."""

    HAVE_BW = 0x01
    HAVE_MCS = 0x02
    HAVE_GI = 0x04
    HAVE_FMT = 0x08
    HAVE_FEC = 0x10
    HAVE_STBC = 0x20
    HAVE_NESS = 0x40
    NESS_BIT1 = 0x80


# The 'flags' octet of the MCS field.
MCS_BW_MASK = 0x03
MCS_BW_20 = 0
MCS_BW_40 = 1
MCS_BW_20L = 2
MCS_BW_20U = 3
MCS_SGI = 0x04
MCS_FMT_GF = 0x08
MCS_FEC_LDPC = 0x10
MCS_STBC_MASK = 0x60
MCS_STBC_SHIFT = 5
MCS_STBC_1 = 1
MCS_STBC_2 = 2
MCS_STBC_3 = 3
MCS_NESS_BIT0 = 0x80


def _octet(flags: int) -> int:
    value = int(flags)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"MCS flags must fit in one octet, got {value}")
    return value


def mcs_bandwidth(flags: int) -> int:
    """Return the bandwidth code (MCS_BW_20 .. MCS_BW_20U) of an MCS flags octet."""
    return _octet(flags) & MCS_BW_MASK


def mcs_stbc_streams(flags: int) -> int:
    """Return the number of STBC streams encoded in an MCS flags octet."""
    return (_octet(flags) & MCS_STBC_MASK) >> MCS_STBC_SHIFT