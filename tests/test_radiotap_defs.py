import pytest

from dot11kit.radiotap_defs import (
    MCS_BW_20,
    MCS_BW_20L,
    MCS_BW_20U,
    MCS_BW_40,
    MCS_FEC_LDPC,
    MCS_NESS_BIT0,
    MCS_SGI,
    MCS_STBC_1,
    MCS_STBC_2,
    MCS_STBC_3,
    MCS_STBC_SHIFT,
    RadiotapFlags,
    mcs_bandwidth,
    mcs_stbc_streams,
)


def test_radiotap_flags_combine_and_test():
    combined = RadiotapFlags.FCS | RadiotapFlags.SHORTPRE
    assert RadiotapFlags.FCS in combined
    assert RadiotapFlags.WEP not in combined
    assert RadiotapFlags(int(combined)) == combined


@pytest.mark.parametrize("bw", [MCS_BW_20, MCS_BW_40, MCS_BW_20L, MCS_BW_20U])
def test_mcs_bandwidth_round_trip(bw):
    assert mcs_bandwidth(bw) == bw
    assert mcs_bandwidth(bw | MCS_SGI | MCS_FEC_LDPC | MCS_NESS_BIT0) == bw


@pytest.mark.parametrize("streams", [0, MCS_STBC_1, MCS_STBC_2, MCS_STBC_3])
def test_mcs_stbc_round_trip(streams):
    flags = streams << MCS_STBC_SHIFT
    assert mcs_stbc_streams(flags) == streams
    assert mcs_stbc_streams(flags | MCS_SGI | MCS_BW_20U) == streams


def test_mcs_fields_are_independent():
    flags = (MCS_STBC_2 << MCS_STBC_SHIFT) | MCS_BW_40
    assert mcs_bandwidth(flags) == MCS_BW_40
    assert mcs_stbc_streams(flags) == MCS_STBC_2


@pytest.mark.parametrize("bad", [-1, 256])
def test_mcs_helpers_reject_out_of_range(bad):
    with pytest.raises(ValueError):
        mcs_bandwidth(bad)
    with pytest.raises(ValueError):
        mcs_stbc_streams(bad)