import pytest

from rslidar.mech import EchoMode, MechFrameState
from rslidar.rs128 import const_param, echo_mode


def test_layout_constants():
    param = const_param()
    base = param.base
    assert base.msop_len == 1248
    assert base.difop_len == 1248
    assert base.msop_id == bytes((0x55, 0xAA, 0x05, 0x5A))
    assert base.difop_id == bytes((0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55))
    assert base.block_id == bytes((0xFE,))
    assert base.laser_num == 128
    assert base.blocks_per_pkt == 3
    assert base.channels_per_block == 128
    assert base.distance_max == 250.0


def test_lens_center():
    param = const_param()
    assert param.rx == pytest.approx(0.03615)
    assert param.ry == pytest.approx(-0.017)
    assert param.rz == 0.0


def test_one_firing_time_per_laser():
    param = const_param()
    assert len(param.chan_tss) == param.base.laser_num
    assert len(param.chan_azis) == param.base.laser_num


def test_block_duration():
    assert const_param().block_duration == pytest.approx(55.55e-6)


def test_firing_times_and_azimuth_fractions_agree():
    param = const_param()
    for ts, azi in zip(param.chan_tss, param.chan_azis):
        assert ts == pytest.approx(azi * param.block_duration, rel=1e-5)
    assert param.chan_tss[0] == 0.0
    assert param.chan_azis[0] == 0.0


def test_halves_differ_only_at_channel_40():
    tss = const_param().chan_tss
    assert [i for i in range(64) if tss[i] != tss[i + 64]] == [40]
    assert tss[40] == pytest.approx(332.36e-6)


def test_second_half_is_non_decreasing():
    tss = const_param().chan_tss[64:]
    assert list(tss) == sorted(tss)


def test_each_call_returns_independent_object():
    first = const_param()
    first.base.laser_num = 1
    assert const_param().base.laser_num == 128


@pytest.mark.parametrize(
    "mode, expected",
    [
        (0x03, EchoMode.ECHO_DUAL),
        (0x01, EchoMode.ECHO_SINGLE),
        (0x02, EchoMode.ECHO_SINGLE),
        (0x00, EchoMode.ECHO_SINGLE),
        (0xFF, EchoMode.ECHO_SINGLE),
    ],
)
def test_echo_mode(mode, expected):
    assert echo_mode(mode) is expected


def test_frame_state_uses_packet_duration():
    param = const_param()
    state = MechFrameState(param)
    assert state.packet_duration == pytest.approx(param.block_duration * 3)
    assert len(state.chan_angles.vert_angles) == 128


def test_frame_state_default_rps_matches_600_rpm_difop():
    state = MechFrameState(const_param())
    initial = state.blks_per_frame
    state.update_from_difop(600, 0, 36000, [], [])
    assert state.rps == 10
    assert state.blks_per_frame == initial
    assert state.fov_blind_ts_diff == 0.0