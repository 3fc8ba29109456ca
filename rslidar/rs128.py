"""Constants and echo-mode mapping of the RS128 mechanical LiDAR."""

from __future__ import annotations

from .mech import DecoderConstParam, EchoMode, MechConstParam, build_mech_const_param

_BLOCK_TS = 55.55

_FIRING_TSS = (
    0.00, 0.00, 0.00, 0.00, 3.236, 3.236, 3.236, 3.236,
    6.472, 6.472, 6.472, 6.472, 9.708, 9.708, 9.708, 9.708,
    12.944, 12.944, 12.944, 12.944, 16.18, 16.18, 16.18, 16.18,
    19.416, 19.416, 19.416, 19.416, 22.652, 22.652, 22.652, 22.652,
    25.888, 25.888, 25.888, 25.888, 29.124, 29.124, 29.124, 29.124,
    332.36, 32.36, 32.36, 32.36, 35.596, 35.596, 35.596, 35.596,
    38.832, 38.832, 38.832, 38.832, 42.068, 42.068, 42.068, 42.068,
    45.304, 45.304, 45.304, 45.304, 48.54, 48.54, 48.54, 48.54,

    0.00, 0.00, 0.00, 0.00, 3.236, 3.236, 3.236, 3.236,
    6.472, 6.472, 6.472, 6.472, 9.708, 9.708, 9.708, 9.708,
    12.944, 12.944, 12.944, 12.944, 16.18, 16.18, 16.18, 16.18,
    19.416, 19.416, 19.416, 19.416, 22.652, 22.652, 22.652, 22.652,
    25.888, 25.888, 25.888, 25.888, 29.124, 29.124, 29.124, 29.124,
    32.36, 32.36, 32.36, 32.36, 35.596, 35.596, 35.596, 35.596,
    38.832, 38.832, 38.832, 38.832, 42.068, 42.068, 42.068, 42.068,
    45.304, 45.304, 45.304, 45.304, 48.54, 48.54, 48.54, 48.54,
)


def const_param() -> MechConstParam:
    """Packet layout, range and firing-time constants of the RS128."""
    base = DecoderConstParam(
        msop_len=1248,
        difop_len=1248,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes((0x55, 0xAA, 0x05, 0x5A)),
        difop_id=bytes((0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55)),
        block_id=bytes((0xFE,)),
        laser_num=128,
        blocks_per_pkt=3,
        channels_per_block=128,
        distance_min=1.0,
        distance_max=250.0,
        distance_res=0.005,
        temperature_res=0.0625,
    )
    return build_mech_const_param(base, 0.03615, -0.017, 0.0, _BLOCK_TS, _FIRING_TSS)


def echo_mode(mode) -> EchoMode:
    """Echo mode for the return-mode byte of a difop packet."""
    if mode == 0x03:
        return EchoMode.ECHO_DUAL
    return EchoMode.ECHO_SINGLE