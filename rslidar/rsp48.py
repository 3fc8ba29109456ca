"""Constants and echo-mode mapping of the RSP48 mechanical LiDAR."""

from __future__ import annotations

from .mech import DecoderConstParam, EchoMode, MechConstParam, build_mech_const_param

_BLOCK_TS = 55.56

_FIRING_TSS = (
    0.0, 0.0, 1.217, 1.217, 2.434, 2.434, 3.652, 3.652,
    4.869, 4.869, 6.086, 6.086, 7.304, 7.304, 8.521, 8.521,
    9.739, 9.739, 11.323, 11.323, 12.907, 12.907, 14.924, 14.924,
    16.941, 16.941, 18.959, 18.959, 20.976, 20.976, 23.127, 23.127,

    25.278, 25.278, 27.428, 27.428, 29.579, 29.579, 31.963, 31.963,
    34.347, 34.347, 36.498, 36.498, 38.648, 38.648, 40.666, 40.666,
)


def const_param() -> MechConstParam:
    """Packet layout, range and firing-time constants of the RSP48."""
    base = DecoderConstParam(
        msop_len=1268,
        difop_len=1248,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes((0x55, 0xAA, 0x05, 0x5A)),
        difop_id=bytes((0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55)),
        block_id=bytes((0xFE,)),
        laser_num=48,
        blocks_per_pkt=8,
        channels_per_block=48,
        distance_min=1.0,
        distance_max=250.0,
        distance_res=0.005,
        temperature_res=0.0625,
    )
    return build_mech_const_param(base, 0.02892, -0.013, 0.0, _BLOCK_TS, _FIRING_TSS)


def echo_mode(mode) -> EchoMode:
    """Echo mode for the return-mode byte of a difop packet."""
    if mode in (0x00, 0x01, 0x02):
        return EchoMode.ECHO_SINGLE
    return EchoMode.ECHO_DUAL