"""Constants and echo-mode mapping of the RSHELIOS mechanical LiDAR."""

from __future__ import annotations

from .mech import DecoderConstParam, EchoMode, MechConstParam, build_mech_const_param

_BLOCK_TS = 55.56

_FIRING_TSS = (
    0.00, 1.57, 3.15, 4.72, 6.30, 7.87, 9.45, 11.36,
    13.26, 15.17, 17.08, 18.99, 20.56, 22.14, 23.71, 25.29,
    26.53, 29.01, 27.77, 30.25, 31.49, 33.98, 32.73, 35.22,
    36.46, 37.70, 38.94, 40.18, 41.42, 42.67, 43.91, 45.15,
)


def const_param() -> MechConstParam:
    """Packet layout, range and firing-time constants of the RSHELIOS."""
    base = DecoderConstParam(
        msop_len=1248,
        difop_len=1248,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes((0x55, 0xAA, 0x05, 0x5A)),
        difop_id=bytes((0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55)),
        block_id=bytes((0xFF, 0xEE)),
        laser_num=32,
        blocks_per_pkt=12,
        channels_per_block=32,
        distance_min=0.4,
        distance_max=200.0,
        distance_res=0.0025,
        temperature_res=0.0625,
    )
    return build_mech_const_param(base, 0.03498, -0.015, 0.0, _BLOCK_TS, _FIRING_TSS)


def echo_mode(mode) -> EchoMode:
    """Echo mode for the return-mode byte of a difop packet."""
    if mode == 0x00:
        return EchoMode.ECHO_DUAL
    return EchoMode.ECHO_SINGLE