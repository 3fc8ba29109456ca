"""Constants and echo-mode mapping of the RSM1 LiDAR in jumbo-frame mode."""

from __future__ import annotations

from .mech import DecoderConstParam, EchoMode

FRAME_DURATION = 0.1
SINGLE_PKT_NUM = 630
ANGLE_OFFSET = 32768
PACKET_NUM = 63


def const_param() -> DecoderConstParam:
    """Packet layout and range constants of the RSM1 in jumbo-frame mode."""
    return DecoderConstParam(
        msop_len=62152,
        difop_len=256,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes((0x55, 0xAA, 0x5A, 0xA5)),
        difop_id=bytes((0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55)),
        block_id=bytes((0x00, 0x00)),
        laser_num=5,
        blocks_per_pkt=25,
        channels_per_block=5,
        distance_min=0.2,
        distance_max=200.0,
        distance_res=0.005,
        # Initial temperature value, subtracted from the raw header reading.
        temperature_res=80.0,
    )


def echo_mode(mode) -> EchoMode:
    """Echo mode for the return-mode byte of a difop packet."""
    if mode == 0x00:
        return EchoMode.ECHO_DUAL
    return EchoMode.ECHO_SINGLE


def packet_duration() -> float:
    """Time covered by one sub-packet: a frame's duration over its packet count."""
    return FRAME_DURATION / SINGLE_PKT_NUM