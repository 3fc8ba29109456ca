"""Constants and frame state shared by mechanical (spinning) LiDAR decoders."""

from __future__ import annotations

import enum
import logging
import math
import struct
from dataclasses import dataclass, field, replace

from .chan_angles import AngleLoadError, ChanAngles
from .params import DecoderParam

_log = logging.getLogger(__name__)

RS_ONE_ROUND = 36000


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class EchoMode(enum.Enum):
    """Single or dual return."""

    ECHO_SINGLE = "single"
    ECHO_DUAL = "dual"


@dataclass
class DecoderConstParam:
    """Fixed packet layout and range constants of a LiDAR model."""

    msop_len: int = 0
    difop_len: int = 0
    msop_id_len: int = 0
    difop_id_len: int = 0
    msop_id: bytes = b""
    difop_id: bytes = b""
    block_id: bytes = b""
    laser_num: int = 0
    blocks_per_pkt: int = 0
    channels_per_block: int = 0
    distance_min: float = 0.0
    distance_max: float = 0.0
    distance_res: float = 0.0
    temperature_res: float = 0.0


@dataclass
class MechConstParam:
    """Constants of a mechanical LiDAR: lens centre and firing timing."""

    base: DecoderConstParam = field(default_factory=DecoderConstParam)
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    block_duration: float = 0.0
    chan_tss: tuple = ()
    chan_azis: tuple = ()


def build_mech_const_param(base, rx, ry, rz, block_ts, firing_tss) -> MechConstParam:
    """Build mechanical constants from a block time and per-channel firing times (microseconds)."""
    block_ts = _f32(block_ts)
    firing = [_f32(ts) for ts in firing_tss]
    return MechConstParam(
        base=base,
        rx=_f32(rx),
        ry=_f32(ry),
        rz=_f32(rz),
        block_duration=_f32(block_ts / 1000000),
        chan_tss=tuple(ts / 1000000 for ts in firing),
        chan_azis=tuple(_f32(ts / block_ts) for ts in firing),
    )


def lens_center(rx, ry):
    """Lens centre as (angle in 0.01 degree, distance from the axis)."""
    alph0 = int(_f32(_f32(math.atan2(ry, rx)) * 180) / math.pi * 100)
    rxy = _f32(math.sqrt(_f32(rx * rx + ry * ry)))
    return alph0, rxy


def _blocks_per_frame(rps: int, block_duration: float) -> int:
    if block_duration <= 0:
        return 0
    return int(1 / (rps * block_duration)) & 0xFFFF


class MechFrameState:
    """Rotation, frame size, field-of-view and angle state of a mechanical decoder."""

    def __init__(self, const_param, param=None):
        self.const_param = const_param
        self.param = replace(param) if param is not None else DecoderParam()
        base = const_param.base

        self.chan_angles = ChanAngles(base.laser_num)
        self.scan_section = (
            int(_f32(self.param.start_angle * 100)),
            int(_f32(self.param.end_angle * 100)),
        )
        self.echo_mode = EchoMode.ECHO_SINGLE
        self.angles_ready = False
        self.rps = 10
        self.blks_per_frame = _blocks_per_frame(self.rps, const_param.block_duration)
        self.split_blks_per_frame = self.blks_per_frame
        self.block_az_diff = 20
        self.fov_blind_ts_diff = 0.0
        self.packet_duration = const_param.block_duration * base.blocks_per_pkt
        self.lidar_alph0, self.lidar_rxy = lens_center(const_param.rx, const_param.ry)

        if self.param.config_from_file:
            try:
                self.chan_angles.load_from_file(self.param.angle_path)
                self.angles_ready = True
            except AngleLoadError as exc:
                _log.warning("%s", exc)
            if self.param.wait_for_difop:
                self.param.wait_for_difop = False
                _log.warning(
                    "wait_for_difop cannot be true when config_from_file is true. "
                    "reset it to be false."
                )

    def update_from_difop(self, rpm, fov_start, fov_end, vert_cali, horiz_cali) -> None:
        """Apply the rotation speed, field of view and angles carried by a difop packet."""
        self.rps = rpm // 60
        if self.rps == 0:
            _log.warning("LiDAR RPM is 0. Use default value 600.")
            self.rps = 10

        duration = self.const_param.block_duration
        self.blks_per_frame = _blocks_per_frame(self.rps, duration)
        self.block_az_diff = int(math.floor(RS_ONE_ROUND * self.rps * duration + 0.5)) & 0xFFFF

        if fov_start < fov_end:
            fov_range = fov_end - fov_start
        else:
            fov_range = (fov_end + RS_ONE_ROUND - fov_start) & 0xFFFF
        fov_blind_range = (RS_ONE_ROUND - fov_range) & 0xFFFF
        self.fov_blind_ts_diff = fov_blind_range / (RS_ONE_ROUND * self.rps)

        if not self.param.config_from_file and not self.angles_ready:
            try:
                self.chan_angles.load_from_difop(vert_cali, horiz_cali)
                self.angles_ready = True
            except AngleLoadError:
                self.angles_ready = False

    def describe(self) -> str:
        lines = [
            "-----------------------------------------",
            f"rps:\t\t\t{self.rps}",
            f"echo_mode:\t\t{self.echo_mode.name}",
            f"blks_per_frame:\t\t{self.blks_per_frame}",
            f"split_blks_per_frame:\t{self.split_blks_per_frame}",
            f"block_az_diff:\t\t{self.block_az_diff}",
            f"fov_blind_ts_diff:\t{self.fov_blind_ts_diff:g}",
            f"angle_from_file:\t{int(self.param.config_from_file)}",
            f"angles_ready:\t\t{int(self.angles_ready)}",
        ]
        return "\n".join(lines) + "\n" + self.chan_angles.describe()