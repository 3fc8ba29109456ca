"""Per-channel vertical and horizontal angle calibration."""

from __future__ import annotations

import itertools
import re
import struct
from dataclasses import dataclass

_ANGLE = struct.Struct(">BH")
_INVALID_SIGN = 0xFF
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class AngleLoadError(Exception):
    """Angle calibration could not be loaded."""


@dataclass(frozen=True)
class CalibrationAngle:
    """One calibration entry: a sign byte and a big-endian magnitude (0.01 degree)."""

    sign: int
    value: int

    @classmethod
    def from_bytes(cls, data) -> "CalibrationAngle":
        sign, value = _ANGLE.unpack(bytes(data[:_ANGLE.size]))
        return cls(sign, value)

    @property
    def angle(self) -> int:
        return -self.value if self.sign != 0 else self.value


def parse_calibration_angles(data, count):
    """Parse ``count`` consecutive 3-byte calibration entries from ``data``."""
    data = bytes(data)
    needed = count * _ANGLE.size
    if len(data) < needed:
        raise ValueError(f"need {needed} bytes for {count} angles, got {len(data)}")
    return [CalibrationAngle(sign, value) for sign, value in _ANGLE.iter_unpack(data[:needed])]


def gen_user_chans(vert_angles):
    """Rank of each channel by vertical angle, lowest angle first."""
    return [sum(1 for other in vert_angles if other < angle) for angle in vert_angles]


def angle_in_range(value) -> bool:
    """Whether an angle (0.01 degree) lies in [-90, 90) degrees."""
    return -9000 <= value < 9000


def _leading_float(text: str):
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise AngleLoadError(f"not a number: {text!r}")
    return _f32(float(match.group())), match.end()


def _centi(value: float) -> int:
    return int(_f32(value * 100.0))


def read_angle_file(angle_path, size):
    """Read ``size`` lines of "vert,horiz" degrees; return angles in 0.01 degree."""
    try:
        with open(angle_path, encoding="utf-8") as handle:
            lines = list(itertools.islice(handle, size))
    except OSError as exc:
        raise AngleLoadError(f"fail to open angle file: {angle_path}") from exc

    if len(lines) < size:
        raise AngleLoadError(f"angle file {angle_path} has {len(lines)} lines, need {size}")

    vert_angles = []
    horiz_angles = []
    for line in lines:
        vert, end = _leading_float(line)
        horiz, _ = _leading_float(line[end + 1:])
        vert_angles.append(_centi(vert))
        horiz_angles.append(_centi(horiz))
    return vert_angles, horiz_angles


def angles_from_difop(vert_cali, horiz_cali, size):
    """Convert ``size`` difop calibration entries into signed angles."""
    vert_cali = list(vert_cali)[:size]
    horiz_cali = list(horiz_cali)[:size]
    if len(vert_cali) < size or len(horiz_cali) < size:
        raise AngleLoadError(f"need {size} calibration angles")

    vert_angles = []
    horiz_angles = []
    for vert, horiz in zip(vert_cali, horiz_cali):
        if vert.sign == _INVALID_SIGN:
            raise AngleLoadError("difop holds no valid angles")
        if not angle_in_range(vert.angle):
            raise AngleLoadError(f"vertical angle out of range: {vert.angle}")
        if not angle_in_range(horiz.angle):
            raise AngleLoadError(f"horizontal angle out of range: {horiz.angle}")
        vert_angles.append(vert.angle)
        horiz_angles.append(horiz.angle)

    if not vert_angles:
        raise AngleLoadError("no angles in difop")
    return vert_angles, horiz_angles


class ChanAngles:
    """Angle corrections and user channel numbers for each laser channel."""

    def __init__(self, chan_num):
        self.chan_num = chan_num
        self.vert_angles = [0] * chan_num
        self.horiz_angles = [0] * chan_num
        self.user_chans = [0] * chan_num

    def _install(self, vert_angles, horiz_angles):
        self.vert_angles = list(vert_angles)
        self.horiz_angles = list(horiz_angles)
        self.user_chans = gen_user_chans(self.vert_angles)

    def load_from_file(self, angle_path) -> None:
        """Load angles from a CSV file; raises AngleLoadError and keeps old angles on failure."""
        vert, horiz = read_angle_file(angle_path, self.chan_num)
        if len(vert) != self.chan_num:
            raise AngleLoadError(f"expected {self.chan_num} angles, got {len(vert)}")
        self._install(vert, horiz)

    def _as_angles(self, cali):
        if isinstance(cali, (bytes, bytearray, memoryview)):
            return parse_calibration_angles(cali, self.chan_num)
        return list(cali)

    def load_from_difop(self, vert_cali, horiz_cali) -> None:
        """Load angles from difop calibration entries (raw bytes or CalibrationAngle items)."""
        vert, horiz = angles_from_difop(
            self._as_angles(vert_cali), self._as_angles(horiz_cali), self.chan_num
        )
        self._install(vert, horiz)

    def to_user_chan(self, chan) -> int:
        return self.user_chans[chan]

    def horiz_adjust(self, chan, horiz) -> int:
        return horiz + self.horiz_angles[chan]

    def vert_adjust(self, chan) -> int:
        return self.vert_angles[chan]

    def describe(self) -> str:
        lines = [
            "---------------------",
            f"chan_num:{self.chan_num}",
            "vert_angle\thoriz_angle\tuser_chan",
        ]
        lines.extend(
            f"{vert}\t{horiz}\t{user}"
            for vert, horiz, user in zip(self.vert_angles, self.horiz_angles, self.user_chans)
        )
        return "\n".join(lines)