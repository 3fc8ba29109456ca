"""Driver, input, decoder and transform parameters."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)

_RULE = "-" * 54


class LidarType(enum.IntEnum):
    """Supported LiDAR models."""

    RS16 = 0x01
    RS32 = 0x02
    RSBP = 0x03
    RS128 = 0x04
    RS80 = 0x05
    RSP128 = 0x06
    RSP80 = 0x07
    RSP48 = 0x08
    RSHELIOS = 0x09
    RSHELIOS_16P = 0x0A
    RSROCK = 0x0B

    RSM1 = 0x20
    RSM2 = 0x21
    RSEOS = 0x22

    RS_JUMBO = 0x100
    RSM1_JUMBO = 0x100 + 0x20


_NAMED_TYPES = (
    LidarType.RS16,
    LidarType.RS32,
    LidarType.RSBP,
    LidarType.RSHELIOS,
    LidarType.RSHELIOS_16P,
    LidarType.RS128,
    LidarType.RS80,
    LidarType.RSP128,
    LidarType.RSP80,
    LidarType.RSP48,
    LidarType.RSM1,
    LidarType.RSM2,
    LidarType.RSEOS,
    LidarType.RSM1_JUMBO,
)

_TYPES_BY_NAME = {t.name: t for t in _NAMED_TYPES}


def lidar_type_to_str(lidar_type) -> str:
    """Name of a LiDAR type, or ``"ERROR"`` for one without a name."""
    try:
        lidar_type = LidarType(lidar_type)
    except ValueError:
        lidar_type = None
    if lidar_type in _NAMED_TYPES:
        return lidar_type.name
    _log.error("unknown lidar type: %r", lidar_type)
    return "ERROR"


def str_to_lidar_type(name: str) -> LidarType:
    """LiDAR type for a name; raises ValueError for an unknown name."""
    try:
        return _TYPES_BY_NAME[name]
    except KeyError:
        choices = ", ".join(_TYPES_BY_NAME)
        raise ValueError(
            f"Wrong lidar type: {name}. Please give correct type: {choices}."
        ) from None


class InputType(enum.IntEnum):
    """Where packets come from."""

    ONLINE_LIDAR = 1
    PCAP_FILE = 2
    RAW_PACKET = 3


def input_type_to_str(input_type) -> str:
    """Name of an input type, or ``"ERROR"`` for an unknown one."""
    try:
        return InputType(input_type).name
    except ValueError:
        _log.error("unknown input type: %r", input_type)
        return "ERROR"


class SplitFrameMode(enum.IntEnum):
    """How packets are grouped into frames."""

    SPLIT_BY_ANGLE = 1
    SPLIT_BY_FIXED_BLKS = 2
    SPLIT_BY_CUSTOM_BLKS = 3


def _fmt(value) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, enum.IntEnum):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _block(title: str, items) -> str:
    lines = [_RULE, f"             RoboSense {title} ", *(
        f"{name}: {_fmt(value)}" for name, value in items
    ), _RULE]
    return "\n".join(lines)


@dataclass
class TransformParam:
    """Rigid transform applied to points (metres, radians)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def describe(self) -> str:
        return _block(
            "Transform Parameters",
            [(n, getattr(self, n)) for n in ("x", "y", "z", "roll", "pitch", "yaw")],
        )


@dataclass
class DecoderParam:
    """Decoder parameters."""

    config_from_file: bool = False
    angle_path: str = ""
    wait_for_difop: bool = True
    min_distance: float = 0.2
    max_distance: float = 200.0
    start_angle: float = 0.0
    end_angle: float = 360.0
    split_frame_mode: SplitFrameMode = SplitFrameMode.SPLIT_BY_ANGLE
    split_angle: float = 0.0
    num_blks_split: int = 1
    use_lidar_clock: bool = False
    dense_points: bool = False
    transform_param: TransformParam = field(default_factory=TransformParam)

    def describe(self) -> str:
        names = (
            "wait_for_difop",
            "max_distance",
            "min_distance",
            "start_angle",
            "end_angle",
            "use_lidar_clock",
            "dense_points",
            "config_from_file",
            "angle_path",
            "split_frame_mode",
            "split_angle",
            "num_blks_split",
        )
        own = _block("Decoder Parameters", [(n, getattr(self, n)) for n in names])
        return own + "\n" + self.transform_param.describe()


@dataclass
class InputParam:
    """Packet source parameters."""

    msop_port: int = 6699
    difop_port: int = 7788
    host_address: str = "0.0.0.0"
    group_address: str = "0.0.0.0"
    pcap_path: str = ""
    pcap_repeat: bool = True
    pcap_rate: float = 1.0
    use_vlan: bool = False
    user_layer_bytes: int = 0
    tail_layer_bytes: int = 0

    def describe(self) -> str:
        names = (
            "msop_port",
            "difop_port",
            "host_address",
            "group_address",
            "pcap_path",
            "pcap_rate",
            "pcap_repeat",
            "use_vlan",
            "user_layer_bytes",
            "tail_layer_bytes",
        )
        return _block("Input Parameters", [(n, getattr(self, n)) for n in names])


@dataclass
class DriverParam:
    """Top-level driver parameters."""

    lidar_type: LidarType = LidarType.RS16
    input_type: InputType = InputType.ONLINE_LIDAR
    input_param: InputParam = field(default_factory=InputParam)
    decoder_param: DecoderParam = field(default_factory=DecoderParam)

    def describe(self) -> str:
        head = "\n".join(
            [
                _RULE,
                "             RoboSense Driver Parameters ",
                f"input type: {input_type_to_str(self.input_type)}",
                f"lidar_type: {lidar_type_to_str(self.lidar_type)}",
                _RULE,
            ]
        )
        return "\n".join(
            [head, self.input_param.describe(), self.decoder_param.describe()]
        )