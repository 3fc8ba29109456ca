# rslidar

Building blocks for decoding packets from mechanical and MEMS LiDAR sensors:
parameters, error codes, per-channel calibration angles, the frame state of
spinning sensors, the constants of several sensor models, and reassembly of
fragmented jumbo UDP datagrams. It has no dependencies outside the standard
library.

## Modules

- `rslidar.params`: the `LidarType`, `InputType` and `SplitFrameMode` enums;
  `lidar_type_to_str` (returns `"ERROR"` for a type without a name) and
  `str_to_lidar_type` (raises `ValueError` for an unknown name);
  `input_type_to_str`; and the dataclasses `DriverParam`, `InputParam`,
  `DecoderParam` and `TransformParam`, each with a `describe()` method that
  returns a printable summary.
- `rslidar.errors`: `ErrCode`, `ErrCodeType` and the exception `Error`, whose
  severity follows from its code (below 0x40 info, below 0x80 warning, else
  error) and whose `str()` is the code's name. `RateLimiter(seconds, delay=False)`
  calls a function at most once per interval and returns whether it did.
- `rslidar.point_cloud`: `PointXYZI`, `PointXYZIRT` and the generic
  `PointCloud`, whose `len()` is its number of points.
- `rslidar.chan_angles`: `ChanAngles` holds vertical and horizontal angle
  corrections (integer hundredths of a degree) and the user channel number
  of each laser, ranked by vertical angle. Angles are loaded with
  `load_from_file` (lines of `vertical,horizontal` in degrees) or
  `load_from_difop` (raw 3-byte calibration entries or `CalibrationAngle`
  items). A failed load raises `AngleLoadError` and keeps the previous
  angles. Lower-level helpers: `read_angle_file`, `angles_from_difop`,
  `parse_calibration_angles`, `gen_user_chans`, `angle_in_range`.
- `rslidar.mech`: `EchoMode`, `DecoderConstParam`, `MechConstParam`,
  `build_mech_const_param`, `lens_center`, and `MechFrameState`, which holds
  rounds per second, blocks per frame, block azimuth step, blind-section time
  and channel angles. `update_from_difop(rpm, fov_start, fov_end, vert_cali,
  horiz_cali)` applies the values of a DIFOP packet; an RPM of 0 falls back to
  10 rounds per second. With `config_from_file` set, angles are loaded from
  `DecoderParam.angle_path` at construction and `wait_for_difop` is cleared.
- `rslidar.rs128`, `rslidar.rs80`, `rslidar.helios`, `rslidar.rsp48`: each
  has `const_param()` (a `MechConstParam`) and `echo_mode(mode)` mapping the
  DIFOP return-mode byte to an `EchoMode`.
- `rslidar.m1_jumbo`: `const_param()` (a `DecoderConstParam`),
  `echo_mode(mode)` and `packet_duration()` for the M1 in jumbo-frame mode.
- `rslidar.jumbo`: `Jumbo.new_fragment(frame)` takes Ethernet frames and
  returns `True` once a fragmented IPv4/UDP datagram is complete;
  `bytes(jumbo)` is the reassembled payload (UDP header included) and
  `dst_port()` its destination port.
- `rslidar.hexdump`: `format_hexdump(data, desc=None)` renders bytes as rows
  of 16 hex values; `hexdump(data, desc=None, file=None)` writes that to a
  file or standard output.

## Example

```python
from rslidar import helios
from rslidar.chan_angles import CalibrationAngle
from rslidar.mech import MechFrameState
from rslidar.params import DecoderParam, DriverParam, str_to_lidar_type

param = DriverParam(lidar_type=str_to_lidar_type("RSHELIOS"))
print(param.describe())

state = MechFrameState(helios.const_param(), DecoderParam())
angles = [CalibrationAngle(0, 100 * i) for i in range(32)]
state.update_from_difop(600, 0, 36000, angles, angles)
print(state.rps, state.blks_per_frame, state.angles_ready)
print(state.chan_angles.to_user_chan(0))
```

## What it does not do

The package does not receive packets: there is no socket, pcap or raw-packet
input, and no driver that runs in the background. It does not turn MSOP
packets into points or split them into frames; `MechFrameState` keeps the
frame parameters but does not set `echo_mode` or `split_blks_per_frame` from a
DIFOP packet, which is left to the caller together with the model's
`echo_mode()`. Only the models listed above have constants here.

## Install and test

```
pip install .
pip install .[test]
pytest
```