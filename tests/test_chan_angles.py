import pytest

from rslidar.chan_angles import (
    AngleLoadError,
    CalibrationAngle,
    ChanAngles,
    angle_in_range,
    angles_from_difop,
    gen_user_chans,
    parse_calibration_angles,
    read_angle_file,
)

VERT = bytes([0x00, 0x01, 0x02,
              0x01, 0x03, 0x04,
              0x01, 0x05, 0x06,
              0x00, 0x07, 0x08])
HORIZ = bytes([0x00, 0x01, 0x11,
               0x01, 0x02, 0x22,
               0x00, 0x03, 0x33,
               0x01, 0x04, 0x44])


@pytest.fixture
def angle_csv(tmp_path):
    path = tmp_path / "angle.csv"
    path.write_text("5.0,0.1\n2.5,-0.2\n0.0,0.0\n-2.5,-1.0\n")
    return path


def test_gen_user_chan():
    assert gen_user_chans([100, 0, -100, 200]) == [2, 1, 0, 3]


def test_calibration_angle_from_bytes():
    angle = CalibrationAngle.from_bytes(b"\x01\x03\x04")
    assert angle == CalibrationAngle(1, 0x0304)
    assert angle.angle == -772


def test_parse_short_data_raises():
    with pytest.raises(ValueError):
        parse_calibration_angles(b"\x00\x01", 1)


def test_load_from_file(angle_csv, tmp_path):
    vert, horiz = read_angle_file(angle_csv, 4)
    assert vert == [500, 250, 0, -250]
    assert horiz == [10, -20, 0, -100]

    vert, horiz = read_angle_file(angle_csv, 4)
    assert len(vert) == 4 and len(horiz) == 4

    with pytest.raises(AngleLoadError):
        read_angle_file(tmp_path / "non_exist.csv", 4)


def test_load_from_file_too_few_lines(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("1.0,1.0\n2.0,2.0\n")
    with pytest.raises(AngleLoadError):
        read_angle_file(path, 4)


def test_load_from_difop():
    vert, horiz = angles_from_difop(
        parse_calibration_angles(VERT, 4), parse_calibration_angles(HORIZ, 4), 4
    )
    assert vert == [258, -772, -1286, 1800]
    assert horiz == [273, -546, 819, -1092]

    vert, horiz = angles_from_difop(
        parse_calibration_angles(VERT, 4), parse_calibration_angles(HORIZ, 4), 4
    )
    assert len(vert) == 4 and len(horiz) == 4


def test_member_load_from_file(angle_csv):
    angles = ChanAngles(4)
    assert angles.chan_num == 4
    assert len(angles.vert_angles) == 4
    assert len(angles.horiz_angles) == 4
    assert len(angles.user_chans) == 4

    angles.load_from_file(angle_csv)
    assert len(angles.user_chans) == 4
    assert [angles.to_user_chan(c) for c in range(4)] == [3, 2, 1, 0]


def test_member_load_from_file_fail(tmp_path):
    angles = ChanAngles(4)
    with pytest.raises(AngleLoadError):
        angles.load_from_file(tmp_path / "non_exist.csv")
    assert len(angles.vert_angles) == 4
    assert angles.vert_angles[0] == 0


def test_member_load_from_difop():
    angles = ChanAngles(4)
    angles.load_from_difop(VERT, HORIZ)
    assert angles.vert_angles == [258, -772, -1286, 1800]
    assert angles.horiz_angles == [273, -546, 819, -1092]
    assert [angles.to_user_chan(c) for c in range(4)] == [2, 1, 0, 3]
    assert angles.vert_adjust(1) == -772
    assert angles.horiz_adjust(1, 1000) == 1000 - 546


def test_member_load_from_difop_fail():
    vert = bytes([0x00, 0x01, 0x02,
                  0x01, 0x03, 0x04,
                  0xFF, 0x05, 0x06,
                  0xFF, 0x07, 0x08])
    horiz = bytes([0x00, 0x11, 0x22,
                   0x01, 0x33, 0x44,
                   0xFF, 0x55, 0x66,
                   0xFF, 0x77, 0x88])
    angles = ChanAngles(4)
    with pytest.raises(AngleLoadError):
        angles.load_from_difop(vert, horiz)
    assert len(angles.vert_angles) == 4
    assert angles.vert_angles[0] == 0


@pytest.mark.parametrize(
    "last",
    [bytes([0x00, 0x23, 0x28]), bytes([0x01, 0x23, 0x29])],
)
def test_member_load_from_difop_fail_angle(last):
    horiz = bytes([0x00, 0x01, 0x11,
                   0x01, 0x02, 0x22,
                   0x00, 0x03, 0x33]) + last
    angles = ChanAngles(4)
    with pytest.raises(AngleLoadError):
        angles.load_from_difop(VERT, horiz)


def test_angle_in_range_bounds():
    assert angle_in_range(-9000)
    assert angle_in_range(8999)
    assert not angle_in_range(9000)
    assert not angle_in_range(-9001)


def test_describe_lists_every_channel():
    angles = ChanAngles(4)
    angles.load_from_difop(VERT, HORIZ)
    lines = angles.describe().split("\n")
    assert lines[1] == "chan_num:4"
    assert lines[3:] == ["258\t273\t2", "-772\t-546\t1", "-1286\t819\t0", "1800\t-1092\t3"]