import struct

from rslidar.jumbo import Jumbo


def _frame(ip_id, offset_units, more, payload, proto=0x11, eth_type=0x0800):
    flags_off = ((1 << 13) if more else 0) | offset_units
    ip_hdr = struct.pack(
        "!BBHHHBBHII", 0x45, 0, 20 + len(payload), ip_id, flags_off, 64, proto, 0, 0, 0
    )
    return b"\x00" * 12 + struct.pack("!H", eth_type) + ip_hdr + payload


UDP_HDR = struct.pack("!HHHH", 6699, 7788, 26, 0)
FIRST = UDP_HDR + bytes(range(8))
SECOND = bytes(range(100, 110))


def test_two_fragments_reassemble():
    jumbo = Jumbo()
    assert jumbo.new_fragment(_frame(0x1234, 0, True, FIRST)) is False
    assert bytes(jumbo) == FIRST
    assert jumbo.new_fragment(_frame(0x1234, len(FIRST) // 8, False, SECOND)) is True
    assert bytes(jumbo) == FIRST + SECOND
    assert len(jumbo) == len(FIRST) + len(SECOND)
    assert jumbo.dst_port() == 7788


def test_fragment_at_wrong_offset_is_ignored():
    jumbo = Jumbo()
    jumbo.new_fragment(_frame(0x22, 0, True, FIRST))
    assert jumbo.new_fragment(_frame(0x22, 5, False, SECOND)) is False
    assert bytes(jumbo) == FIRST


def test_unfragmented_datagram_not_collected():
    jumbo = Jumbo()
    assert jumbo.new_fragment(_frame(0x33, 0, False, FIRST)) is False
    assert len(jumbo) == 0


def test_non_ip_and_non_udp_rejected():
    jumbo = Jumbo()
    assert jumbo.new_fragment(_frame(0x44, 0, True, FIRST, eth_type=0x86DD)) is False
    assert jumbo.new_fragment(_frame(0x44, 0, True, FIRST, proto=0x06)) is False
    assert len(jumbo) == 0


def test_truncated_frame_rejected():
    jumbo = Jumbo()
    assert jumbo.new_fragment(_frame(0x55, 0, True, FIRST)[:20]) is False
    assert len(jumbo) == 0


def test_repeated_last_fragment_after_completion_ignored():
    jumbo = Jumbo()
    jumbo.new_fragment(_frame(0x66, 0, True, FIRST))
    last = _frame(0x66, len(FIRST) // 8, False, SECOND)
    assert jumbo.new_fragment(last) is True
    assert jumbo.new_fragment(last) is False
    assert bytes(jumbo) == FIRST + SECOND