"""Reassembly of fragmented IPv4/UDP datagrams from Ethernet frames."""

from __future__ import annotations

import struct

_ETH_HDR_LEN = 14
_ETH_TYPE_IPV4 = 0x0800
_IP_PROTO_UDP = 0x11
_IP_MIN_HDR_LEN = 20
_IP_HDR = struct.Struct("!BBHHHBBHII")
_MORE_FRAGMENTS = 0x1


class Jumbo:
    """Collects the fragments of one IP datagram until it is complete.

    ``bytes(jumbo)`` gives the reassembled IP payload (UDP header included)
    and ``len(jumbo)`` its length.
    """

    def __init__(self):
        self._ip_id = 0
        self._buf = bytearray()

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def new_fragment(self, frame) -> bool:
        """Feed one Ethernet frame; return True once a datagram is complete."""
        frame = bytes(frame)
        if len(frame) < _ETH_HDR_LEN + _IP_MIN_HDR_LEN:
            return False

        (eth_type,) = struct.unpack_from("!H", frame, 12)
        if eth_type != _ETH_TYPE_IPV4:
            return False

        version, _tos, tot_len, ip_id, f_off, _ttl, protocol, _check, _src, _dst = (
            _IP_HDR.unpack_from(frame, _ETH_HDR_LEN)
        )
        if protocol != _IP_PROTO_UDP:
            return False

        hdr_len = (version & 0xF) * 4
        data_start = _ETH_HDR_LEN + hdr_len
        ip_data = frame[data_start:data_start + max(tot_len - hdr_len, 0)]

        frag_flags = f_off >> 13
        frag_off = (f_off & 0x1FFF) * 8

        if ip_id == self._ip_id:
            if frag_off == len(self._buf):
                self._buf += ip_data
                if frag_flags & _MORE_FRAGMENTS == 0:
                    self._ip_id = 0
                    return True
        elif frag_off == 0 and frag_flags & _MORE_FRAGMENTS:
            self._ip_id = ip_id
            self._buf = bytearray(ip_data)

        return False

    def dst_port(self) -> int:
        """Destination port from the UDP header of the reassembled datagram."""
        (port,) = struct.unpack_from("!H", self._buf, 2)
        return port