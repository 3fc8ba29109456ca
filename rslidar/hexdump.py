"""Hex dump of raw packet bytes for debugging."""

from __future__ import annotations

import sys

_BYTES_PER_ROW = 16


def format_hexdump(data, desc=None) -> str:
    """Render ``data`` as rows of 16 hex bytes between a titled header and a rule."""
    data = bytes(data)
    parts = [f"\n---------------{desc or ''}(size:{len(data)})------------------"]
    for offset in range(0, len(data), _BYTES_PER_ROW):
        row = data[offset:offset + _BYTES_PER_ROW]
        parts.append("\n" + "".join(f"{byte:02x} " for byte in row))
    parts.append("\n---------------------------------\n")
    return "".join(parts)


def hexdump(data, desc=None, file=None) -> None:
    """Write the hex dump of ``data`` to ``file`` (standard output by default)."""
    print(format_hexdump(data, desc), end="", file=file if file is not None else sys.stdout)