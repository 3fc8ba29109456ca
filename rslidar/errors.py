"""Error codes reported by the driver and a helper to rate-limit reporting."""

from __future__ import annotations

import enum
import time
from typing import Callable


class ErrCodeType(enum.Enum):
    """Severity class of an error code."""

    INFO_CODE = "info"
    WARNING_CODE = "warning"
    ERROR_CODE = "error"


class ErrCode(enum.IntEnum):
    """Error codes.

    0x00 is success, 0x01-0x3F informational, 0x40-0x7F warnings,
    0x80 and above critical errors.
    """

    SUCCESS = 0x00
    PCAPREPEAT = 0x01
    PCAPEXIT = 0x02

    MSOPTIMEOUT = 0x40
    DIFOPTIMEOUT = 0x41
    NODIFOPRECV = 0x42
    WRONGPKTHEADER = 0x43
    WRONGPKTLENGTH = 0x44
    ZEROPOINTS = 0x45
    PKTBUFOVERFLOW = 0x46
    CLOUDBUFOVERFLOW = 0x47

    STARTBEFOREINIT = 0x80
    MSOPPORTBUZY = 0x81
    DIFOPPORTBUZY = 0x82
    PCAPWRONGPATH = 0x83
    POINTCLOUDNULL = 0x84


_DESCRIPTIONS = {
    ErrCode.PCAPREPEAT: "Info_PcapRepeat",
    ErrCode.PCAPEXIT: "Info_PcapExit",
}


class Error(Exception):
    """A driver error carrying its code and severity."""

    def __init__(self, code):
        self.error_code = ErrCode(code)
        if self.error_code < 0x40:
            self.error_code_type = ErrCodeType.INFO_CODE
        elif self.error_code < 0x80:
            self.error_code_type = ErrCodeType.WARNING_CODE
        else:
            self.error_code_type = ErrCodeType.ERROR_CODE
        super().__init__(str(self))

    def __str__(self):
        described = _DESCRIPTIONS.get(self.error_code)
        if described is not None:
            return described
        return f"ERRCODE_{self.error_code.name}"

    def __eq__(self, other):
        if isinstance(other, Error):
            return self.error_code == other.error_code
        return NotImplemented

    def __hash__(self):
        return hash(self.error_code)

    def __repr__(self):
        return f"Error({self.error_code.name})"


class RateLimiter:
    """Run a callable at most once per ``seconds`` (whole-second clock).

    With ``delay`` the interval starts at construction, so the first call
    is also held back; otherwise the first call always goes through.
    """

    def __init__(self, seconds, delay=False):
        self.seconds = seconds
        self._prev = int(time.time()) if delay else 0

    def __call__(self, func: Callable[[], object]) -> bool:
        now = int(time.time())
        if now - self._prev > self.seconds:
            func()
            self._prev = now
            return True
        return False