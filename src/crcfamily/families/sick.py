# families/sick.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, as_buffer
from crcfamily.engine.errors import InvalidArgumentError

CRC_POLY_SICK = 0x8005
CRC_START_SICK = 0x0000


# ============================
# Public API
# ============================
#
# The Sick checksum (SICK laser scanners) is not table driven: each step shifts
# the register once, then XORs in the current byte together with the previous
# byte placed in the high half. The finished value is byte-swapped.

def update_crc_sick(crc: int, c: int, prev_byte: int) -> int:
    """
    One byte of the Sick checksum. prev_byte is the byte fed on the previous
    call (0 before the first byte); the caller carries it between calls.
    """
    _check_u16(crc)
    _check_byte("c", c)
    _check_byte("prev_byte", prev_byte)

    if crc & 0x8000:
        crc = ((crc << 1) ^ CRC_POLY_SICK) & 0xFFFF
    else:
        crc = (crc << 1) & 0xFFFF
    return crc ^ (c | (prev_byte << 8))


def finish_sick(crc: int) -> int:
    _check_u16(crc)
    return ((crc & 0xFF00) >> 8) | ((crc & 0x00FF) << 8)


def crc_sick(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    buf = as_buffer(data, length)
    crc = CRC_START_SICK
    prev = 0
    for c in buf:
        crc = update_crc_sick(crc, c, prev)
        prev = c
    return finish_sick(crc)


class SickStream:
    """Streaming session; keeps the previous byte alongside the register."""

    def __init__(self) -> None:
        self._reg = CRC_START_SICK
        self._prev = 0
        self._count = 0

    def update(self, data: BytesLike) -> "SickStream":
        for c in as_buffer(data, None):
            self.update_byte(c)
        return self

    def update_byte(self, byte: int) -> "SickStream":
        self._reg = update_crc_sick(self._reg, byte, self._prev)
        self._prev = byte
        self._count += 1
        return self

    @property
    def register(self) -> int:
        return self._reg

    @property
    def prev_byte(self) -> int:
        return self._prev

    @property
    def byte_count(self) -> int:
        return self._count

    @property
    def value(self) -> int:
        return finish_sick(self._reg)


# ============================
# Internal
# ============================

def _check_u16(crc: int) -> None:
    if not isinstance(crc, int) or isinstance(crc, bool):
        raise TypeError("crc must be int")
    if not (0 <= crc <= 0xFFFF):
        raise InvalidArgumentError(f"crc 0x{crc:X} does not fit 16 bits")


def _check_byte(name: str, v: int) -> None:
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"{name} must be int")
    if not (0 <= v <= 0xFF):
        raise InvalidArgumentError(f"{name} out of range [0,255]: {v}")


VARIANTS: dict = {}
CHECKSUMS = {"sick": crc_sick}
