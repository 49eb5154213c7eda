# families/ccitt.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

CRC_POLY_CCITT = 0x1021

CRC_START_XMODEM = 0x0000
CRC_START_CCITT_1D0F = 0x1D0F
CRC_START_CCITT_FFFF = 0xFFFF

# All three are non-reflected and share one table.
XMODEM = ParamSet(width=16, polynomial=CRC_POLY_CCITT, init=CRC_START_XMODEM, name="CRC-16/XMODEM")
CCITT_1D0F = ParamSet(width=16, polynomial=CRC_POLY_CCITT, init=CRC_START_CCITT_1D0F,
                      name="CRC-16/SPI-FUJITSU")
CCITT_FFFF = ParamSet(width=16, polynomial=CRC_POLY_CCITT, init=CRC_START_CCITT_FFFF,
                      name="CRC-16/CCITT-FALSE")


def crc_xmodem(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Check("123456789") = 0x31C3"""
    return compute(XMODEM, None, data, length)


def crc_ccitt_1d0f(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Check("123456789") = 0xE5CC"""
    return compute(CCITT_1D0F, None, data, length)


def crc_ccitt_ffff(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Check("123456789") = 0x29B1"""
    return compute(CCITT_FFFF, None, data, length)


def update_crc_ccitt(crc: int, c: int) -> int:
    return step(XMODEM, table_for(XMODEM), crc, c)


VARIANTS = {
    "xmodem": XMODEM,
    "ccitt_1d0f": CCITT_1D0F,
    "ccitt_ffff": CCITT_FFFF,
}
CHECKSUMS = {
    "xmodem": crc_xmodem,
    "ccitt_1d0f": crc_ccitt_1d0f,
    "ccitt_ffff": crc_ccitt_ffff,
}
