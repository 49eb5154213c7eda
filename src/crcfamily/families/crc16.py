# families/crc16.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

# Reflected form of 0x8005
CRC_POLY_16 = 0xA001

CRC_START_16 = 0x0000
CRC_START_MODBUS = 0xFFFF

CRC_16 = ParamSet(
    width=16, polynomial=CRC_POLY_16, init=CRC_START_16,
    reflect_in=True, reflect_out=True, name="CRC-16/ARC",
)
MODBUS = ParamSet(
    width=16, polynomial=CRC_POLY_16, init=CRC_START_MODBUS,
    reflect_in=True, reflect_out=True, name="CRC-16/MODBUS",
)


def crc_16(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """
    CRC-16/ARC
      Check("123456789") = 0xBB3D
    """
    return compute(CRC_16, None, data, length)


def crc_modbus(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """
    CRC-16/MODBUS: same table as crc_16, init=0xFFFF.
      Check("123456789") = 0x4B37
    """
    return compute(MODBUS, None, data, length)


def update_crc_16(crc: int, c: int) -> int:
    """One byte of CRC-16 (also valid for MODBUS, which shares the table)."""
    return step(CRC_16, table_for(CRC_16), crc, c)


VARIANTS = {"crc16": CRC_16, "modbus": MODBUS}
CHECKSUMS = {"crc16": crc_16, "modbus": crc_modbus}
