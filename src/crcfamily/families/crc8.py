# families/crc8.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

CRC_POLY_8 = 0x07
CRC_START_8 = 0x00

CRC_8 = ParamSet(width=8, polynomial=CRC_POLY_8, init=CRC_START_8, name="CRC-8")


def crc_8(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """
    CRC-8 (SMBus)
      width=8 poly=0x07 init=0x00 refin=false refout=false xorout=0x00
      Check("123456789") = 0xF4
    """
    return compute(CRC_8, None, data, length)


def update_crc_8(crc: int, c: int) -> int:
    return step(CRC_8, table_for(CRC_8), crc, c)


VARIANTS = {"crc8": CRC_8}
CHECKSUMS = {"crc8": crc_8}
