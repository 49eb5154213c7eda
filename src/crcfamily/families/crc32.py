# families/crc32.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

# Reflected form of 0x04C11DB7
CRC_POLY_32 = 0xEDB88320
CRC_START_32 = 0xFFFFFFFF

CRC_32 = ParamSet(
    width=32, polynomial=CRC_POLY_32, init=CRC_START_32,
    reflect_in=True, reflect_out=True, xorout=0xFFFFFFFF, name="CRC-32/ISO-HDLC",
)


def crc_32(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """
    CRC-32/ISO-HDLC (aka "IEEE 802.3"), same value as zlib.crc32.
      Check("123456789") = 0xCBF43926
    """
    return compute(CRC_32, None, data, length)


def update_crc_32(crc: int, c: int) -> int:
    return step(CRC_32, table_for(CRC_32), crc, c)


VARIANTS = {"crc32": CRC_32}
CHECKSUMS = {"crc32": crc_32}
