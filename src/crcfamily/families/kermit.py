# families/kermit.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

# Reflected form of 0x1021
CRC_POLY_KERMIT = 0x8408
CRC_START_KERMIT = 0x0000

KERMIT = ParamSet(
    width=16, polynomial=CRC_POLY_KERMIT, init=CRC_START_KERMIT,
    reflect_in=True, reflect_out=True, name="CRC-16/KERMIT",
)


def crc_kermit(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Check("123456789") = 0x2189"""
    return compute(KERMIT, None, data, length)


def update_crc_kermit(crc: int, c: int) -> int:
    return step(KERMIT, table_for(KERMIT), crc, c)


VARIANTS = {"kermit": KERMIT}
CHECKSUMS = {"kermit": crc_kermit}
