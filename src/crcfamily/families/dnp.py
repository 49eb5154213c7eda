# families/dnp.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

# Reflected form of 0x3D65
CRC_POLY_DNP = 0xA6BC
CRC_START_DNP = 0x0000

DNP = ParamSet(
    width=16, polynomial=CRC_POLY_DNP, init=CRC_START_DNP,
    reflect_in=True, reflect_out=True, xorout=0xFFFF, name="CRC-16/DNP",
)


def crc_dnp(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """
    CRC-16/DNP (complemented result, register byte order).
      Check("123456789") = 0xEA82

    DNP3 transmits the CRC low byte first: value.to_bytes(2, "little").
    """
    return compute(DNP, None, data, length)


def update_crc_dnp(crc: int, c: int) -> int:
    return step(DNP, table_for(DNP), crc, c)


VARIANTS = {"dnp": DNP}
CHECKSUMS = {"dnp": crc_dnp}
