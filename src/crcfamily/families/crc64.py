# families/crc64.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, compute, step
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import table_for

CRC_POLY_64 = 0x42F0E1EBA9EA3693

CRC_START_64_ECMA = 0x0000000000000000
CRC_START_64_WE = 0xFFFFFFFFFFFFFFFF

CRC_64_ECMA = ParamSet(width=64, polynomial=CRC_POLY_64, init=CRC_START_64_ECMA,
                       name="CRC-64/ECMA-182")
CRC_64_WE = ParamSet(width=64, polynomial=CRC_POLY_64, init=CRC_START_64_WE,
                     xorout=0xFFFFFFFFFFFFFFFF, name="CRC-64/WE")


def crc_64_ecma(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Check("123456789") = 0x6C40DF5F0B497347"""
    return compute(CRC_64_ECMA, None, data, length)


def crc_64_we(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Check("123456789") = 0x62EC59E3F1A4F00A"""
    return compute(CRC_64_WE, None, data, length)


def update_crc_64_ecma(crc: int, c: int) -> int:
    """One byte of the CRC-64 table step; serves crc_64_we too (same table)."""
    return step(CRC_64_ECMA, table_for(CRC_64_ECMA), crc, c)


VARIANTS = {"crc64_ecma": CRC_64_ECMA, "crc64_we": CRC_64_WE}
CHECKSUMS = {"crc64_ecma": crc_64_ecma, "crc64_we": crc_64_we}
