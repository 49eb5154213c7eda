# checksum.py
"""
Flat public surface: every named checksum function and constant in one place.

    from crcfamily.checksum import crc_32, CRC_START_32, update_crc_32
"""
from __future__ import annotations

from crcfamily.engine.compute import CrcStream, compute, checksum, finish, start, step
from crcfamily.engine.errors import InvalidArgumentError
from crcfamily.engine.params import ParamSet
from crcfamily.engine.table import build_table, format_table, get_table
from crcfamily.families.ccitt import (
    CCITT_1D0F,
    CCITT_FFFF,
    CRC_POLY_CCITT,
    CRC_START_CCITT_1D0F,
    CRC_START_CCITT_FFFF,
    CRC_START_XMODEM,
    XMODEM,
    crc_ccitt_1d0f,
    crc_ccitt_ffff,
    crc_xmodem,
    update_crc_ccitt,
)
from crcfamily.families.crc8 import CRC_8, CRC_POLY_8, CRC_START_8, crc_8, update_crc_8
from crcfamily.families.crc16 import (
    CRC_16,
    CRC_POLY_16,
    CRC_START_16,
    CRC_START_MODBUS,
    MODBUS,
    crc_16,
    crc_modbus,
    update_crc_16,
)
from crcfamily.families.crc32 import CRC_32, CRC_POLY_32, CRC_START_32, crc_32, update_crc_32
from crcfamily.families.crc64 import (
    CRC_64_ECMA,
    CRC_64_WE,
    CRC_POLY_64,
    CRC_START_64_ECMA,
    CRC_START_64_WE,
    crc_64_ecma,
    crc_64_we,
    update_crc_64_ecma,
)
from crcfamily.families.dnp import CRC_POLY_DNP, CRC_START_DNP, DNP, crc_dnp, update_crc_dnp
from crcfamily.families.kermit import CRC_POLY_KERMIT, CRC_START_KERMIT, KERMIT, crc_kermit, update_crc_kermit
from crcfamily.families.sick import CRC_POLY_SICK, CRC_START_SICK, SickStream, crc_sick, update_crc_sick
from crcfamily.nmea import checksum_NMEA, checksum_nmea, nmea_sentence_checksum, verify_nmea_sentence

__all__ = [
    # engine
    "ParamSet", "InvalidArgumentError", "CrcStream", "SickStream",
    "build_table", "format_table", "get_table",
    "compute", "checksum", "step", "start", "finish",
    # presets
    "CRC_8", "CRC_16", "MODBUS", "XMODEM", "CCITT_1D0F", "CCITT_FFFF",
    "DNP", "KERMIT", "CRC_32", "CRC_64_ECMA", "CRC_64_WE",
    # polynomials
    "CRC_POLY_8", "CRC_POLY_16", "CRC_POLY_32", "CRC_POLY_64", "CRC_POLY_CCITT",
    "CRC_POLY_DNP", "CRC_POLY_KERMIT", "CRC_POLY_SICK",
    # start values
    "CRC_START_8", "CRC_START_16", "CRC_START_MODBUS", "CRC_START_XMODEM",
    "CRC_START_CCITT_1D0F", "CRC_START_CCITT_FFFF", "CRC_START_KERMIT",
    "CRC_START_SICK", "CRC_START_DNP", "CRC_START_32", "CRC_START_64_ECMA",
    "CRC_START_64_WE",
    # whole buffer
    "crc_8", "crc_16", "crc_modbus", "crc_ccitt_1d0f", "crc_ccitt_ffff",
    "crc_xmodem", "crc_dnp", "crc_kermit", "crc_sick", "crc_32",
    "crc_64_ecma", "crc_64_we", "checksum_NMEA", "checksum_nmea",
    # incremental
    "update_crc_8", "update_crc_16", "update_crc_ccitt", "update_crc_dnp",
    "update_crc_kermit", "update_crc_sick", "update_crc_32", "update_crc_64_ecma",
    # nmea sentences
    "nmea_sentence_checksum", "verify_nmea_sentence",
]
