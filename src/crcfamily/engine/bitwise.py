# engine/bitwise.py
from __future__ import annotations

from typing import Optional

from crcfamily.engine.compute import BytesLike, as_buffer, finish, start
from crcfamily.engine.params import ParamSet


def compute_bitwise(params: ParamSet, data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """
    Bit-at-a-time CRC, no table. Slow; kept as the reference the table engine
    is checked against.

    Reflected: byte XORed into the low end, shift right, test bit 0.
    Normal:    byte XORed into the top end, shift left, test the top bit.
    """
    buf = as_buffer(data, length)
    poly = params.polynomial
    mask = params.mask
    crc = start(params)

    if params.reflect_in:
        for b in buf:
            crc ^= b
            for _ in range(8):
                if crc & 1:
                    crc = (crc >> 1) ^ poly
                else:
                    crc >>= 1
    else:
        top = 1 << (params.width - 1)
        shift = params.width - 8
        for b in buf:
            crc ^= b << shift
            for _ in range(8):
                if crc & top:
                    crc = ((crc << 1) ^ poly) & mask
                else:
                    crc = (crc << 1) & mask

    return finish(params, crc)
