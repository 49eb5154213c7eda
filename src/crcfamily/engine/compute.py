# engine/compute.py
from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from crcfamily.engine.errors import InvalidArgumentError
from crcfamily.engine.params import ParamSet, reflect_bits
from crcfamily.engine.table import table_for

BytesLike = Union[bytes, bytearray, memoryview]
Table = Union[Sequence[int], np.ndarray]


# ============================
# Public API
# ============================

def start(params: ParamSet) -> int:
    """
    Register value before the first byte. init is given in normal bit order;
    the reflected engine keeps its register reflected, so it is seeded reflected.
    """
    if params.reflect_in:
        return reflect_bits(params.init, params.width)
    return params.init


def finish(params: ParamSet, reg: int) -> int:
    """Final treatment: reflect-out (relative to the table convention), then xorout."""
    _check_register(params, reg)
    if params.reflect_out != params.reflect_in:
        reg = reflect_bits(reg, params.width)
    return (reg ^ params.xorout) & params.mask


def step(params: ParamSet, table: Table, reg: int, byte: int) -> int:
    """
    Advance a running register by one byte. No init and no final treatment:
    callers seed with start() and close with finish().
    """
    _check_register(params, reg)
    if not isinstance(byte, int) or isinstance(byte, bool):
        raise TypeError("byte must be int")
    if not (0 <= byte <= 0xFF):
        raise InvalidArgumentError(f"byte out of range [0,255]: {byte}")
    _check_table(table)

    if params.reflect_in:
        return int(table[(reg ^ byte) & 0xFF]) ^ (reg >> 8)
    shift = params.width - 8
    return (int(table[((reg >> shift) ^ byte) & 0xFF]) ^ (reg << 8)) & params.mask


def compute(params: ParamSet, table: Optional[Table], data: Optional[BytesLike],
            length: Optional[int] = None) -> int:
    """
    Whole-buffer CRC.

    table:  lookup table for params.table_key, or None for the shared cached one
    length: optional byte count (prefix of data). data=None is only legal when
            length is None or 0; it is then the empty buffer.
    """
    buf = as_buffer(data, length)
    tab = _resolve_table(params, table)
    return finish(params, fold(params, tab, start(params), buf))


def checksum(params: ParamSet, data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """compute() with the shared table."""
    return compute(params, None, data, length)


class CrcStream:
    """
    Caller-held streaming session for one ParamSet.

        s = CrcStream(CRC_32)
        for chunk in chunks:
            s.update(chunk)
        s.value

    Feeding the same bytes in any chunking gives compute() of the whole buffer.
    """

    def __init__(self, params: ParamSet, *, table: Optional[Table] = None) -> None:
        self.params = params
        self._table = _resolve_table(params, table)
        self._reg = start(params)
        self._count = 0

    def update(self, data: BytesLike) -> "CrcStream":
        buf = as_buffer(data, None)
        self._reg = fold(self.params, self._table, self._reg, buf)
        self._count += len(buf)
        return self

    def update_byte(self, byte: int) -> "CrcStream":
        self._reg = step(self.params, self._table, self._reg, byte)
        self._count += 1
        return self

    @property
    def register(self) -> int:
        """Raw running register (no final treatment applied)."""
        return self._reg

    @property
    def value(self) -> int:
        return finish(self.params, self._reg)

    @property
    def byte_count(self) -> int:
        return self._count

    def copy(self) -> "CrcStream":
        other = CrcStream(self.params, table=self._table)
        other._reg = self._reg
        other._count = self._count
        return other

    def reset(self) -> None:
        self._reg = start(self.params)
        self._count = 0


# ============================
# Internal
# ============================

def fold(params: ParamSet, table: Sequence[int], reg: int, buf: BytesLike) -> int:
    """Loop body of step() over a whole buffer, without per-byte validation."""
    if params.reflect_in:
        for c in buf:
            reg = table[(reg ^ c) & 0xFF] ^ (reg >> 8)
        return reg

    mask = params.mask
    shift = params.width - 8
    for c in buf:
        reg = (table[((reg >> shift) ^ c) & 0xFF] ^ (reg << 8)) & mask
    return reg


def as_buffer(data: Optional[BytesLike], length: Optional[int]) -> BytesLike:
    if data is None:
        if length:
            raise InvalidArgumentError(f"data is None but length={length}")
        return b""
    if isinstance(data, memoryview):
        data = data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes-like")
    if length is None:
        return data
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError("length must be int")
    if not (0 <= length <= len(data)):
        raise InvalidArgumentError(f"length {length} out of range for {len(data)}-byte buffer")
    return data[:length]


def _resolve_table(params: ParamSet, table: Optional[Table]) -> Sequence[int]:
    if table is None:
        return table_for(params)
    _check_table(table)
    if isinstance(table, np.ndarray):
        return tuple(table.tolist())
    return table


def _check_table(table: Table) -> None:
    if len(table) != 256:
        raise InvalidArgumentError(f"lookup table must have 256 entries, got {len(table)}")


def _check_register(params: ParamSet, reg: int) -> None:
    if not isinstance(reg, int) or isinstance(reg, bool):
        raise TypeError("register must be int")
    if not (0 <= reg <= params.mask):
        raise InvalidArgumentError(f"register 0x{reg:X} does not fit {params.width} bits")
