# engine/table.py
from __future__ import annotations

from typing import Dict, Tuple
import threading

import numpy as np

from crcfamily.engine.errors import InvalidArgumentError
from crcfamily.engine.params import ParamSet, SUPPORTED_WIDTHS
from crcfamily.logging_config import get_logger

logger = get_logger(__name__)

_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
}

TableKey = Tuple[int, int, bool]


def _dtype_for(width: int):
    dtype = _DTYPES.get(width)
    if dtype is None:
        raise InvalidArgumentError(f"width must be one of {SUPPORTED_WIDTHS}, got {width}")
    return dtype


def build_table(width: int, polynomial: int, reflect_in: bool) -> np.ndarray:
    """
    Byte-at-a-time CRC lookup table (256 entries, dtype uint<width>).

    All 256 candidate bytes are shifted through the 8 bit steps together:
      - reflected: seed b in the low byte, test bit 0, shift right
      - normal:    seed b in the top byte, test the top bit, shift left

    Returned array is read-only.
    """
    dtype = _dtype_for(width)
    if not (0 <= polynomial <= (1 << width) - 1):
        raise InvalidArgumentError(f"polynomial=0x{polynomial:X} does not fit {width} bits")

    poly = dtype(polynomial)
    one = dtype(1)

    if reflect_in:
        reg = np.arange(256, dtype=dtype)
        for _ in range(8):
            carry = (reg & one) != 0
            reg = reg >> one
            reg = np.where(carry, reg ^ poly, reg)
    else:
        top = dtype(1 << (width - 1))
        reg = np.arange(256, dtype=dtype) << dtype(width - 8)
        for _ in range(8):
            carry = (reg & top) != 0
            reg = reg << one  # uint dtype drops the bit shifted out
            reg = np.where(carry, reg ^ poly, reg)

    table = np.ascontiguousarray(reg, dtype=dtype)
    table.setflags(write=False)
    return table


def format_table(width: int, polynomial: int, reflect_in: bool, *, per_row: int = 8) -> str:
    """
    Render a lookup table as comma separated hex literals, per_row entries per line.
    Handy for pasting a precomputed table into firmware sources.
    """
    if per_row <= 0:
        raise InvalidArgumentError("per_row must be positive")
    digits = width // 4
    values = [f"0x{v:0{digits}X}" for v in build_table(width, polynomial, reflect_in).tolist()]
    rows = [", ".join(values[i:i + per_row]) for i in range(0, len(values), per_row)]
    return ",\n".join(rows)


class TableCache:
    """
    Write-once cache of lookup tables keyed by (width, polynomial, reflect_in).

    First use of a key builds under the lock; later reads go straight to the dict.
    Entries are tuples of Python ints and are never replaced.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tables: Dict[TableKey, Tuple[int, ...]] = {}

    def get(self, width: int, polynomial: int, reflect_in: bool) -> Tuple[int, ...]:
        key = (width, polynomial, bool(reflect_in))
        table = self._tables.get(key)
        if table is not None:
            return table

        with self._lock:
            table = self._tables.get(key)
            if table is None:
                table = tuple(build_table(*key).tolist())
                self._tables[key] = table
                logger.debug(
                    "built CRC table width=%d poly=0x%X reflected=%s",
                    width, polynomial, key[2],
                )
        return table

    def __contains__(self, key: object) -> bool:
        return key in self._tables

    def __len__(self) -> int:
        return len(self._tables)


_CACHE = TableCache()


def get_table(width: int, polynomial: int, reflect_in: bool) -> Tuple[int, ...]:
    """Shared process-wide table for this key (built on first use)."""
    return _CACHE.get(width, polynomial, reflect_in)


def table_for(params: ParamSet) -> Tuple[int, ...]:
    return _CACHE.get(*params.table_key)


def shared_cache() -> TableCache:
    return _CACHE
