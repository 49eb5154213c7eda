# engine/params.py
from __future__ import annotations

from dataclasses import dataclass

from crcfamily.engine.errors import InvalidArgumentError


SUPPORTED_WIDTHS = (8, 16, 32, 64)


def reflect_bits(x: int, width: int) -> int:
    r = 0
    for _ in range(width):
        r = (r << 1) | (x & 1)
        x >>= 1
    return r


def width_mask(width: int) -> int:
    return (1 << width) - 1


@dataclass(frozen=True)
class ParamSet:
    """
    One CRC variant.

    width:       register width in bits (8, 16, 32 or 64)
    polynomial:  generator in the bit order the engine uses; reflected variants
                 carry the already reflected constant (CRC-32 -> 0xEDB88320)
    init:        register value before the first byte, in normal bit order
    reflect_in:  process input bytes LSB-first (selects the reflected table)
    reflect_out: bit-reverse the final register before xorout
    xorout:      XORed into the final register
    name:        display name only; not part of the algorithm
    """
    width: int
    polynomial: int
    init: int = 0
    reflect_in: bool = False
    reflect_out: bool = False
    xorout: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        if self.width not in SUPPORTED_WIDTHS:
            raise InvalidArgumentError(
                f"width must be one of {SUPPORTED_WIDTHS}, got {self.width}"
            )
        mask = width_mask(self.width)
        for field_name in ("polynomial", "init", "xorout"):
            v = getattr(self, field_name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{field_name} must be int")
            if not (0 <= v <= mask):
                raise InvalidArgumentError(
                    f"{field_name}=0x{v:X} does not fit a {self.width}-bit register"
                )

    @property
    def mask(self) -> int:
        return width_mask(self.width)

    @property
    def table_key(self) -> tuple[int, int, bool]:
        # Everything a lookup table depends on; variants sharing it share a table.
        return (self.width, self.polynomial, self.reflect_in)
