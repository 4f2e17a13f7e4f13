"""
Width adapters - derive every word width from one primitive.

A generator produces fresh bits at exactly one natural width. The
adapter composes wider values by concatenating consecutive primitive
outputs (most significant chunk first) and narrower values by keeping
the low bits of a single output.

Version: 1.0.0
"""

from enum import IntEnum
from typing import Callable

from prng_framework.errors import require


class BitWidth(IntEnum):
    """Natural output widths a generator may have."""
    BIT = 1
    BYTE = 8
    SHORT = 16
    INTEGER = 32
    LONG = 64

    @property
    def mask(self) -> int:
        return (1 << int(self)) - 1


class WidthAdapter:
    """
    Wraps a primitive ``() -> int`` of a fixed natural width.

    Each call to ``uniform(width)`` advances the primitive once per
    natural-width unit consumed: a 64-bit value from a 16-bit primitive
    costs four calls, an 8-bit value from a 64-bit primitive costs one.
    """

    def __init__(self, natural_width: BitWidth, primitive: Callable[[], int]):
        self.natural_width = BitWidth(natural_width)
        self._primitive = primitive
        self._natural_mask = self.natural_width.mask

    def uniform(self, width: BitWidth) -> int:
        """One uniformly distributed unsigned value of ``width`` bits."""
        width = BitWidth(width)
        natural = int(self.natural_width)
        if width <= natural:
            return self._primitive() & width.mask
        value = 0
        for _ in range(int(width) // natural):
            value = (value << natural) | (self._primitive() & self._natural_mask)
        return value

    def bits(self, count: int, width: BitWidth) -> int:
        """
        The top ``count`` bits of one ``width``-bit value.

        1-bit primitives shift in exactly ``count`` fresh bits instead of
        composing a full word first.
        """
        width = BitWidth(width)
        require(0 <= count <= int(width),
                f"Bit count must be in [0, {int(width)}], got {count}")
        if self.natural_width == BitWidth.BIT:
            value = 0
            for _ in range(count):
                value = (value << 1) | (self._primitive() & 1)
            return value
        return self.uniform(width) >> (int(width) - count)

    def uniform_byte(self) -> int:
        return self.uniform(BitWidth.BYTE)

    def uniform_short(self) -> int:
        return self.uniform(BitWidth.SHORT)

    def uniform_integer(self) -> int:
        return self.uniform(BitWidth.INTEGER)

    def uniform_long(self) -> int:
        return self.uniform(BitWidth.LONG)
