#!/usr/bin/env python3
"""
Xorshift family.

Shift coefficients follow one signed convention: a positive coefficient
is a logical right shift, a negative one a left shift by its magnitude.
Star variants multiply the xorshift output on the way out; the
multiplier never feeds back into the state.

Version: 1.0.0
"""

from typing import Optional, Sequence, Tuple

from prng_framework.api.bit_source import EntropySource
from prng_framework.api.generator import WordStateGenerator
from prng_framework.api.widths import BitWidth
from prng_framework.errors import require
from prng_framework.utils.word_packing import BytesLike

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _shift64(value: int, coefficient: int) -> int:
    if coefficient > 0:
        return value >> coefficient
    return (value << -coefficient) & _MASK64


def _validate_coefficients(coefficients: Sequence[int]) -> Tuple[int, ...]:
    coefficients = tuple(coefficients)
    require(len(coefficients) == 3, f"Expected 3 shift coefficients, got {len(coefficients)}")
    for c in coefficients:
        require(c != 0 and -64 < c < 64, f"Shift coefficient out of range: {c}")
    return coefficients


# ============================================================================
# 32-BIT WORDS
# ============================================================================

class Xorshift32Generator(WordStateGenerator):
    """Marsaglia xorshift32 with shifts 13 / 17 / 5."""

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 4
    ZERO_STATE_DEGENERATE = True

    def next_bits(self) -> int:
        x = self._state[0]
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self._state[0] = x
        return x


class Xorshift128Generator(WordStateGenerator):
    """Marsaglia xorshift128; word 3 is the oldest, word 0 the newest."""

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 4
    WORD_COUNT = 4
    ZERO_STATE_DEGENERATE = True

    def next_bits(self) -> int:
        s = self._state
        t = s[3]
        t ^= (t << 11) & _MASK32
        t ^= t >> 8
        s[3] = s[2]
        s[2] = s[1]
        s0 = s[0]
        s[1] = s0
        t ^= s0 ^ (s0 >> 19)
        s[0] = t
        return t


class XorwowGenerator(WordStateGenerator):
    """Xorshift128 (shifts 2 / 1 / 4) plus a Weyl counter held in word 4."""

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 4
    WORD_COUNT = 5

    WEYL_INCREMENT = 362437

    def next_bits(self) -> int:
        s = self._state
        t = s[3]
        t ^= t >> 2
        t ^= (t << 1) & _MASK32
        s[3] = s[2]
        s[2] = s[1]
        s0 = s[0]
        s[1] = s0
        t ^= s0 ^ ((s0 << 4) & _MASK32)
        s[0] = t
        s[4] = (s[4] + self.WEYL_INCREMENT) & _MASK32
        return (t + s[4]) & _MASK32


# ============================================================================
# 64-BIT WORDS
# ============================================================================

class Xorshift64Generator(WordStateGenerator):
    """
    Single-word xorshift with configurable signed shift coefficients.

    Args:
        seed: 8 seed bytes.
        entropy: Seed source when ``seed`` is omitted.
        coefficients: Three non-zero signed shifts.
    """

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    ZERO_STATE_DEGENERATE = True

    DEFAULT_COEFFICIENTS: Tuple[int, ...] = (-13, 7, -17)

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None,
                 coefficients: Optional[Sequence[int]] = None):
        self.coefficients = _validate_coefficients(
            self.DEFAULT_COEFFICIENTS if coefficients is None else coefficients)
        super().__init__(seed, entropy)

    def _xorshift(self) -> int:
        x = self._state[0]
        for coefficient in self.coefficients:
            x ^= _shift64(x, coefficient)
        self._state[0] = x
        return x

    def next_bits(self) -> int:
        return self._xorshift()


class XorshiftPlus64Generator(Xorshift64Generator):
    """Xorshift64 whose output is offset by a fixed additive constant."""

    DEFAULT_INCREMENT = 0x9E3779B97F4A7C15

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None,
                 coefficients: Optional[Sequence[int]] = None,
                 increment: int = DEFAULT_INCREMENT):
        self.increment = increment & _MASK64
        super().__init__(seed, entropy, coefficients)

    def next_bits(self) -> int:
        return (self._xorshift() + self.increment) & _MASK64


class XorshiftStar64Generator(Xorshift64Generator):
    """Xorshift64 whose output is multiplied by an odd constant, then offset."""

    DEFAULT_COEFFICIENTS = (12, -25, 27)
    DEFAULT_MULTIPLIER = 0x2545F4914F6CDD1D

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None,
                 coefficients: Optional[Sequence[int]] = None,
                 multiplier: int = DEFAULT_MULTIPLIER,
                 increment: int = 0):
        require(multiplier & 1 == 1, f"Multiplier must be odd, got {multiplier:#x}")
        self.multiplier = multiplier & _MASK64
        self.increment = increment & _MASK64
        super().__init__(seed, entropy, coefficients)

    def next_bits(self) -> int:
        return (self._xorshift() * self.multiplier + self.increment) & _MASK64


class Xorshift64StarGenerator(XorshiftStar64Generator):
    """Vigna's xorshift64*: shifts 12 / 25 / 27, multiplier 0x2545F4914F6CDD1D."""

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None):
        super().__init__(seed, entropy)


class Xorshift128PlusGenerator(WordStateGenerator):
    """xorshift128+ with shifts 23 / 17 / 26."""

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    WORD_COUNT = 2
    ZERO_STATE_DEGENERATE = True

    def next_bits(self) -> int:
        s = self._state
        s1 = s[0]
        s0 = s[1]
        s[0] = s0
        s1 ^= (s1 << 23) & _MASK64
        s[1] = s1 ^ s0 ^ (s1 >> 17) ^ (s0 >> 26)
        return (s[1] + s0) & _MASK64


class Xorshift1024StarGenerator(WordStateGenerator):
    """xorshift1024*: sixteen words walked by a cursor."""

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    WORD_COUNT = 16
    HAS_CURSOR = True
    ZERO_STATE_DEGENERATE = True

    MULTIPLIER = 1181783497276652981

    def next_bits(self) -> int:
        s = self._state
        s0 = s[self._cursor]
        self._cursor = (self._cursor + 1) & 15
        s1 = s[self._cursor]
        s1 ^= (s1 << 31) & _MASK64
        s1 ^= s1 >> 11
        s1 ^= s0 ^ (s0 >> 30)
        s[self._cursor] = s1
        return (s1 * self.MULTIPLIER) & _MASK64
