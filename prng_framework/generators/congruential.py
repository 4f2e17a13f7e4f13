#!/usr/bin/env python3
"""
Congruential generators: LCG32, LCG64, Lehmer16 and the two PCG
output permutations.

Version: 1.0.0
"""

from typing import Optional

from prng_framework.api.bit_source import EntropySource
from prng_framework.api.generator import WordStateGenerator
from prng_framework.api.widths import BitWidth
from prng_framework.errors import require
from prng_framework.utils.word_packing import BytesLike, bytes_to_long

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

PCG_MULTIPLIER = 6364136223846793005
PCG_DEFAULT_INCREMENT = 1442695040888963407


# ============================================================================
# LINEAR CONGRUENTIAL
# ============================================================================

class LinearCongruential32Generator(WordStateGenerator):
    """state = state * 134775813 + 1 (mod 2^32)"""

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 4

    MULTIPLIER = 134775813
    INCREMENT = 1

    def next_bits(self) -> int:
        self._state[0] = (self._state[0] * self.MULTIPLIER + self.INCREMENT) & _MASK32
        return self._state[0]


class LinearCongruential64Generator(WordStateGenerator):
    """state = state * 6364136223846793005 + 1442695040888963407 (mod 2^64)"""

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8

    MULTIPLIER = PCG_MULTIPLIER
    INCREMENT = PCG_DEFAULT_INCREMENT

    def next_bits(self) -> int:
        self._state[0] = (self._state[0] * self.MULTIPLIER + self.INCREMENT) & _MASK64
        return self._state[0]


class Lehmer16Generator(WordStateGenerator):
    """
    Lehmer generator modulo the Fermat prime 65537 with multiplier 75.

    65536 does not fit in 16 bits, so it is stepped past and never emitted.
    """

    NATURAL_WIDTH = BitWidth.SHORT
    WORD_SIZE = 2

    MODULUS = 65537
    MULTIPLIER = 75

    def next_bits(self) -> int:
        value = self._state[0]
        while True:
            value = (self.MULTIPLIER * value) % self.MODULUS
            if value != 0x10000:
                break
        self._state[0] = value
        return value


# ============================================================================
# PERMUTED CONGRUENTIAL
# ============================================================================

class PermutedCongruentialXSHRRGenerator(WordStateGenerator):
    """
    PCG XSH-RR: 64-bit LCG state, 32-bit output built from the state
    before the update (xorshift high, random rotation).

    Seeding sets state = seed + increment and discards one output, which
    matches the reference ``pcg32_srandom`` with the same increment.

    Args:
        seed: 8 seed bytes.
        entropy: Seed source when ``seed`` is omitted.
        increment: Odd stream constant.
    """

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 8

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None,
                 increment: int = PCG_DEFAULT_INCREMENT):
        require(increment & 1 == 1, f"PCG increment must be odd, got {increment}")
        self.increment = increment & _MASK64
        super().__init__(seed, entropy)

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        self._state = [(bytes_to_long(seed) + self.increment) & _MASK64]
        self.next_bits()

    def next_bits(self) -> int:
        old = self._state[0]
        self._state[0] = (old * PCG_MULTIPLIER + self.increment) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rotation = old >> 59
        return ((xorshifted >> rotation) | (xorshifted << ((-rotation) & 31))) & _MASK32


class PermutedCongruentialXSHRSGenerator(WordStateGenerator):
    """
    PCG XSH-RS over a multiplicative (odd) 64-bit state: xorshift high,
    then a random shift chosen by the top three bits.
    """

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 8

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        self._state = [(2 * bytes_to_long(seed) + 1) & _MASK64]
        self.next_bits()

    def next_bits(self) -> int:
        old = self._state[0]
        self._state[0] = (old * PCG_MULTIPLIER) & _MASK64
        shift = 22 + (old >> 61)
        return ((old ^ (old >> 22)) >> shift) & _MASK32
