#!/usr/bin/env python3
"""
Mersenne Twister MT19937 in its 64-bit and 32-bit forms.

Both regenerate the whole word array in one batch twist whenever the
cursor runs off the end, then temper each word on the way out. A cursor
equal to the word count means "twist before the next output".

The 32-bit variant seeds with ``init_by_array`` exactly like CPython's
``random`` module, so ``MersenneTwister19937_32Generator(seed=n.to_bytes(8, 'big'))``
and ``random.Random(n)`` produce the same ``getrandbits(32)`` stream.

Version: 1.0.0
"""

import logging
from typing import List

from prng_framework.api.generator import WordStateGenerator
from prng_framework.api.widths import BitWidth
from prng_framework.utils.word_packing import BytesLike, bytes_to_long

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


# ============================================================================
# MT19937-64
# ============================================================================

class MersenneTwister19937Generator(WordStateGenerator):
    """MT19937-64: 312 words, middle word 156. Seed: one 64-bit integer."""

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    WORD_COUNT = 312
    HAS_CURSOR = True
    MAX_CURSOR = 312
    INITIAL_CURSOR = 312
    SEED_SIZE = 8

    MIDDLE = 156
    MATRIX_A = 0xB5026F5AA96619E9
    UPPER_MASK = 0xFFFFFFFF80000000
    LOWER_MASK = 0x7FFFFFFF

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        state = [0] * self.WORD_COUNT
        state[0] = bytes_to_long(seed)
        for i in range(1, self.WORD_COUNT):
            previous = state[i - 1]
            state[i] = (6364136223846793005 * (previous ^ (previous >> 62)) + i) & _MASK64
        self._state = state
        self._cursor = self.INITIAL_CURSOR

    def _twist(self) -> None:
        mt = self._state
        n = self.WORD_COUNT
        for i in range(n):
            x = (mt[i] & self.UPPER_MASK) | (mt[(i + 1) % n] & self.LOWER_MASK)
            value = mt[(i + self.MIDDLE) % n] ^ (x >> 1)
            if x & 1:
                value ^= self.MATRIX_A
            mt[i] = value
        self._cursor = 0

    def next_bits(self) -> int:
        if self._cursor >= self.WORD_COUNT:
            self._twist()
        x = self._state[self._cursor]
        self._cursor += 1
        x ^= (x >> 29) & 0x5555555555555555
        x ^= (x << 17) & 0x71D67FFFEDA60000
        x ^= (x << 37) & 0xFFF7EEE000000000
        x ^= x >> 43
        return x


# ============================================================================
# MT19937 (32-bit)
# ============================================================================

class MersenneTwister19937_32Generator(WordStateGenerator):
    """
    MT19937: 624 words, middle word 397.

    Seeds of any length from 4 bytes up are read as one big-endian
    integer and fed through ``init_by_array``; ``set_linear_seed`` gives
    the classic ``init_genrand`` seeding instead.
    """

    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 4
    WORD_COUNT = 624
    HAS_CURSOR = True
    MAX_CURSOR = 624
    INITIAL_CURSOR = 624
    SEED_SIZE = 4

    MIDDLE = 397
    MATRIX_A = 0x9908B0DF
    UPPER_MASK = 0x80000000
    LOWER_MASK = 0x7FFFFFFF

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        value = int.from_bytes(bytes(seed), 'big')
        # Little-endian 32-bit key words, as random.seed(int) builds them
        key: List[int] = []
        while value:
            key.append(value & _MASK32)
            value >>= 32
        self._init_by_array(key or [0])

    def set_linear_seed(self, value: int) -> None:
        """Classic init_genrand seeding from a single 32-bit value."""
        self._state = self._linear_state(value & _MASK32)
        self._cursor = self.INITIAL_CURSOR

    def _linear_state(self, value: int) -> List[int]:
        state = [0] * self.WORD_COUNT
        state[0] = value
        for i in range(1, self.WORD_COUNT):
            previous = state[i - 1]
            state[i] = (1812433253 * (previous ^ (previous >> 30)) + i) & _MASK32
        return state

    def _init_by_array(self, key: List[int]) -> None:
        n = self.WORD_COUNT
        state = self._linear_state(19650218)
        i, j = 1, 0
        for _ in range(max(n, len(key))):
            previous = state[i - 1]
            state[i] = ((state[i] ^ ((previous ^ (previous >> 30)) * 1664525))
                        + key[j] + j) & _MASK32
            i += 1
            j += 1
            if i >= n:
                state[0] = state[n - 1]
                i = 1
            if j >= len(key):
                j = 0
        for _ in range(n - 1):
            previous = state[i - 1]
            state[i] = ((state[i] ^ ((previous ^ (previous >> 30)) * 1566083941)) - i) & _MASK32
            i += 1
            if i >= n:
                state[0] = state[n - 1]
                i = 1
        state[0] = 0x80000000
        self._state = state
        self._cursor = self.INITIAL_CURSOR
        logger.debug("MT19937 seeded from a %d-word key", len(key))

    def _twist(self) -> None:
        mt = self._state
        n = self.WORD_COUNT
        for i in range(n):
            y = (mt[i] & self.UPPER_MASK) | (mt[(i + 1) % n] & self.LOWER_MASK)
            value = mt[(i + self.MIDDLE) % n] ^ (y >> 1)
            if y & 1:
                value ^= self.MATRIX_A
            mt[i] = value
        self._cursor = 0

    def next_bits(self) -> int:
        if self._cursor >= self.WORD_COUNT:
            self._twist()
        y = self._state[self._cursor]
        self._cursor += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y
