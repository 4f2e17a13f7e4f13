#!/usr/bin/env python3
"""
Multiply-with-carry generators.

CMWCGenerator     - Marsaglia's complementary MWC with a 4096-word lag.
SuperKISSGenerator - 64-bit MWC queue of 2^21 words combined with an LCG
                     and a xorshift.

State layouts (big-endian):

    CMWC:      [cursor:int32][carry:int64][4096 x uint32]
    SuperKISS: [cursor:int32][carry:int64][xorshift:uint64][lcg:uint64][2^21 x uint64]

Version: 1.0.0
"""

import logging
from typing import List

import numpy as np

from prng_framework.api.generator import RandomGenerator
from prng_framework.api.widths import BitWidth
from prng_framework.errors import require
from prng_framework.generators.platform import splitmix64_stream
from prng_framework.utils.word_packing import (
    BytesLike,
    bytes_to_integer,
    bytes_to_long,
    bytes_to_word_array,
    bytes_to_words,
    integer_to_bytes,
    long_to_bytes,
    words_to_bytes,
)

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


# ============================================================================
# CMWC4096
# ============================================================================

class CMWCGenerator(RandomGenerator):
    """
    Complementary multiply-with-carry, a = 18782, r = 2^32 - 2.

    Seed layout: [carry:int32][4096 x uint32]. The carry is reduced to
    |carry| mod 809430660 so it stays below the multiplier bound.
    """

    NATURAL_WIDTH = BitWidth.INTEGER
    LAG = 4096
    MULTIPLIER = 18782
    CARRY_LIMIT = 809430660
    SEED_SIZE = 4 + 4 * LAG
    STATE_SIZE = 4 + 8 + 4 * LAG

    _queue: List[int]

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        carry = bytes_to_integer(seed)
        if carry & 0x80000000:
            carry -= 1 << 32
        self._carry = abs(carry) % self.CARRY_LIMIT
        self._queue = bytes_to_words(seed, 4, self.LAG, offset=4)
        self._cursor = self.LAG - 1

    def get_state(self) -> bytes:
        return (integer_to_bytes(self._cursor) + long_to_bytes(self._carry)
                + words_to_bytes(self._queue, 4))

    def set_state(self, state: BytesLike) -> None:
        self._check_length(state, self.get_state_size(), "state")
        cursor = bytes_to_integer(state)
        require(0 <= cursor < self.LAG, f"Cursor {cursor} outside [0, {self.LAG})")
        self._cursor = cursor
        self._carry = bytes_to_long(state, offset=4)
        self._queue = bytes_to_words(state, 4, self.LAG, offset=12)

    def next_bits(self) -> int:
        self._cursor = (self._cursor + 1) & (self.LAG - 1)
        t = self.MULTIPLIER * self._queue[self._cursor] + self._carry
        self._carry = t >> 32
        x = (t + self._carry) & _MASK32
        if x < self._carry:
            x += 1
            self._carry += 1
        self._queue[self._cursor] = (0xFFFFFFFE - x) & _MASK32
        return self._queue[self._cursor]


# ============================================================================
# SUPERKISS64
# ============================================================================

class SuperKISSGenerator(RandomGenerator):
    """
    Marsaglia-style SuperKISS: a lag-2^21 multiply-with-carry queue
    (base 2^28 multiplier step) plus a 64-bit LCG and a 13/17/43 xorshift.

    Seeding takes one 64-bit value: the queue is filled with its
    SplitMix64 stream and the LCG and xorshift words are offset from
    Marsaglia's published starting constants.
    """

    NATURAL_WIDTH = BitWidth.LONG
    QUEUE_SIZE = 0x200000
    SEED_SIZE = 8
    STATE_SIZE = 4 + 8 + 8 + 8 + 8 * QUEUE_SIZE

    LCG_MULTIPLIER = 6906969069
    LCG_INCREMENT = 13579
    LCG_START = 12367890123456
    XORSHIFT_START = 521288629546311

    _queue: np.ndarray

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        value = bytes_to_long(seed)
        self._queue = splitmix64_stream(value, self.QUEUE_SIZE)
        self._lcg = self.LCG_START ^ value
        self._xorshift = (self.XORSHIFT_START ^ value) or self.XORSHIFT_START
        self._carry = 0
        self._cursor = self.QUEUE_SIZE - 1
        logger.debug("Filled SuperKISS queue with %d words", self.QUEUE_SIZE)

    def get_state(self) -> bytes:
        header = (integer_to_bytes(self._cursor) + long_to_bytes(self._carry)
                  + long_to_bytes(self._xorshift) + long_to_bytes(self._lcg))
        return header + words_to_bytes(self._queue, 8)

    def set_state(self, state: BytesLike) -> None:
        self._check_length(state, self.get_state_size(), "state")
        cursor = bytes_to_integer(state)
        require(0 <= cursor < self.QUEUE_SIZE,
                f"Cursor {cursor} outside [0, {self.QUEUE_SIZE})")
        self._cursor = cursor
        self._carry = bytes_to_long(state, offset=4)
        self._xorshift = bytes_to_long(state, offset=12)
        self._lcg = bytes_to_long(state, offset=20)
        self._queue = bytes_to_word_array(state, 8, self.QUEUE_SIZE, offset=28)

    def next_bits(self) -> int:
        self._cursor = (self._cursor + 1) & (self.QUEUE_SIZE - 1)
        x = int(self._queue[self._cursor])
        t = ((x << 28) + self._carry) & _MASK64
        self._carry = ((x >> 36) - (1 if t < x else 0)) & _MASK64
        value = (t - x) & _MASK64
        self._queue[self._cursor] = value

        self._lcg = (self.LCG_MULTIPLIER * self._lcg + self.LCG_INCREMENT) & _MASK64
        xs = self._xorshift
        xs ^= (xs << 13) & _MASK64
        xs ^= xs >> 17
        xs ^= (xs << 43) & _MASK64
        self._xorshift = xs
        return (value + self._lcg + xs) & _MASK64
