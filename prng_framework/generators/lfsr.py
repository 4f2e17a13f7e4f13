#!/usr/bin/env python3
"""
Shift-register generators: two Fibonacci LFSRs emitting one bit per
step, and the 16-bit generator from the NES Super Mario Bros. engine.

Version: 1.0.0
"""

from prng_framework.api.generator import RandomGenerator1, WordStateGenerator
from prng_framework.api.widths import BitWidth


class FLFSR16Generator(RandomGenerator1, WordStateGenerator):
    """Taps 16, 15, 13, 4 (bits 0, 1, 3, 12); feedback enters at bit 15."""

    WORD_SIZE = 2
    ZERO_STATE_DEGENERATE = True

    def generate_bit(self) -> int:
        s = self._state[0]
        bit = (s ^ (s >> 1) ^ (s >> 3) ^ (s >> 12)) & 1
        self._state[0] = (s >> 1) | (bit << 15)
        return bit


class FLFSR64Generator(RandomGenerator1, WordStateGenerator):
    """Taps 64, 63, 61, 60 (bits 0, 1, 3, 4); feedback enters at bit 63."""

    WORD_SIZE = 8
    ZERO_STATE_DEGENERATE = True

    def generate_bit(self) -> int:
        s = self._state[0]
        bit = (s ^ (s >> 1) ^ (s >> 3) ^ (s >> 4)) & 1
        self._state[0] = (s >> 1) | (bit << 63)
        return bit


class MarioGenerator(WordStateGenerator):
    """
    Byte-swap / xor generator of the 1985 console game.

    0x560A is treated as 0; 0xAA55 collapses to 0 on even steps.
    """

    NATURAL_WIDTH = BitWidth.SHORT
    WORD_SIZE = 2

    def next_bits(self) -> int:
        state = self._state[0]
        if state == 0x560A:
            state = 0
        s0 = ((state & 0x00FF) << 8) ^ state
        state = ((s0 & 0x00FF) << 8) | ((s0 & 0xFF00) >> 8)
        s0 = ((s0 & 0x00FF) << 1) ^ state
        s1 = (s0 >> 1) ^ 0xFF80
        if s0 & 1 == 0:
            state = 0 if s1 == 0xAA55 else s1 ^ 0x1FF4
        else:
            state = s1 ^ 0x8180
        self._state[0] = state & 0xFFFF
        return self._state[0]
