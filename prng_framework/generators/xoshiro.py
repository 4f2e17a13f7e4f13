#!/usr/bin/env python3
"""
Xoroshiro / xoshiro family (Blackman & Vigna).

Every generator here supports ``jump()`` and ``split()``; the 128- and
256-bit variants also provide ``long_jump()``.

Version: 1.0.0
"""

from prng_framework.api.generator import JumpableGenerator
from prng_framework.api.widths import BitWidth

_MASK64 = 0xFFFFFFFFFFFFFFFF


def rotl64(value: int, distance: int) -> int:
    """Rotate a 64-bit word left."""
    return ((value << distance) | (value >> (64 - distance))) & _MASK64


# ============================================================================
# XOROSHIRO128
# ============================================================================

class _Xoroshiro128(JumpableGenerator):
    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    WORD_COUNT = 2
    ZERO_STATE_DEGENERATE = True

    JUMP = (0xDF900294D8F554A5, 0x170865DF4B3201FC)
    LONG_JUMP = (0xD2A98B26625EEE7B, 0xDDDF9B1090AA7AC1)

    def _advance(self) -> int:
        """Step the 24/16/37 recurrence; returns the pre-step s0."""
        s = self._state
        s0 = s[0]
        s1 = s[1] ^ s0
        s[0] = rotl64(s0, 24) ^ s1 ^ ((s1 << 16) & _MASK64)
        s[1] = rotl64(s1, 37)
        return s0


class Xoroshiro128PlusGenerator(_Xoroshiro128):
    """Output s0 + s1."""

    def next_bits(self) -> int:
        result = (self._state[0] + self._state[1]) & _MASK64
        self._advance()
        return result


class Xoroshiro128StarGenerator(_Xoroshiro128):
    """Output s0 * 5."""

    def next_bits(self) -> int:
        return (self._advance() * 5) & _MASK64


# ============================================================================
# XOSHIRO256
# ============================================================================

class Xoshiro256PlusGenerator(JumpableGenerator):
    """xoshiro256+: output s0 + s3."""

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    WORD_COUNT = 4
    ZERO_STATE_DEGENERATE = True

    JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C,
            0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
    LONG_JUMP = (0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3,
                 0x77710069854EE241, 0x39109BB02ACBE635)

    def next_bits(self) -> int:
        s = self._state
        result = (s[0] + s[3]) & _MASK64
        t = (s[1] << 17) & _MASK64
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = rotl64(s[3], 45)
        return result


# ============================================================================
# XOSHIRO512
# ============================================================================

class _Xoshiro512(JumpableGenerator):
    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8
    WORD_COUNT = 8
    ZERO_STATE_DEGENERATE = True

    JUMP = (0x33ED89B6E7A353F9, 0x760083D7955323BE, 0x2837F2FBB5F22FAE,
            0x4B8C5674D309511C, 0xB11AC47A7BA28C25, 0xF1BE7667092BCC1C,
            0x53851EFDB6DF0AAF, 0x1EBBC8B23EAF25DB)

    def _advance(self) -> None:
        s = self._state
        t = (s[1] << 11) & _MASK64
        s[2] ^= s[0]
        s[5] ^= s[1]
        s[1] ^= s[2]
        s[7] ^= s[3]
        s[3] ^= s[4]
        s[4] ^= s[5]
        s[0] ^= s[6]
        s[6] ^= s[7]
        s[6] ^= t
        s[7] = rotl64(s[7], 21)


class Xoshiro512PlusGenerator(_Xoshiro512):
    """xoshiro512+: output s0 + s2."""

    def next_bits(self) -> int:
        result = (self._state[0] + self._state[2]) & _MASK64
        self._advance()
        return result


class Xoshiro512StarStarGenerator(_Xoshiro512):
    """xoshiro512**: output rotl(s1 * 5, 7) * 9."""

    def next_bits(self) -> int:
        result = (rotl64((self._state[1] * 5) & _MASK64, 7) * 9) & _MASK64
        self._advance()
        return result
