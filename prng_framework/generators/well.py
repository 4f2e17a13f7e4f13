#!/usr/bin/env python3
"""
WELL generators (Panneton, L'Ecuyer & Matsumoto).

All four variants share one shape: 32-bit words in a circular buffer
walked by a cursor, three intermediate values z0/z1/z2 built from fixed
offsets relative to the cursor, two words rewritten per step, and the
cursor moved back by one. The c/b variants temper the output word.

State layout: [cursor:int32][R words:uint32]

Version: 1.0.0
"""

from prng_framework.api.generator import WordStateGenerator
from prng_framework.api.widths import BitWidth

_MASK32 = 0xFFFFFFFF


# ============================================================================
# MATRIX PRIMITIVES
# ============================================================================

def _mat0pos(t: int, v: int) -> int:
    return v ^ (v >> t)


def _mat0neg(t: int, v: int) -> int:
    return v ^ ((v << t) & _MASK32)


def _mat3neg(t: int, v: int) -> int:
    return (v << t) & _MASK32


def _mat5(r: int, a: int, ds: int, dt: int, v: int) -> int:
    rotated = (((v << r) & _MASK32) ^ (v >> (32 - r))) & ds
    if v & dt:
        return rotated ^ a
    return rotated


class _WellGenerator(WordStateGenerator):
    NATURAL_WIDTH = BitWidth.INTEGER
    WORD_SIZE = 4
    HAS_CURSOR = True
    ZERO_STATE_DEGENERATE = True


# ============================================================================
# VARIANTS
# ============================================================================

class WELL512aGenerator(_WellGenerator):
    WORD_COUNT = 16

    def next_bits(self) -> int:
        s = self._state
        i = self._cursor
        i9 = (i + 9) & 15
        i13 = (i + 13) & 15
        i15 = (i + 15) & 15
        z0 = s[i15]
        z1 = _mat0neg(16, s[i]) ^ _mat0neg(15, s[i13])
        z2 = _mat0pos(11, s[i9])
        s[i] = z1 ^ z2
        s[i15] = (_mat0neg(2, z0) ^ _mat0neg(18, z1) ^ _mat3neg(28, z2)
                  ^ (s[i] ^ ((s[i] << 5) & 0xDA442D24)))
        self._cursor = i15
        return s[i15]


class WELL1024aGenerator(_WellGenerator):
    WORD_COUNT = 32

    def next_bits(self) -> int:
        s = self._state
        i = self._cursor
        i31 = (i + 31) & 31
        z0 = s[i31]
        z1 = s[i] ^ _mat0pos(8, s[(i + 3) & 31])
        z2 = _mat0neg(19, s[(i + 24) & 31]) ^ _mat0neg(14, s[(i + 10) & 31])
        s[i] = z1 ^ z2
        s[i31] = _mat0neg(11, z0) ^ _mat0neg(7, z1) ^ _mat0neg(13, z2)
        self._cursor = i31
        return s[i31]


class WELL19937cGenerator(_WellGenerator):
    """WELL19937a recurrence with Matsumoto-Kurita tempering (maximal equidistribution)."""

    WORD_COUNT = 624

    def next_bits(self) -> int:
        s = self._state
        i = self._cursor
        r = self.WORD_COUNT
        i_last = (i + 623) % r
        z0 = (s[i_last] & 0x80000000) | (s[(i + 622) % r] & 0x7FFFFFFF)
        z1 = _mat0neg(25, s[i]) ^ _mat0pos(27, s[(i + 70) % r])
        z2 = (s[(i + 179) % r] >> 9) ^ _mat0pos(1, s[(i + 449) % r])
        s[i] = z1 ^ z2
        s[i_last] = z0 ^ _mat0neg(9, z1) ^ _mat0neg(21, z2) ^ _mat0pos(21, s[i])
        self._cursor = i_last

        y = s[i_last]
        y ^= (y << 7) & 0xE46E1700
        y ^= (y << 15) & 0x9B868000
        return y


class WELL44497bGenerator(_WellGenerator):
    """WELL44497a recurrence with tempering."""

    WORD_COUNT = 1391

    def next_bits(self) -> int:
        s = self._state
        i = self._cursor
        r = self.WORD_COUNT
        i_last = (i + 1390) % r
        z0 = (s[i_last] & 0xFFFF8000) | (s[(i + 1389) % r] & 0x00007FFF)
        z1 = _mat0neg(24, s[i]) ^ _mat0pos(30, s[(i + 23) % r])
        z2 = _mat0neg(10, s[(i + 481) % r]) ^ _mat3neg(26, s[(i + 229) % r])
        s[i] = z1 ^ z2
        s[i_last] = (z0 ^ _mat0pos(20, z1)
                     ^ _mat5(9, 0xB729FCEC, 0xFBFFFFFF, 0x00020000, z2)
                     ^ s[i])
        self._cursor = i_last

        y = s[i_last]
        y ^= (y << 7) & 0x93DD1400
        y ^= (y << 15) & 0xFA118000
        return y
