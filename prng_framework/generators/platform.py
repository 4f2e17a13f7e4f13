#!/usr/bin/env python3
"""
Host-side generators.

SplitMix64Generator - Steele/Lea/Flood SplitMix64, the splittable
                      generator behind java.util.SplittableRandom.
PythonRandomGenerator - wraps a private ``random.Random`` instance; it
                      can be seeded but never exposes or accepts state.

Version: 1.0.0
"""

import logging
import random
from typing import Optional

import numpy as np

from prng_framework.api.bit_source import EntropySource
from prng_framework.api.generator import RandomGenerator, WordStateGenerator
from prng_framework.api.widths import BitWidth
from prng_framework.utils.word_packing import BytesLike, bytes_to_long, long_to_bytes

logger = logging.getLogger(__name__)

_MASK64 = 0xFFFFFFFFFFFFFFFF

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_1 = 0xBF58476D1CE4E5B9
_MIX_2 = 0x94D049BB133111EB


def mix64(z: int) -> int:
    """SplitMix64 finaliser (variant 13 of Stafford's mixers)."""
    z = ((z ^ (z >> 30)) * _MIX_1) & _MASK64
    z = ((z ^ (z >> 27)) * _MIX_2) & _MASK64
    return z ^ (z >> 31)


def splitmix64_stream(seed: int, count: int) -> np.ndarray:
    """
    First ``count`` SplitMix64 outputs for ``seed`` as a uint64 array.

    Element k equals the (k + 1)-th output of
    ``SplitMix64Generator(seed=long_to_bytes(seed))``; computed in one
    vectorised pass (uint64 array arithmetic wraps modulo 2^64).
    """
    z = np.arange(1, count + 1, dtype=np.uint64) * np.uint64(GOLDEN_GAMMA)
    z += np.uint64(seed & _MASK64)
    z = (z ^ (z >> np.uint64(30))) * np.uint64(_MIX_1)
    z = (z ^ (z >> np.uint64(27))) * np.uint64(_MIX_2)
    return z ^ (z >> np.uint64(31))


class SplitMix64Generator(WordStateGenerator):
    """Weyl sequence with step GOLDEN_GAMMA, passed through mix64."""

    NATURAL_WIDTH = BitWidth.LONG
    WORD_SIZE = 8

    def next_bits(self) -> int:
        self._state[0] = (self._state[0] + GOLDEN_GAMMA) & _MASK64
        return mix64(self._state[0])

    def split(self) -> 'SplitMix64Generator':
        """Child generator seeded from the next output of this one."""
        child = SplitMix64Generator(seed=long_to_bytes(self.next_bits()))
        logger.debug("Split %s", type(self).__name__)
        return child


class PythonRandomGenerator(RandomGenerator):
    """
    32 bits at a time from a private ``random.Random``.

    Seeding takes the first 8 seed bytes as an integer; the Mersenne
    Twister state inside ``random.Random`` is deliberately not exposed.
    """

    NATURAL_WIDTH = BitWidth.INTEGER
    SEED_SIZE = 8

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None):
        self._random = random.Random()
        super().__init__(seed, entropy)

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        self._random.seed(bytes_to_long(seed))

    def next_bits(self) -> int:
        return self._random.getrandbits(32)
