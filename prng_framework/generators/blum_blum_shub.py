#!/usr/bin/env python3
"""
Blum Blum Shub: repeated squaring modulo a product of two primes.

The state is a residue below a fixed modulus, held in a ModularInteger
whose byte capacity is fixed by the modulus so that state buffers have
a constant length.

Seeds that are 0, 1, share a factor with the modulus, or are not below
it are rejected; restored states must be units modulo it. Generators
built without a seed keep drawing entropy until a valid seed turns up.

Version: 1.0.0
"""

import logging
import math
from typing import Optional

from prng_framework.api.bit_source import EntropySource
from prng_framework.api.generator import RandomGenerator, RandomGenerator1
from prng_framework.api.widths import BitWidth
from prng_framework.errors import PRNGError, require
from prng_framework.utils.word_packing import BytesLike, bytes_to_unsigned

logger = logging.getLogger(__name__)

# Redraws allowed when hunting for a valid seed from entropy
_MAX_SEED_ATTEMPTS = 1000


class ModularInteger:
    """Residue modulo a fixed modulus with a fixed big-endian byte width."""

    def __init__(self, modulus: int):
        self.modulus = modulus
        self.capacity = (modulus.bit_length() + 7) // 8
        self.value = 0

    def assign(self, value: int) -> None:
        require(0 <= value < self.modulus,
                f"Residue {value} outside [0, {self.modulus})")
        self.value = value

    def square(self) -> int:
        self.value = pow(self.value, 2, self.modulus)
        return self.value

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(self.capacity, 'big')

    def load(self, data: BytesLike) -> None:
        self.assign(bytes_to_unsigned(data, self.capacity))


def _valid_seed(value: int, modulus: int) -> bool:
    return 1 < value < modulus and math.gcd(value, modulus) == 1


def _valid_state(value: int, modulus: int) -> bool:
    # Squaring keeps units as units; 1 is reachable (from modulus - 1)
    return 0 < value < modulus and math.gcd(value, modulus) == 1


class _BlumBlumShubMixin:
    """Seed validation and state handling shared by both widths."""

    MODULUS: int
    _residue: ModularInteger

    def _draw_seed(self, entropy: Optional[EntropySource]) -> bytes:
        if entropy is None:
            from prng_framework.entropy import ClockEntropySource
            entropy = ClockEntropySource()
        for _ in range(_MAX_SEED_ATTEMPTS):
            seed = super()._draw_seed(entropy)
            if _valid_seed(bytes_to_unsigned(seed, self.get_seed_size()), self.MODULUS):
                return seed
            logger.debug("Discarded out-of-domain %s seed", type(self).__name__)
        raise PRNGError(f"No valid {type(self).__name__} seed after {_MAX_SEED_ATTEMPTS} draws")

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        value = bytes_to_unsigned(seed, self.get_seed_size())
        require(_valid_seed(value, self.MODULUS),
                f"{type(self).__name__} seed must be coprime to the modulus and in (1, modulus)")
        self._residue = ModularInteger(self.MODULUS)
        self._residue.assign(value)

    def get_state(self) -> bytes:
        return self._residue.to_bytes()

    def set_state(self, state: BytesLike) -> None:
        self._check_length(state, self.get_state_size(), "state")
        residue = ModularInteger(self.MODULUS)
        residue.load(state)
        require(_valid_state(residue.value, self.MODULUS),
                f"{type(self).__name__} state must be a unit modulo the modulus")
        self._residue = residue


class BlumBlumShubGenerator(_BlumBlumShubMixin, RandomGenerator1):
    """Emits the parity bit of each square modulo 999999999707 * 999999999517."""

    PRIME_1 = 999999999707
    PRIME_2 = 999999999517
    MODULUS = PRIME_1 * PRIME_2
    SEED_SIZE = (MODULUS.bit_length() + 7) // 8
    STATE_SIZE = SEED_SIZE

    def generate_bit(self) -> int:
        return self._residue.square() & 1


class BlumBlumShub64Generator(_BlumBlumShubMixin, RandomGenerator):
    """
    Squares modulo 2^64 + 1 = 274177 * 67280421310721 and emits the full
    residue; the single residue that needs 65 bits (2^64) is squared past.
    """

    NATURAL_WIDTH = BitWidth.LONG
    PRIME_1 = 274177
    PRIME_2 = 67280421310721
    MODULUS = PRIME_1 * PRIME_2
    SEED_SIZE = 8
    STATE_SIZE = (MODULUS.bit_length() + 7) // 8

    def next_bits(self) -> int:
        while True:
            value = self._residue.square()
            if value != 1 << 64:
                return value
