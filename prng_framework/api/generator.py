#!/usr/bin/env python3
"""
Random Generator - Base classes for every bit-generating state machine.

A concrete generator implements one primitive, ``next_bits()``, which
advances its state once and returns fresh bits of the class's natural
width. Everything else a caller sees (other word widths, top-N bit
extraction, booleans, byte strings, the distribution sampler) is derived
here from that primitive.

Seed and state travel as big-endian bytes:

    WordStateGenerator:   [cursor:int32 (optional)][word 0]...[word N-1]

Version: 1.0.0
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

from prng_framework.api.bit_source import EntropySource
from prng_framework.api.widths import BitWidth, WidthAdapter
from prng_framework.errors import UnsupportedOperationError, require
from prng_framework.utils.word_packing import (
    BytesLike,
    bytes_to_integer,
    bytes_to_words,
    integer_to_bytes,
    long_to_bytes,
    words_to_bytes,
)

if TYPE_CHECKING:
    from prng_framework.sampling import Sampler

logger = logging.getLogger(__name__)


class RandomGenerator(ABC):
    """
    Abstract bit source.

    Subclasses set ``NATURAL_WIDTH`` and, where state access is supported,
    ``SEED_SIZE``/``STATE_SIZE`` in bytes.

    Args:
        seed: Seed bytes. When omitted, ``SEED_SIZE`` bytes are drawn from
            ``entropy``, or from a freshly constructed clock entropy source.
        entropy: Source of seed bytes used only when ``seed`` is None.
    """

    NATURAL_WIDTH: BitWidth = BitWidth.LONG
    SEED_SIZE: Optional[int] = None
    STATE_SIZE: Optional[int] = None

    def __init__(self, seed: Optional[BytesLike] = None,
                 entropy: Optional[EntropySource] = None):
        self._widths = WidthAdapter(self.NATURAL_WIDTH, self.next_bits)
        self._sampler: Optional['Sampler'] = None
        if seed is None:
            seed = self._draw_seed(entropy)
        self.set_seed(seed)

    # ------------------------------------------------------------------
    # Primitive
    # ------------------------------------------------------------------

    @abstractmethod
    def next_bits(self) -> int:
        """Advance the state once and return ``NATURAL_WIDTH`` fresh bits."""

    # ------------------------------------------------------------------
    # Seed / state
    # ------------------------------------------------------------------

    def _draw_seed(self, entropy: Optional[EntropySource]) -> bytes:
        if entropy is None:
            from prng_framework.entropy import ClockEntropySource
            entropy = ClockEntropySource()
        logger.debug("Seeding %s from %s", type(self).__name__, type(entropy).__name__)
        return entropy.generate_bytes(self.get_seed_size())

    def get_seed_size(self) -> int:
        if self.SEED_SIZE is None:
            raise UnsupportedOperationError(f"{type(self).__name__} has no seed size")
        return self.SEED_SIZE

    def get_state_size(self) -> int:
        if self.STATE_SIZE is None:
            raise UnsupportedOperationError(f"{type(self).__name__} does not expose its state")
        return self.STATE_SIZE

    def set_seed(self, seed: BytesLike) -> None:
        """Default seeding copies the seed bytes into the state."""
        self.set_state(seed)

    def get_state(self) -> bytes:
        raise UnsupportedOperationError(f"{type(self).__name__} does not expose its state")

    def set_state(self, state: BytesLike) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not accept a state")

    def _check_length(self, data: BytesLike, size: int, what: str) -> None:
        require(data is not None and len(data) >= size,
                f"{type(self).__name__} needs a {what} of at least {size} bytes, "
                f"got {0 if data is None else len(data)}")

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    def jump(self) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} cannot jump ahead")

    def split(self) -> 'RandomGenerator':
        raise UnsupportedOperationError(f"{type(self).__name__} cannot be split")

    # ------------------------------------------------------------------
    # Derived bit surface
    # ------------------------------------------------------------------

    def generate_uniform_byte(self) -> int:
        return self._widths.uniform(BitWidth.BYTE)

    def generate_uniform_short(self) -> int:
        return self._widths.uniform(BitWidth.SHORT)

    def generate_uniform_integer(self) -> int:
        return self._widths.uniform(BitWidth.INTEGER)

    def generate_uniform_long(self) -> int:
        return self._widths.uniform(BitWidth.LONG)

    def generate_byte_bits(self, bits: int) -> int:
        return self._widths.bits(bits, BitWidth.BYTE)

    def generate_short_bits(self, bits: int) -> int:
        return self._widths.bits(bits, BitWidth.SHORT)

    def generate_integer_bits(self, bits: int) -> int:
        return self._widths.bits(bits, BitWidth.INTEGER)

    def generate_long_bits(self, bits: int) -> int:
        return self._widths.bits(bits, BitWidth.LONG)

    def generate_boolean(self) -> bool:
        """Top bit of one uniform byte."""
        return (self.generate_uniform_byte() >> 7) == 1

    def generate_bytes(self, count: int) -> bytes:
        """``count`` bytes cut from consecutive big-endian 64-bit values."""
        require(count >= 0, f"Byte count must be non-negative, got {count}")
        chunks = [long_to_bytes(self.generate_uniform_long()) for _ in range((count + 7) // 8)]
        return b''.join(chunks)[:count]

    @property
    def sampler(self) -> 'Sampler':
        """Distribution sampler bound to this generator."""
        if self._sampler is None:
            from prng_framework.sampling import Sampler
            self._sampler = Sampler(self)
        return self._sampler

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={int(self.NATURAL_WIDTH)})"


class RandomGenerator1(RandomGenerator):
    """Generators producing a single fresh bit per state transition."""

    NATURAL_WIDTH = BitWidth.BIT

    @abstractmethod
    def generate_bit(self) -> int:
        """Advance the state once and return 0 or 1."""

    def next_bits(self) -> int:
        return self.generate_bit()

    def generate_boolean(self) -> bool:
        return self.generate_bit() == 1


class WordStateGenerator(RandomGenerator):
    """
    Generators whose state is a fixed array of equal-size words,
    optionally preceded by a 32-bit cursor.

    The seed is the word array alone; seeding resets the cursor to
    ``INITIAL_CURSOR``.
    """

    WORD_SIZE: int = 8
    WORD_COUNT: int = 1
    HAS_CURSOR: bool = False
    INITIAL_CURSOR: int = 0
    # Largest cursor value a restored state may carry; defaults to WORD_COUNT - 1
    MAX_CURSOR: Optional[int] = None
    # xor-shift style recurrences stay at zero forever from an all-zero state
    ZERO_STATE_DEGENERATE: bool = False

    _state: List[int]
    _cursor: int

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        word_bytes = cls.WORD_SIZE * cls.WORD_COUNT
        if 'SEED_SIZE' not in cls.__dict__:
            cls.SEED_SIZE = word_bytes
        if 'STATE_SIZE' not in cls.__dict__:
            cls.STATE_SIZE = word_bytes + (4 if cls.HAS_CURSOR else 0)

    def set_seed(self, seed: BytesLike) -> None:
        self._check_length(seed, self.get_seed_size(), "seed")
        self._state = bytes_to_words(seed, self.WORD_SIZE, self.WORD_COUNT)
        self._cursor = self.INITIAL_CURSOR
        if self.ZERO_STATE_DEGENERATE and not any(self._state):
            logger.warning("%s seeded with an all-zero state; output will be constant",
                           type(self).__name__)

    def get_state(self) -> bytes:
        prefix = integer_to_bytes(self._cursor) if self.HAS_CURSOR else b''
        return prefix + words_to_bytes(self._state, self.WORD_SIZE)

    def set_state(self, state: BytesLike) -> None:
        self._check_length(state, self.get_state_size(), "state")
        offset = 0
        cursor = self.INITIAL_CURSOR
        if self.HAS_CURSOR:
            cursor = bytes_to_integer(state)
            limit = self.WORD_COUNT - 1 if self.MAX_CURSOR is None else self.MAX_CURSOR
            require(0 <= cursor <= limit, f"Cursor {cursor} outside [0, {limit}]")
            offset = 4
        self._state = bytes_to_words(state, self.WORD_SIZE, self.WORD_COUNT, offset)
        self._cursor = cursor
        logger.debug("Restored %s state (%d bytes)", type(self).__name__, self.get_state_size())


class JumpableGenerator(WordStateGenerator):
    """
    64-bit word generators with jump-ahead polynomials.

    A jump walks the bits of the polynomial words from least significant
    upward; for every set bit the current state is XOR-accumulated, and
    the generator is stepped once for every bit examined. The accumulator
    then replaces the state.
    """

    JUMP: Tuple[int, ...] = ()
    LONG_JUMP: Tuple[int, ...] = ()

    def jump(self) -> None:
        """Advance by the distance encoded in ``JUMP``."""
        self._apply_polynomial(self.JUMP)
        logger.debug("%s jumped", type(self).__name__)

    def long_jump(self) -> None:
        """Advance by the distance encoded in ``LONG_JUMP``."""
        if not self.LONG_JUMP:
            raise UnsupportedOperationError(f"{type(self).__name__} has no long jump")
        self._apply_polynomial(self.LONG_JUMP)
        logger.debug("%s long-jumped", type(self).__name__)

    def split(self) -> 'JumpableGenerator':
        """Independent copy positioned one jump ahead; this instance is unchanged."""
        child = copy.deepcopy(self)
        child.jump()
        return child

    def _apply_polynomial(self, polynomial: Tuple[int, ...]) -> None:
        accumulator = [0] * self.WORD_COUNT
        for word in polynomial:
            for bit in range(64):
                if (word >> bit) & 1:
                    for i, value in enumerate(self._state):
                        accumulator[i] ^= value
                self.next_bits()
        self._state = accumulator
