#!/usr/bin/env python3
"""
Adapters - plug generators into code that expects Python's ``random``.

GeneratorRandom is a ``random.Random`` subclass driven by any framework
generator, so ``shuffle``, ``choice``, ``randrange``, ``sample`` and the
rest of the standard API run on top of it. The helper functions cover
the common collection and string cases without the adapter.

Version: 1.0.0
"""

import random
from typing import AbstractSet, Iterable, List, MutableSequence, Sequence, TypeVar, Union

from prng_framework.api.bit_source import BitSource
from prng_framework.errors import require
from prng_framework.sampling import Sampler

T = TypeVar('T')


class GeneratorRandom(random.Random):
    """
    ``random.Random`` backed by a framework generator.

    ``seed()`` is a no-op: the generator keeps its own seed. ``getstate``
    and ``setstate`` exchange the generator's raw state bytes.
    """

    def __new__(cls, generator):
        return super().__new__(cls)

    def __init__(self, generator):
        self._generator = generator
        self._sampler = _sampler_for(generator)
        super().__init__()

    @property
    def generator(self):
        return self._generator

    def seed(self, a=None, version=2):
        """Ignored."""

    def random(self) -> float:
        return self._sampler.uniform_double()

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        words = (k + 63) // 64
        value = 0
        for _ in range(words):
            value = (value << 64) | self._generator.generate_uniform_long()
        return value >> (64 * words - k)

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self._sampler.normal_double(mu, sigma)

    def normalvariate(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self._sampler.normal_double(mu, sigma)

    def getstate(self) -> bytes:
        return self._generator.get_state()

    def setstate(self, state: bytes) -> None:
        self._generator.set_state(state)


# ============================================================================
# COLLECTION & STRING HELPERS
# ============================================================================

def _sampler_for(source: BitSource) -> Sampler:
    sampler = getattr(source, 'sampler', None)
    return sampler if isinstance(sampler, Sampler) else Sampler(source)


def pick(source: BitSource, items: Union[Sequence[T], Iterable[T]]) -> T:
    """Uniformly chosen element; unordered collections are ordered by iteration."""
    if not isinstance(items, Sequence):
        items = list(items)
    require(len(items) > 0, "Cannot pick from an empty collection")
    return items[_sampler_for(source).uniform_long(len(items))]


def pick_from_set(source: BitSource, items: AbstractSet[T]) -> T:
    """Uniformly chosen member of a set, indexed in iteration order."""
    return pick(source, list(items))


def shuffle(source: BitSource, items: MutableSequence[T]) -> MutableSequence[T]:
    """Fisher-Yates shuffle in place; returns ``items``."""
    sampler = _sampler_for(source)
    for i in range(len(items) - 1, 0, -1):
        j = sampler.uniform_long(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def shuffled(source: BitSource, items: Iterable[T]) -> List[T]:
    """Shuffled copy."""
    return list(shuffle(source, list(items)))


def generate_character(source: BitSource, alphabet: str) -> str:
    require(len(alphabet) > 0, "Alphabet must not be empty")
    return pick(source, alphabet)


def generate_string(source: BitSource, alphabet: str, length: int) -> str:
    """``length`` characters drawn independently from ``alphabet``."""
    require(length >= 0, f"length must be non-negative, got {length}")
    require(len(alphabet) > 0, "Alphabet must not be empty")
    sampler = _sampler_for(source)
    return ''.join(alphabet[sampler.uniform_long(len(alphabet))] for _ in range(length))
