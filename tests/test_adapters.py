#!/usr/bin/env python3
"""
Adapter and entropy tests.

Tests:
1. GeneratorRandom drives the standard random.Random API
2. pick / shuffle / shuffled / string helpers
3. Fisher-Yates produces every permutation equally often
4. ClockEntropySource yields distinct seeds per instance

Version: 1.0.0
"""

import itertools
import random

import pytest
import sys
from pathlib import Path
from scipy import stats

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from prng_framework import (
    ClockEntropySource,
    GeneratorRandom,
    generate_character,
    generate_string,
    pick,
    pick_from_set,
    shuffle,
    shuffled,
)
from prng_framework.entropy import clock_seed
from prng_framework.errors import InvalidArgumentError
from prng_framework.generators import (
    MersenneTwister19937_32Generator,
    SplitMix64Generator,
    Xoshiro256PlusGenerator,
)
from prng_framework.utils import long_to_bytes


def xoshiro(value: int = 99) -> Xoshiro256PlusGenerator:
    return Xoshiro256PlusGenerator(
        seed=SplitMix64Generator(seed=long_to_bytes(value)).generate_bytes(32))


class TestGeneratorRandom:
    """random.Random facade."""

    def test_is_random_instance(self):
        assert isinstance(GeneratorRandom(xoshiro()), random.Random)

    def test_random_matches_sampler(self):
        adapter = GeneratorRandom(xoshiro())
        reference = xoshiro().sampler
        assert [adapter.random() for _ in range(10)] == \
            [reference.uniform_double() for _ in range(10)]

    def test_getrandbits(self):
        adapter = GeneratorRandom(xoshiro())
        reference = xoshiro()
        assert adapter.getrandbits(64) == reference.generate_uniform_long()
        assert adapter.getrandbits(8) == reference.generate_uniform_long() >> 56
        first = reference.generate_uniform_long()
        second = reference.generate_uniform_long()
        assert adapter.getrandbits(100) == ((first << 64) | second) >> 28
        assert adapter.getrandbits(0) == 0

    def test_negative_bits_rejected(self):
        with pytest.raises(ValueError):
            GeneratorRandom(xoshiro()).getrandbits(-1)

    def test_standard_api_ranges(self):
        adapter = GeneratorRandom(xoshiro())
        for _ in range(500):
            assert 3 <= adapter.randrange(3, 17) < 17
            assert 1 <= adapter.randint(1, 6) <= 6
            assert adapter.choice('abc') in 'abc'
            assert 0.0 <= adapter.uniform(0.0, 2.0) <= 2.0
        assert len(set(adapter.sample(range(20), 20))) == 20

    def test_seed_is_ignored(self):
        adapter = GeneratorRandom(xoshiro())
        reference = GeneratorRandom(xoshiro())
        adapter.seed(12345)
        assert adapter.random() == reference.random()

    def test_state_round_trip(self):
        adapter = GeneratorRandom(xoshiro())
        state = adapter.getstate()
        expected = [adapter.random() for _ in range(5)]
        adapter.setstate(state)
        assert [adapter.random() for _ in range(5)] == expected

    def test_gauss_uses_normal_sampler(self):
        adapter = GeneratorRandom(xoshiro())
        reference = xoshiro().sampler
        assert adapter.gauss(1.0, 2.0) == reference.normal_double(1.0, 2.0)
        assert adapter.normalvariate(0.0, 1.0) == reference.normal_double(0.0, 1.0)

    def test_wraps_32_bit_generator(self):
        adapter = GeneratorRandom(MersenneTwister19937_32Generator(seed=long_to_bytes(5)))
        values = [adapter.random() for _ in range(100)]
        assert all(0.0 <= v < 1.0 for v in values)
        assert len(set(values)) == 100


class TestCollectionHelpers:
    """pick, shuffle and strings."""

    def test_pick_from_sequence_and_set(self):
        generator = xoshiro()
        assert pick(generator, [10, 20, 30]) in (10, 20, 30)
        assert pick(generator, {'x', 'y'}) in ('x', 'y')
        assert pick_from_set(generator, frozenset({1, 2, 3})) in (1, 2, 3)

    def test_pick_empty_rejected(self):
        with pytest.raises(InvalidArgumentError):
            pick(xoshiro(), [])

    def test_shuffle_in_place(self):
        items = list(range(50))
        result = shuffle(xoshiro(), items)
        assert result is items
        assert sorted(items) == list(range(50))
        assert items != list(range(50))

    def test_shuffled_copy(self):
        original = tuple(range(10))
        result = shuffled(xoshiro(), original)
        assert isinstance(result, list)
        assert sorted(result) == list(original)

    def test_shuffle_degenerate_sizes(self):
        assert shuffle(xoshiro(), []) == []
        assert shuffle(xoshiro(), [1]) == [1]

    def test_fisher_yates_is_uniform(self):
        """All 3! orderings appear equally often."""
        generator = xoshiro(5)
        permutations = list(itertools.permutations('abc'))
        counts = dict.fromkeys(permutations, 0)
        for _ in range(12000):
            counts[tuple(shuffled(generator, 'abc'))] += 1
        _, p_value = stats.chisquare(list(counts.values()))
        assert p_value > 1e-6

    def test_strings(self):
        generator = xoshiro()
        assert generate_character(generator, 'xyz') in 'xyz'
        text = generate_string(generator, 'ab', 200)
        assert len(text) == 200
        assert set(text) == {'a', 'b'}
        assert generate_string(generator, 'ab', 0) == ''

    def test_string_arguments_validated(self):
        with pytest.raises(InvalidArgumentError):
            generate_string(xoshiro(), '', 3)
        with pytest.raises(InvalidArgumentError):
            generate_string(xoshiro(), 'ab', -1)
        with pytest.raises(InvalidArgumentError):
            generate_character(xoshiro(), '')


class TestClockEntropy:
    """Default seed source."""

    def test_instances_differ(self):
        first = ClockEntropySource().generate_bytes(32)
        second = ClockEntropySource().generate_bytes(32)
        assert first != second

    def test_clock_seed_is_64_bit(self):
        assert 0 <= clock_seed() < 1 << 64

    def test_is_full_generator(self):
        source = ClockEntropySource()
        assert 0 <= source.sampler.uniform_long(10) < 10
        assert len(source.get_state()) == 8

    def test_unseeded_generators_differ(self):
        assert Xoshiro256PlusGenerator().get_state() != Xoshiro256PlusGenerator().get_state()
