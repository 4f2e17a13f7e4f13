#!/usr/bin/env python3
"""
Generator Registry - every concrete generator by name.

Each entry records the class, a one-line description, the natural width
and which stream operations it supports, in the same shape as the
kernel registry the cluster tools use.

Version: 1.0.0
"""

from typing import Any, Dict, List, Optional, Type

from prng_framework.api.bit_source import EntropySource
from prng_framework.api.generator import RandomGenerator
from prng_framework.errors import InvalidArgumentError
from prng_framework.utils.word_packing import BytesLike

from .blum_blum_shub import BlumBlumShub64Generator, BlumBlumShubGenerator, ModularInteger
from .congruential import (
    Lehmer16Generator,
    LinearCongruential32Generator,
    LinearCongruential64Generator,
    PermutedCongruentialXSHRRGenerator,
    PermutedCongruentialXSHRSGenerator,
)
from .lfsr import FLFSR16Generator, FLFSR64Generator, MarioGenerator
from .mersenne import MersenneTwister19937_32Generator, MersenneTwister19937Generator
from .multiply_with_carry import CMWCGenerator, SuperKISSGenerator
from .platform import PythonRandomGenerator, SplitMix64Generator, splitmix64_stream
from .well import WELL512aGenerator, WELL1024aGenerator, WELL19937cGenerator, WELL44497bGenerator
from .xorshift import (
    Xorshift32Generator,
    Xorshift64Generator,
    Xorshift64StarGenerator,
    Xorshift128Generator,
    Xorshift128PlusGenerator,
    Xorshift1024StarGenerator,
    XorshiftPlus64Generator,
    XorshiftStar64Generator,
    XorwowGenerator,
)
from .xoshiro import (
    Xoroshiro128PlusGenerator,
    Xoroshiro128StarGenerator,
    Xoshiro256PlusGenerator,
    Xoshiro512PlusGenerator,
    Xoshiro512StarStarGenerator,
)


def _entry(cls: Type[RandomGenerator], description: str, **extra: Any) -> Dict[str, Any]:
    entry = {
        'class': cls,
        'description': description,
        'natural_width': int(cls.NATURAL_WIDTH),
        'seed_size': cls.SEED_SIZE,
        'state_size': cls.STATE_SIZE,
        'jumpable': bool(getattr(cls, 'JUMP', ())),
        'long_jumpable': bool(getattr(cls, 'LONG_JUMP', ())),
        'splittable': cls.split is not RandomGenerator.split,
        'seed_validated': False,
    }
    entry.update(extra)
    return entry


# ============================================================================
# GENERATOR REGISTRY
# ============================================================================

GENERATOR_REGISTRY: Dict[str, Dict[str, Any]] = {
    'lcg32': _entry(LinearCongruential32Generator, 'LCG, multiplier 134775813, increment 1'),
    'lcg64': _entry(LinearCongruential64Generator, 'LCG with the Knuth MMIX constants'),
    'lehmer16': _entry(Lehmer16Generator, 'Lehmer generator modulo 65537, multiplier 75'),
    'pcg_xsh_rr': _entry(PermutedCongruentialXSHRRGenerator, 'PCG32 with xorshift-high random-rotate output'),
    'pcg_xsh_rs': _entry(PermutedCongruentialXSHRSGenerator, 'PCG32 MCG with xorshift-high random-shift output'),
    'xorshift32': _entry(Xorshift32Generator, 'Marsaglia xorshift 13/17/5'),
    'xorshift64': _entry(Xorshift64Generator, 'Xorshift with configurable signed coefficients'),
    'xorshift_plus64': _entry(XorshiftPlus64Generator, 'Xorshift64 with additive output offset'),
    'xorshift_star64': _entry(XorshiftStar64Generator, 'Xorshift64 with multiplicative output scrambler'),
    'xorshift64star': _entry(Xorshift64StarGenerator, 'xorshift64* 12/25/27'),
    'xorshift128': _entry(Xorshift128Generator, 'Marsaglia xorshift128 over four 32-bit words'),
    'xorshift128plus': _entry(Xorshift128PlusGenerator, 'xorshift128+ 23/17/26'),
    'xorshift1024star': _entry(Xorshift1024StarGenerator, 'xorshift1024* with rotating cursor'),
    'xorwow': _entry(XorwowGenerator, 'xorshift128 plus Weyl counter'),
    'xoroshiro128plus': _entry(Xoroshiro128PlusGenerator, 'xoroshiro128+ 24/16/37'),
    'xoroshiro128star': _entry(Xoroshiro128StarGenerator, 'xoroshiro128 with s0*5 output'),
    'xoshiro256plus': _entry(Xoshiro256PlusGenerator, 'xoshiro256+'),
    'xoshiro512plus': _entry(Xoshiro512PlusGenerator, 'xoshiro512+'),
    'xoshiro512starstar': _entry(Xoshiro512StarStarGenerator, 'xoshiro512**'),
    'well512a': _entry(WELL512aGenerator, 'WELL512a'),
    'well1024a': _entry(WELL1024aGenerator, 'WELL1024a'),
    'well19937c': _entry(WELL19937cGenerator, 'WELL19937 with tempering'),
    'well44497b': _entry(WELL44497bGenerator, 'WELL44497 with tempering'),
    'mt19937_64': _entry(MersenneTwister19937Generator, '64-bit Mersenne Twister'),
    'mt19937': _entry(MersenneTwister19937_32Generator, '32-bit Mersenne Twister, Python random compatible'),
    'cmwc4096': _entry(CMWCGenerator, 'Complementary multiply-with-carry, lag 4096'),
    'superkiss64': _entry(SuperKISSGenerator, 'SuperKISS: MWC queue + LCG + xorshift'),
    'blum_blum_shub': _entry(BlumBlumShubGenerator, 'Blum Blum Shub parity bits', seed_validated=True),
    'blum_blum_shub64': _entry(BlumBlumShub64Generator, 'Blum Blum Shub modulo 2^64 + 1', seed_validated=True),
    'flfsr16': _entry(FLFSR16Generator, '16-bit Fibonacci LFSR'),
    'flfsr64': _entry(FLFSR64Generator, '64-bit Fibonacci LFSR'),
    'mario': _entry(MarioGenerator, 'Super Mario Bros. 16-bit generator'),
    'splitmix64': _entry(SplitMix64Generator, 'SplitMix64 (SplittableRandom core)'),
    'python_random': _entry(PythonRandomGenerator, "Python's random.Random, state not exposed"),
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_generator_info(name: str) -> Dict[str, Any]:
    """Registry entry for a generator name."""
    if name not in GENERATOR_REGISTRY:
        raise InvalidArgumentError(
            f"Unknown generator: {name}. Available: {list_available_generators()}")
    return GENERATOR_REGISTRY[name]


def list_available_generators() -> List[str]:
    """All registered generator names."""
    return list(GENERATOR_REGISTRY.keys())


def create_generator(name: str, seed: Optional[BytesLike] = None,
                     entropy: Optional[EntropySource] = None) -> RandomGenerator:
    """Instantiate a registered generator."""
    return get_generator_info(name)['class'](seed=seed, entropy=entropy)


__all__ = [
    'GENERATOR_REGISTRY', 'get_generator_info', 'list_available_generators', 'create_generator',
    'BlumBlumShubGenerator', 'BlumBlumShub64Generator', 'ModularInteger',
    'CMWCGenerator', 'SuperKISSGenerator',
    'FLFSR16Generator', 'FLFSR64Generator', 'MarioGenerator',
    'Lehmer16Generator', 'LinearCongruential32Generator', 'LinearCongruential64Generator',
    'PermutedCongruentialXSHRRGenerator', 'PermutedCongruentialXSHRSGenerator',
    'MersenneTwister19937Generator', 'MersenneTwister19937_32Generator',
    'PythonRandomGenerator', 'SplitMix64Generator', 'splitmix64_stream',
    'WELL512aGenerator', 'WELL1024aGenerator', 'WELL19937cGenerator', 'WELL44497bGenerator',
    'Xorshift32Generator', 'Xorshift64Generator', 'Xorshift64StarGenerator',
    'Xorshift128Generator', 'Xorshift128PlusGenerator', 'Xorshift1024StarGenerator',
    'XorshiftPlus64Generator', 'XorshiftStar64Generator', 'XorwowGenerator',
    'Xoroshiro128PlusGenerator', 'Xoroshiro128StarGenerator', 'Xoshiro256PlusGenerator',
    'Xoshiro512PlusGenerator', 'Xoshiro512StarStarGenerator',
]
