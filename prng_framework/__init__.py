"""
PRNG Framework - bit generators and the distributions derived from them

Exports:
- RandomGenerator and friends: bit-source base classes and width adapters
- Sampler: uniform ranges, Bates, normal, lognormal, triangular, Pareto,
  Weibull, exponential, gamma, beta and Poisson sampling
- GENERATOR_REGISTRY, create_generator: every concrete generator by name
- GeneratorRandom: random.Random driven by any generator
- ClockEntropySource: default seed source
- InvalidArgumentError, UnsupportedOperationError: error types
"""

__version__ = "1.0.0"

from .errors import InvalidArgumentError, PRNGError, UnsupportedOperationError
from .sampling import Sampler
from .api import (
    BitSource,
    BitWidth,
    EntropySource,
    JumpableGenerator,
    RandomGenerator,
    RandomGenerator1,
    WidthAdapter,
    WordStateGenerator,
)
from .generators import (
    GENERATOR_REGISTRY,
    create_generator,
    get_generator_info,
    list_available_generators,
)
from .entropy import ClockEntropySource
from .adapters import (
    GeneratorRandom,
    generate_character,
    generate_string,
    pick,
    pick_from_set,
    shuffle,
    shuffled,
)

__all__ = [
    '__version__',
    'BitSource',
    'BitWidth',
    'ClockEntropySource',
    'EntropySource',
    'GENERATOR_REGISTRY',
    'GeneratorRandom',
    'InvalidArgumentError',
    'JumpableGenerator',
    'PRNGError',
    'RandomGenerator',
    'RandomGenerator1',
    'Sampler',
    'UnsupportedOperationError',
    'WidthAdapter',
    'WordStateGenerator',
    'create_generator',
    'generate_character',
    'generate_string',
    'get_generator_info',
    'list_available_generators',
    'pick',
    'pick_from_set',
    'shuffle',
    'shuffled',
]
