"""
API package - Bit-source contract, width adapters and generator base classes

Exports:
- BitWidth, WidthAdapter: derive every word width from one primitive
- BitSource, EntropySource: structural contracts
- RandomGenerator, RandomGenerator1: abstract generators
- WordStateGenerator, JumpableGenerator: word-array state and jump-ahead support
"""

from .bit_source import BitSource, EntropySource
from .widths import BitWidth, WidthAdapter
from .generator import (
    JumpableGenerator,
    RandomGenerator,
    RandomGenerator1,
    WordStateGenerator,
)

__all__ = [
    'BitSource',
    'BitWidth',
    'EntropySource',
    'JumpableGenerator',
    'RandomGenerator',
    'RandomGenerator1',
    'WidthAdapter',
    'WordStateGenerator',
]
