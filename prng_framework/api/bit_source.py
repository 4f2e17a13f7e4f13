"""
Structural contracts between generators, samplers and entropy sources.
"""

from typing import Protocol


class BitSource(Protocol):
    """Anything that yields uniformly distributed unsigned words."""

    def generate_uniform_long(self) -> int:
        ...

    def generate_integer_bits(self, bits: int) -> int:
        ...

    def generate_long_bits(self, bits: int) -> int:
        ...

    def generate_boolean(self) -> bool:
        ...


class EntropySource(Protocol):
    """Supplies seed bytes to generators constructed without an explicit seed."""

    def generate_bytes(self, count: int) -> bytes:
        ...
