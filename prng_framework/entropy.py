"""
Default entropy for generators constructed without a seed.

ClockEntropySource is an ordinary SplitMix64 generator whose seed comes
from the high-resolution clocks. A fresh instance is built per use;
there is no process-wide default generator.
"""

import logging
import time

from prng_framework.generators.platform import SplitMix64Generator
from prng_framework.utils.word_packing import long_to_bytes

logger = logging.getLogger(__name__)

_MASK64 = 0xFFFFFFFFFFFFFFFF

# Odd LCG multiplier used to spread clock readings across all 64 bits
CLOCK_MIXING_MULTIPLIER = 6364136223846793005


def clock_seed() -> int:
    """64-bit value mixed from the monotonic and wall clocks in nanoseconds."""
    reading = time.perf_counter_ns() ^ (time.time_ns() << 1)
    return (reading * CLOCK_MIXING_MULTIPLIER + 1) & _MASK64


class ClockEntropySource(SplitMix64Generator):
    """Full bit-source generator seeded from the clock."""

    def __init__(self):
        super().__init__(seed=long_to_bytes(clock_seed()))
        logger.debug("Clock entropy source created")
