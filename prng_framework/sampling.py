#!/usr/bin/env python3
"""
Distribution Sampler - every derived distribution from one bit source.

The sampler only ever calls the bit-source contract
(``generate_uniform_long``, ``generate_long_bits``,
``generate_integer_bits``, ``generate_boolean``), so it works unchanged for
any generator or any object with those methods.

All parameters are validated before the first draw; an invalid call
raises InvalidArgumentError and leaves the source untouched.

Version: 1.0.0
"""

import math
from typing import Any

import numpy as np

from prng_framework.api.bit_source import BitSource
from prng_framework.errors import require

# ============================================================================
# CONSTANTS
# ============================================================================

MAX_LONG = (1 << 63) - 1
_SIGN_FREE_RANGE = 1 << 63
_UNSIGNED_RANGE = 1 << 64
_MASK64 = _UNSIGNED_RANGE - 1

_DOUBLE_MANTISSA_BITS = 53
_FLOAT_MANTISSA_BITS = 24
_DOUBLE_UNIT = 1.0 / (1 << _DOUBLE_MANTISSA_BITS)
_FLOAT_UNIT = 1.0 / (1 << _FLOAT_MANTISSA_BITS)
_FLOAT_MAX = float(np.finfo(np.float32).max)

# Largest exponent folded into the Poisson running product at once
_POISSON_EXPONENT_CHUNK = 500.0


def _require_finite(**values: Any) -> None:
    for name, value in values.items():
        require(math.isfinite(value), f"{name} must be finite, got {value}")


def _require_positive(**values: Any) -> None:
    _require_finite(**values)
    for name, value in values.items():
        require(value > 0, f"{name} must be strictly positive, got {value}")


def _require_ordered(minimum: Any, maximum: Any) -> None:
    require(minimum < maximum, f"min must be below max, got min={minimum}, max={maximum}")


def _require_single_precision_range(minimum: float, maximum: float) -> None:
    require(abs(minimum) <= _FLOAT_MAX and abs(maximum) <= _FLOAT_MAX,
            f"bounds must lie within the single-precision range, got [{minimum}, {maximum})")
    lowest = np.float32(minimum)
    if float(lowest) < minimum:
        lowest = np.nextafter(lowest, np.float32(np.inf))
    require(float(lowest) < maximum,
            f"no single-precision value lies in [{minimum}, {maximum})")


def _saturate_long(value: float) -> int:
    """Truncate toward zero, clamped to the signed 64-bit range."""
    if math.isnan(value):
        return 0
    if value >= _SIGN_FREE_RANGE:
        return MAX_LONG
    if value <= -_SIGN_FREE_RANGE:
        return -_SIGN_FREE_RANGE
    return int(value)


class Sampler:
    """
    Distribution layer over a BitSource.

    Example:
        >>> sampler = Xoshiro256PlusGenerator(seed=bytes(range(32))).sampler
        >>> sampler.uniform_long_between(0, 10)
        >>> sampler.gamma_double(2.5, 1.0)
    """

    def __init__(self, source: BitSource):
        self._source = source

    @property
    def source(self) -> BitSource:
        return self._source

    # ========================================================================
    # UNIFORM INTEGERS
    # ========================================================================

    def uniform_long(self, bound: int) -> int:
        """Uniform integer in [0, bound) for 0 < bound < 2^63."""
        require(0 < bound <= MAX_LONG, f"bound must be in (0, 2^63), got {bound}")
        return self._below(bound, _SIGN_FREE_RANGE)

    def uniform_unsigned_long(self, bound: int) -> int:
        """Uniform integer in [0, bound) for 0 < bound <= 2^64."""
        require(0 < bound <= _UNSIGNED_RANGE, f"bound must be in (0, 2^64], got {bound}")
        return self._below(bound, _UNSIGNED_RANGE)

    def uniform_long_between(self, minimum: int, maximum: int) -> int:
        """Uniform integer in [minimum, maximum)."""
        _require_ordered(minimum, maximum)
        span = maximum - minimum
        require(span <= _UNSIGNED_RANGE, f"range {span} exceeds 2^64")
        if span <= MAX_LONG:
            return minimum + self._below(span, _SIGN_FREE_RANGE)
        return minimum + self._below(span, _UNSIGNED_RANGE)

    def _below(self, bound: int, value_range: int) -> int:
        # Accept draws below the largest multiple of bound that fits in value_range.
        limit = value_range - (value_range % bound)
        mask = value_range - 1
        while True:
            value = self._source.generate_uniform_long() & mask
            if value < limit:
                return value % bound

    # ========================================================================
    # UNIFORM REALS
    # ========================================================================

    def uniform_double(self) -> float:
        """Uniform double in [0, 1) with 53 random mantissa bits."""
        return self._source.generate_long_bits(_DOUBLE_MANTISSA_BITS) * _DOUBLE_UNIT

    def uniform_double_below(self, maximum: float) -> float:
        _require_positive(maximum=maximum)
        return self.uniform_double_between(0.0, maximum)

    def uniform_double_between(self, minimum: float, maximum: float) -> float:
        """Uniform double in [minimum, maximum)."""
        _require_finite(minimum=minimum, maximum=maximum)
        _require_ordered(minimum, maximum)
        while True:
            value = minimum + self.uniform_double() * (maximum - minimum)
            if value < maximum:
                return value

    def uniform_float(self) -> float:
        """Uniform single-precision value in [0, 1) with 24 random bits."""
        return self._source.generate_integer_bits(_FLOAT_MANTISSA_BITS) * _FLOAT_UNIT

    def uniform_float_between(self, minimum: float, maximum: float) -> float:
        """Single-precision value in [minimum, maximum); rounded results outside are redrawn."""
        _require_finite(minimum=minimum, maximum=maximum)
        _require_ordered(minimum, maximum)
        _require_single_precision_range(minimum, maximum)
        while True:
            value = float(np.float32(minimum + self.uniform_float() * (maximum - minimum)))
            if minimum <= value < maximum:
                return value

    def _open_unit(self) -> float:
        """Uniform double in (0, 1)."""
        while True:
            value = self.uniform_double()
            if value > 0.0:
                return value

    def boolean(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        _require_finite(probability=probability)
        require(0.0 <= probability <= 1.0,
                f"probability must be in [0, 1], got {probability}")
        return self.uniform_double() < probability

    # ========================================================================
    # BATES
    # ========================================================================

    def bates_double(self, minimum: float, maximum: float, count: int) -> float:
        """Mean of ``count`` uniform draws in [minimum, maximum)."""
        _require_finite(minimum=minimum, maximum=maximum)
        _require_ordered(minimum, maximum)
        require(count >= 1, f"count must be at least 1, got {count}")
        total = 0.0
        for _ in range(count):
            total += self.uniform_double_between(minimum, maximum)
        return total / count

    def bates_float(self, minimum: float, maximum: float, count: int) -> float:
        """Mean of ``count`` single-precision uniform draws."""
        _require_finite(minimum=minimum, maximum=maximum)
        _require_ordered(minimum, maximum)
        _require_single_precision_range(minimum, maximum)
        require(count >= 1, f"count must be at least 1, got {count}")
        total = 0.0
        for _ in range(count):
            total += self.uniform_float_between(minimum, maximum)
        return float(np.float32(total / count))

    def bates_long(self, minimum: int, maximum: int, count: int) -> int:
        """
        Integer Bates sample in [minimum, maximum).

        One extra draw in [0, count) is added before the integer division
        so the rounding is spread evenly instead of always truncating.
        """
        _require_ordered(minimum, maximum)
        require(count >= 1, f"count must be at least 1, got {count}")
        span = maximum - minimum
        total = 0
        for _ in range(count):
            total += self.uniform_long_between(0, span)
        total += self._below(count, _SIGN_FREE_RANGE)
        return minimum + total // count

    # ========================================================================
    # NORMAL FAMILY
    # ========================================================================

    def normal_double(self, mean: float = 0.0, deviation: float = 1.0) -> float:
        """Marsaglia polar method; the second variate of each pair is discarded."""
        _require_finite(mean=mean)
        _require_positive(deviation=deviation)
        while True:
            x = self.uniform_double_between(-1.0, 1.0)
            y = self.uniform_double_between(-1.0, 1.0)
            s = x * x + y * y
            if 0.0 < s < 1.0:
                return mean + deviation * x * math.sqrt(-2.0 * math.log(s) / s)

    def normal_long(self, mean: float = 0.0, deviation: float = 1.0) -> int:
        """Normal sample rounded half-up to an integer."""
        value = self.normal_double(mean, deviation) + 0.5
        if math.isfinite(value):
            value = math.floor(value)
        return _saturate_long(value)

    def lognormal_double(self, mean: float = 0.0, deviation: float = 1.0) -> float:
        """exp of a normal sample with the given log-space mean and deviation; inf on overflow."""
        exponent = self.normal_double(mean, deviation)
        try:
            return math.exp(exponent)
        except OverflowError:
            return math.inf

    def lognormal_long(self, mean: float = 0.0, deviation: float = 1.0) -> int:
        return _saturate_long(self.lognormal_double(mean, deviation))

    # ========================================================================
    # TRIANGULAR
    # ========================================================================

    def triangular_double(self, minimum: float, maximum: float, mode: float) -> float:
        _require_finite(minimum=minimum, maximum=maximum, mode=mode)
        _require_ordered(minimum, maximum)
        require(minimum <= mode <= maximum,
                f"mode must lie in [min, max], got mode={mode}")
        u = self.uniform_double_between(minimum, maximum)
        if u < mode:
            return minimum + math.sqrt((u - minimum) * (mode - minimum))
        return maximum - math.sqrt((maximum - u) * (maximum - mode))

    def triangular_float(self, minimum: float, maximum: float, mode: float) -> float:
        """Single-precision triangular sample; rounded results outside [min, max) are redrawn."""
        _require_finite(minimum=minimum, maximum=maximum, mode=mode)
        _require_ordered(minimum, maximum)
        _require_single_precision_range(minimum, maximum)
        while True:
            value = float(np.float32(self.triangular_double(minimum, maximum, mode)))
            if minimum <= value < maximum:
                return value

    def triangular_long(self, minimum: int, maximum: int, mode: float) -> int:
        """Triangular sample floored into [minimum, maximum)."""
        return math.floor(self.triangular_double(minimum, maximum, mode))

    # ========================================================================
    # HEAVY TAILS & WAITING TIMES
    # ========================================================================

    def pareto_double(self, shape: float, scale: float) -> float:
        """Inverse CDF: scale / u^(1/shape)."""
        _require_positive(shape=shape, scale=scale)
        denominator = self._open_unit() ** (1.0 / shape)
        if denominator == 0.0:
            return math.inf
        return scale / denominator

    def weibull_double(self, shape: float, scale: float) -> float:
        """Inverse CDF: scale * (-ln u)^(1/shape)."""
        _require_positive(shape=shape, scale=scale)
        try:
            return scale * (-math.log(self._open_unit())) ** (1.0 / shape)
        except OverflowError:
            return math.inf

    def exponential_double(self, scale: float = 1.0) -> float:
        """Non-negative exponential sample with mean ``scale``."""
        _require_positive(scale=scale)
        return -math.log(self._open_unit()) * scale

    def exponential_long(self, scale: float = 1.0) -> int:
        return _saturate_long(self.exponential_double(scale))

    # ========================================================================
    # GAMMA / BETA
    # ========================================================================

    def gamma_double(self, shape: float, scale: float = 1.0) -> float:
        """
        Gamma(shape, scale).

        shape > 1:  Marsaglia-Tsang squeeze on a normal variate
        shape == 1: exponential
        shape < 1:  Gamma(shape + 1) * u^(1/shape)
        """
        _require_positive(shape=shape, scale=scale)
        if shape > 1.0:
            return self._marsaglia_tsang(shape) * scale
        if shape == 1.0:
            return self.exponential_double(scale)
        return self.gamma_double(shape + 1.0, scale) * self._open_unit() ** (1.0 / shape)

    def _marsaglia_tsang(self, shape: float) -> float:
        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            n = self.normal_double(0.0, 1.0)
            v = (1.0 + c * n) ** 3
            u = self._open_unit()
            if v > 0.0 and math.log(u) < 0.5 * n * n + d - d * v + d * math.log(v):
                return d * v

    def gamma_long(self, shape: float, scale: float = 1.0) -> int:
        return _saturate_long(self.gamma_double(shape, scale))

    def beta_double(self, alpha: float, beta: float) -> float:
        """Beta(alpha, beta) as X / (X + Y) of two unit-scale gammas."""
        _require_positive(alpha=alpha, beta=beta)
        x = self.gamma_double(alpha, 1.0)
        if x == 0.0:
            return 0.0
        return x / (x + self.gamma_double(beta, 1.0))

    # ========================================================================
    # POISSON
    # ========================================================================

    def poisson_long(self, rate: float) -> int:
        """
        Poisson(rate) by multiplying uniforms until the product drops
        below e^-rate.

        The product is rescaled by e^rate in chunks of at most 500 so
        large rates never underflow.
        """
        _require_positive(rate=rate)
        remaining = float(rate)
        product = 1.0
        count = -1
        while True:
            count += 1
            product *= self._open_unit()
            while product <= 1.0 and remaining > 0.0:
                chunk = min(remaining, _POISSON_EXPONENT_CHUNK)
                product *= math.exp(chunk)
                remaining -= chunk
            if product <= 1.0:
                return count
