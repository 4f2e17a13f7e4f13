#!/usr/bin/env python3
"""
Diagnostics - quick statistical checks on generator output.

chi_square_uniformity() buckets bounded integer draws and runs scipy's
chi-square goodness-of-fit test; sample_moments() summarises any sample
with numpy/scipy. Both return pydantic reports that serialise straight
to JSON for the CLI.

Version: 1.0.0
"""

import inspect
import logging
from typing import Any, Dict, List, Sequence

import numpy as np
from pydantic import BaseModel, Field
from scipy import stats

from prng_framework.errors import InvalidArgumentError, require
from prng_framework.sampling import Sampler

logger = logging.getLogger(__name__)

# Sampler methods reachable by name from sample_distribution()
SAMPLEABLE_DISTRIBUTIONS = (
    'uniform_double',
    'uniform_double_between',
    'uniform_float',
    'uniform_long_between',
    'bates_double',
    'bates_long',
    'normal_double',
    'normal_long',
    'lognormal_double',
    'triangular_double',
    'triangular_long',
    'pareto_double',
    'weibull_double',
    'exponential_double',
    'gamma_double',
    'beta_double',
    'poisson_long',
)


class UniformityReport(BaseModel):
    """Chi-square goodness-of-fit result for bounded integer draws."""

    bound: int
    samples: int
    statistic: float
    p_value: float
    alpha: float
    passed: bool
    counts: List[int] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class MomentReport(BaseModel):
    """First four sample moments."""

    count: int
    mean: float
    variance: float
    skewness: float
    excess_kurtosis: float
    minimum: float
    maximum: float

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def chi_square_uniformity(sampler: Sampler, bound: int, samples: int,
                          alpha: float = 0.01) -> UniformityReport:
    """Draw ``samples`` values in [0, bound) and test them against the uniform law."""
    require(bound >= 2, f"bound must be at least 2, got {bound}")
    require(samples >= bound, f"need at least {bound} samples, got {samples}")
    require(0.0 < alpha < 1.0, f"alpha must be in (0, 1), got {alpha}")

    draws = np.fromiter((sampler.uniform_long(bound) for _ in range(samples)),
                        dtype=np.int64, count=samples)
    counts = np.bincount(draws, minlength=bound)
    statistic, p_value = stats.chisquare(counts)

    report = UniformityReport(
        bound=bound,
        samples=samples,
        statistic=float(statistic),
        p_value=float(p_value),
        alpha=alpha,
        passed=bool(p_value >= alpha),
        counts=[int(c) for c in counts],
    )
    logger.info("Chi-square over %d buckets: statistic=%.3f p=%.4f",
                bound, report.statistic, report.p_value)
    return report


def sample_moments(values: Sequence[float]) -> MomentReport:
    data = np.asarray(values, dtype=np.float64)
    require(data.size >= 2, "need at least two values")
    return MomentReport(
        count=int(data.size),
        mean=float(np.mean(data)),
        variance=float(np.var(data, ddof=1)),
        skewness=float(stats.skew(data)),
        excess_kurtosis=float(stats.kurtosis(data)),
        minimum=float(np.min(data)),
        maximum=float(np.max(data)),
    )


def sample_distribution(sampler: Sampler, name: str, count: int,
                        **params: Any) -> np.ndarray:
    """``count`` draws from the named Sampler method as a numpy array."""
    require(name in SAMPLEABLE_DISTRIBUTIONS,
            f"Unknown distribution: {name}. Available: {list(SAMPLEABLE_DISTRIBUTIONS)}")
    require(count >= 0, f"count must be non-negative, got {count}")
    method = getattr(sampler, name)
    try:
        inspect.signature(method).bind(**params)
    except TypeError as e:
        raise InvalidArgumentError(f"Bad parameters for {name}: {e}") from e
    values = [method(**params) for _ in range(count)]
    if '_long' in name:
        return np.array(values, dtype=np.int64)
    return np.array(values, dtype=np.float64)
