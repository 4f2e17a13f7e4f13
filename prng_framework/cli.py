#!/usr/bin/env python3
"""
PRNG Framework CLI - list generators, draw samples, run quick checks.

Usage:
    prng-framework list
    prng-framework sample --generator xoshiro256plus --seed 0011...ff --count 5
    prng-framework sample --distribution gamma_double --param shape=2.5 --param scale=1
    prng-framework uniformity --generator mt19937 --bound 10 --samples 100000
    prng-framework moments --distribution normal_double --param mean=5 --param deviation=2

All output is JSON on stdout.

Version: 1.0.0
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from prng_framework.config import FrameworkConfig, load_config
from prng_framework.diagnostics import (
    SAMPLEABLE_DISTRIBUTIONS,
    chi_square_uniformity,
    sample_distribution,
    sample_moments,
)
from prng_framework.errors import InvalidArgumentError, PRNGError
from prng_framework.generators import (
    GENERATOR_REGISTRY,
    create_generator,
    get_generator_info,
)
from prng_framework.api.generator import RandomGenerator

logger = logging.getLogger(__name__)


def _parse_params(pairs: List[str]) -> Dict[str, Any]:
    """key=value pairs; values parsed as int, then float, else kept as text."""
    params: Dict[str, Any] = {}
    for pair in pairs:
        if '=' not in pair:
            raise InvalidArgumentError(f"Parameter must look like key=value, got {pair!r}")
        key, raw = pair.split('=', 1)
        value: Any = raw
        for convert in (int, float):
            try:
                value = convert(raw)
                break
            except ValueError:
                continue
        params[key.strip()] = value
    return params


def _build_generator(args: argparse.Namespace, config: FrameworkConfig) -> RandomGenerator:
    name = args.generator or config.default_generator
    seed = None
    if args.seed:
        try:
            seed = bytes.fromhex(args.seed)
        except ValueError as e:
            raise InvalidArgumentError(f"Seed must be hexadecimal: {e}") from e
    generator = create_generator(name, seed=seed)
    logger.info("Using %s (%s)", name, get_generator_info(name)['description'])
    return generator


# ============================================================================
# COMMANDS
# ============================================================================

def _setting(value: Any, default: Any) -> Any:
    """Command-line value, or the configured default when the flag was omitted."""
    return default if value is None else value


def cmd_list(args: argparse.Namespace, config: FrameworkConfig) -> Dict[str, Any]:
    return {
        name: {key: value for key, value in entry.items() if key != 'class'}
        for name, entry in GENERATOR_REGISTRY.items()
    }


def cmd_sample(args: argparse.Namespace, config: FrameworkConfig) -> Dict[str, Any]:
    generator = _build_generator(args, config)
    count = _setting(args.count, config.sample_count)
    values = sample_distribution(generator.sampler, args.distribution, count,
                                 **_parse_params(args.param))
    return {
        'generator': args.generator or config.default_generator,
        'distribution': args.distribution,
        'values': values.tolist(),
    }


def cmd_uniformity(args: argparse.Namespace, config: FrameworkConfig) -> Dict[str, Any]:
    generator = _build_generator(args, config)
    report = chi_square_uniformity(
        generator.sampler,
        bound=_setting(args.bound, config.histogram_bins),
        samples=_setting(args.samples, config.sample_count),
        alpha=_setting(args.alpha, config.chi_square_alpha),
    )
    return report.to_dict()


def cmd_moments(args: argparse.Namespace, config: FrameworkConfig) -> Dict[str, Any]:
    generator = _build_generator(args, config)
    values = sample_distribution(generator.sampler, args.distribution,
                                 _setting(args.count, config.sample_count),
                                 **_parse_params(args.param))
    return sample_moments(values).to_dict()


COMMANDS = {
    'list': cmd_list,
    'sample': cmd_sample,
    'uniformity': cmd_uniformity,
    'moments': cmd_moments,
}


# ============================================================================
# ENTRY POINT
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PRNG Framework v1.0.0 - generators, distributions and uniformity checks"
    )
    parser.add_argument("--config", type=str, help="JSON config file")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List registered generators")

    def add_generator_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--generator", type=str, help="Registry name")
        sub.add_argument("--seed", type=str, help="Seed bytes as hex (default: clock entropy)")

    def add_distribution_args(sub: argparse.ArgumentParser, default: str) -> None:
        sub.add_argument("--distribution", choices=SAMPLEABLE_DISTRIBUTIONS, default=default)
        sub.add_argument("--param", action="append", default=[],
                         help="Distribution parameter key=value (repeatable)")
        sub.add_argument("--count", type=int, help="Number of draws")

    sample = subparsers.add_parser("sample", help="Draw values from a distribution")
    add_generator_args(sample)
    add_distribution_args(sample, "uniform_double")

    uniformity = subparsers.add_parser("uniformity", help="Chi-square test of bounded integers")
    add_generator_args(uniformity)
    uniformity.add_argument("--bound", type=int, help="Integers are drawn in [0, bound)")
    uniformity.add_argument("--samples", type=int, help="Number of draws")
    uniformity.add_argument("--alpha", type=float, help="Significance level")

    moments = subparsers.add_parser("moments", help="Sample moments of a distribution")
    add_generator_args(moments)
    add_distribution_args(moments, "normal_double")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, (args.log_level or config.log_level).upper(), logging.INFO),
        format=config.log_format,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        result = COMMANDS[args.command](args, config)
    except PRNGError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
