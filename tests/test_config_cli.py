#!/usr/bin/env python3
"""
Config, diagnostics and CLI tests.

Tests:
1. FrameworkConfig defaults and validation
2. load_config from a path, from the environment, and its error cases
3. Diagnostics reports
4. CLI subcommands and exit codes

Version: 1.0.0
"""

import json

import pytest
import sys
from pathlib import Path
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from prng_framework.cli import _parse_params, main
from prng_framework.config import CONFIG_ENV_VAR, FrameworkConfig, load_config
from prng_framework.diagnostics import (
    chi_square_uniformity,
    sample_distribution,
    sample_moments,
)
from prng_framework.errors import InvalidArgumentError
from prng_framework.generators import Xoshiro256PlusGenerator

SEED_HEX = '00112233445566778899aabbccddeeff' * 2


def write_config(tmp_path, data) -> str:
    path = tmp_path / "prng_config.json"
    path.write_text(json.dumps(data))
    return str(path)


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


# ============================================================================
# CONFIG
# ============================================================================

class TestFrameworkConfig:
    """pydantic model validation."""

    def test_defaults(self):
        config = FrameworkConfig()
        assert config.default_generator == 'xoshiro256plus'
        assert config.sample_count == 10000
        assert config.chi_square_alpha == 0.01
        assert config.log_level == 'INFO'

    def test_generator_name_normalised(self):
        assert FrameworkConfig(default_generator=' MT19937 ').default_generator == 'mt19937'

    def test_unknown_generator_rejected(self):
        with pytest.raises(ValidationError):
            FrameworkConfig(default_generator='rot13')

    def test_log_level(self):
        assert FrameworkConfig(log_level='debug').log_level == 'DEBUG'
        with pytest.raises(ValidationError):
            FrameworkConfig(log_level='LOUD')

    @pytest.mark.parametrize("field,value", [
        ('sample_count', 0),
        ('chi_square_alpha', 1.0),
        ('histogram_bins', 1),
    ])
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            FrameworkConfig(**{field: value})

    def test_to_dict(self):
        data = FrameworkConfig().to_dict()
        assert set(data) == {'default_generator', 'sample_count', 'chi_square_alpha',
                             'histogram_bins', 'log_level', 'log_format'}


class TestLoadConfig:
    """JSON loading."""

    def test_no_source_gives_defaults(self):
        assert load_config() == FrameworkConfig()

    def test_explicit_path(self, tmp_path):
        config = load_config(write_config(tmp_path, {'sample_count': 50, 'histogram_bins': 4}))
        assert config.sample_count == 50
        assert config.histogram_bins == 4
        assert config.default_generator == 'xoshiro256plus'

    def test_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, write_config(tmp_path, {'default_generator': 'splitmix64'}))
        assert load_config().default_generator == 'splitmix64'

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            load_config(str(tmp_path / "absent.json"))

    def test_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(InvalidArgumentError):
            load_config(str(path))

    def test_invalid_values(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            load_config(write_config(tmp_path, {'sample_count': -3}))


# ============================================================================
# DIAGNOSTICS
# ============================================================================

class TestDiagnostics:
    """Reports built on numpy/scipy."""

    def test_uniformity_report(self):
        sampler = Xoshiro256PlusGenerator(seed=bytes.fromhex(SEED_HEX)).sampler
        report = chi_square_uniformity(sampler, bound=6, samples=6000, alpha=1e-6)
        assert report.bound == 6
        assert len(report.counts) == 6
        assert sum(report.counts) == 6000
        assert 0.0 <= report.p_value <= 1.0
        assert report.passed

    def test_uniformity_arguments(self):
        sampler = Xoshiro256PlusGenerator(seed=bytes.fromhex(SEED_HEX)).sampler
        with pytest.raises(InvalidArgumentError):
            chi_square_uniformity(sampler, bound=1, samples=100)
        with pytest.raises(InvalidArgumentError):
            chi_square_uniformity(sampler, bound=10, samples=5)

    def test_moments(self):
        report = sample_moments([1.0, 2.0, 3.0, 4.0])
        assert report.count == 4
        assert report.mean == 2.5
        assert report.variance == pytest.approx(5.0 / 3.0)
        assert report.skewness == pytest.approx(0.0)
        assert report.minimum == 1.0
        assert report.maximum == 4.0

    def test_moments_need_two_values(self):
        with pytest.raises(InvalidArgumentError):
            sample_moments([1.0])

    def test_sample_distribution_dtype(self):
        sampler = Xoshiro256PlusGenerator(seed=bytes.fromhex(SEED_HEX)).sampler
        assert sample_distribution(sampler, 'poisson_long', 5, rate=3.0).dtype.kind == 'i'
        assert sample_distribution(sampler, 'gamma_double', 5, shape=2.0).dtype.kind == 'f'

    @pytest.mark.parametrize("params", [{'shap': 2.0}, {}])
    def test_bad_parameter_names(self, params):
        sampler = Xoshiro256PlusGenerator(seed=bytes.fromhex(SEED_HEX)).sampler
        with pytest.raises(InvalidArgumentError):
            sample_distribution(sampler, 'gamma_double', 5, **params)

    def test_unknown_distribution(self):
        sampler = Xoshiro256PlusGenerator(seed=bytes.fromhex(SEED_HEX)).sampler
        with pytest.raises(InvalidArgumentError):
            sample_distribution(sampler, 'cauchy_double', 5)


# ============================================================================
# CLI
# ============================================================================

class TestParseParams:
    """key=value parsing."""

    def test_types(self):
        assert _parse_params(['a=1', 'b=2.5', 'c=x']) == {'a': 1, 'b': 2.5, 'c': 'x'}

    def test_missing_equals(self):
        with pytest.raises(InvalidArgumentError):
            _parse_params(['shape'])


class TestCli:
    """Subcommands print JSON and return exit codes."""

    def run(self, capsys, argv):
        code = main(argv)
        return code, capsys.readouterr().out

    def test_list(self, capsys):
        code, out = self.run(capsys, ['list'])
        assert code == 0
        listing = json.loads(out)
        assert len(listing) == 34
        assert listing['mt19937']['natural_width'] == 32
        assert 'class' not in listing['mt19937']

    def test_sample_is_reproducible(self, capsys):
        argv = ['sample', '--generator', 'lcg64', '--seed', '0000000000000001',
                '--distribution', 'uniform_long_between',
                '--param', 'minimum=0', '--param', 'maximum=10', '--count', '5']
        code, out = self.run(capsys, argv)
        assert code == 0
        first = json.loads(out)
        assert first['generator'] == 'lcg64'
        assert len(first['values']) == 5
        assert all(0 <= v < 10 for v in first['values'])

        _, out = self.run(capsys, argv)
        assert json.loads(out) == first

    def test_uniformity(self, capsys):
        code, out = self.run(capsys, ['uniformity', '--seed', SEED_HEX,
                                      '--bound', '6', '--samples', '600'])
        assert code == 0
        report = json.loads(out)
        assert report['bound'] == 6
        assert report['samples'] == 600

    def test_moments(self, capsys):
        code, out = self.run(capsys, ['moments', '--seed', SEED_HEX, '--count', '500',
                                      '--param', 'mean=5', '--param', 'deviation=2'])
        assert code == 0
        assert json.loads(out)['count'] == 500

    def test_config_default_generator(self, capsys, tmp_path):
        path = write_config(tmp_path, {'default_generator': 'splitmix64', 'sample_count': 3})
        code, out = self.run(capsys, ['--config', path, 'sample', '--seed', '00' * 8])
        assert code == 0
        result = json.loads(out)
        assert result['generator'] == 'splitmix64'
        assert len(result['values']) == 3

    @pytest.mark.parametrize("argv", [
        ['sample', '--generator', 'rot13'],
        ['sample', '--seed', 'xyz'],
        ['sample', '--seed', '00', '--generator', 'lcg64'],
        ['moments', '--seed', SEED_HEX, '--param', 'deviation=-1'],
        ['sample', '--seed', SEED_HEX, '--param', 'broken'],
        ['sample', '--seed', SEED_HEX, '--distribution', 'gamma_double', '--param', 'shap=2'],
    ])
    def test_operation_errors_exit_1(self, capsys, argv):
        code, out = self.run(capsys, argv)
        assert code == 1
        assert out == ''

    def test_explicit_zero_count(self, capsys, tmp_path):
        path = write_config(tmp_path, {'sample_count': 3})
        code, out = self.run(capsys, ['--config', path, 'sample', '--seed', SEED_HEX, '--count', '0'])
        assert code == 0
        assert json.loads(out)['values'] == []

    def test_bad_config_exits_2(self, capsys, tmp_path):
        code, _ = self.run(capsys, ['--config', str(tmp_path / 'missing.json'), 'list'])
        assert code == 2
