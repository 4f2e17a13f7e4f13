#!/usr/bin/env python3
"""
Framework Config - Settings for the CLI and diagnostics.

Loaded from a JSON file (explicit path or the PRNG_FRAMEWORK_CONFIG
environment variable) and validated with pydantic. Missing keys take
their defaults; a missing file means all defaults.

Version: 1.0.0
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from prng_framework.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PRNG_FRAMEWORK_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FrameworkConfig(BaseModel):
    """Validated framework settings."""

    default_generator: str = Field(
        default="xoshiro256plus",
        description="Registry name used when a command does not name a generator"
    )
    sample_count: int = Field(
        default=10000, ge=1,
        description="Draws per sampling or diagnostic run"
    )
    chi_square_alpha: float = Field(
        default=0.01, gt=0.0, lt=1.0,
        description="Significance level for the uniformity test"
    )
    histogram_bins: int = Field(
        default=10, ge=2,
        description="Buckets for the uniformity test"
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(message)s",
        description="logging.basicConfig format string"
    )

    @field_validator('default_generator')
    @classmethod
    def validate_generator(cls, v: str) -> str:
        """Generator must exist in the registry."""
        from prng_framework.generators import list_available_generators
        v = v.strip().lower()
        if v not in list_available_generators():
            raise ValueError(f"Unknown generator: {v}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {v}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def load_config(path: Optional[str] = None) -> FrameworkConfig:
    """
    Load settings from ``path``, else from $PRNG_FRAMEWORK_CONFIG, else defaults.

    Raises:
        InvalidArgumentError: If the file named explicitly is missing, is not
            JSON, or fails validation.
    """
    source = path or os.environ.get(CONFIG_ENV_VAR)
    if not source:
        return FrameworkConfig()

    config_path = Path(source)
    if not config_path.exists():
        raise InvalidArgumentError(f"Config not found: {source}")

    try:
        with open(config_path) as f:
            data = json.load(f)
        config = FrameworkConfig.model_validate(data)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Config {source} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise InvalidArgumentError(f"Config {source} failed validation: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
