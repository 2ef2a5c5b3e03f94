"""Configuration management for polyvcs."""

from polyvcs.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
)
from polyvcs.config.models import PolyVcsConfig

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "PolyVcsConfig",
]
