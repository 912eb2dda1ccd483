"""Configuration loading, schema, and defaults."""

from secretsweep.config.loader import ConfigError, load_config
from secretsweep.config.schema import Severity, SweepConfig, severity_at_or_above

__all__ = [
    "ConfigError",
    "Severity",
    "SweepConfig",
    "load_config",
    "severity_at_or_above",
]
