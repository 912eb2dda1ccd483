"""Load and merge configuration from .secretsweep.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from secretsweep.config.schema import (
    EntropyConfig,
    OutputConfig,
    QuarantineConfig,
    RulesConfig,
    ScanConfig,
    SweepConfig,
)

CONFIG_FILENAME = ".secretsweep.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _split_list(val: str) -> list[str]:
    return [item.strip() for item in val.split(",") if item.strip()]


def _merge_env_overrides(cfg: SweepConfig) -> None:
    """Apply SECRETSWEEP_* environment variable overrides."""
    if val := os.environ.get("SECRETSWEEP_WORKERS"):
        try:
            cfg.scan.workers = int(val)
        except ValueError as exc:
            raise ConfigError(f"SECRETSWEEP_WORKERS must be an integer, got {val!r}") from exc
    if val := os.environ.get("SECRETSWEEP_FORMAT"):
        if val in ("markdown", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("SECRETSWEEP_DISABLE_RULES"):
        cfg.rules.disable.extend(_split_list(val))
    if val := os.environ.get("SECRETSWEEP_EXTRA_EXTENSIONS"):
        cfg.scan.extra_extensions.extend(_split_list(val))
    if val := os.environ.get("SECRETSWEEP_MOVE_TO"):
        cfg.quarantine.target_dir = val


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _type_matches(value: Any, default: Any) -> bool:
    """Check *value* against the type of the field's *default*."""
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    if isinstance(default, float):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if isinstance(default, list):
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    if default is None:
        return value is None or isinstance(value, str)
    return isinstance(value, str)


def _check_types(cfg: SweepConfig) -> None:
    for section in dataclasses.fields(cfg):
        current = getattr(cfg, section.name)
        if not dataclasses.is_dataclass(current):
            continue
        defaults = type(current)()
        for f in dataclasses.fields(current):
            value = getattr(current, f.name)
            if not _type_matches(value, getattr(defaults, f.name)):
                raise ConfigError(
                    f"{section.name}.{f.name} has the wrong type: {value!r}"
                )


def validate_config(cfg: SweepConfig) -> None:
    """Reject values the scan pipeline cannot run with."""
    _check_types(cfg)
    if cfg.scan.workers < 1:
        raise ConfigError("scan.workers must be at least 1")
    if cfg.scan.queue_size < 1:
        raise ConfigError("scan.queue_size must be at least 1")
    if cfg.scan.max_file_size_mb < 1:
        raise ConfigError("scan.max_file_size_mb must be at least 1")
    ent = cfg.entropy
    if ent.min_length < 1 or ent.max_length < ent.min_length:
        raise ConfigError(
            f"entropy window {ent.min_length}..{ent.max_length} is not a valid range"
        )
    if cfg.output.format not in ("markdown", "json"):
        raise ConfigError(f"Invalid output format: {cfg.output.format}")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> SweepConfig:
    """Load, validate, and return a SweepConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = SweepConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = SweepConfig(
            version=raw.get("version", "1.0"),
            scan=_build_section(raw, ScanConfig, "scan"),
            entropy=_build_section(raw, EntropyConfig, "entropy"),
            rules=_build_section(raw, RulesConfig, "rules"),
            output=_build_section(raw, OutputConfig, "output"),
            quarantine=_build_section(raw, QuarantineConfig, "quarantine"),
        )
        _check_types(cfg)

    _merge_env_overrides(cfg)
    validate_config(cfg)
    return cfg
