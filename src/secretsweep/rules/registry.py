"""Rule registry — loads built-in and custom rules, applies config filters.

The registry is populated and filtered once, before any worker starts.
Workers only call :meth:`RuleRegistry.enabled_rules`, which returns an
immutable tuple.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import yaml

from secretsweep.config.loader import ConfigError
from secretsweep.config.schema import SEVERITIES, SweepConfig
from secretsweep.rules.models import Rule

CUSTOM_RULES_DIRNAME = ".secretsweep-rules"


class RuleRegistry:
    """Central store for all detection rules."""

    def __init__(self) -> None:
        self._rules: Dict[str, Rule] = {}
        self._disabled: Set[str] = set()
        self._enabled_cache: Optional[Tuple[Rule, ...]] = None

    # ---- registration ----

    def register(self, rule: Rule) -> None:
        self._rules[rule.id] = rule
        self._enabled_cache = None

    def register_many(self, rules: List[Rule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[Rule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[Rule]:
        return self._rules.get(rule_id)

    def is_enabled(self, rule_id: str) -> bool:
        return rule_id in self._rules and rule_id not in self._disabled

    def enabled_rules(self) -> Tuple[Rule, ...]:
        if self._enabled_cache is None:
            self._enabled_cache = tuple(
                r for r in self._rules.values() if r.id not in self._disabled
            )
        return self._enabled_cache

    # ---- config filtering ----

    def apply_config(self, config: SweepConfig) -> None:
        """Enable / disable rules based on config.rules."""
        enable_list = config.rules.enable
        disable_list = config.rules.disable

        disabled: Set[str] = set()
        for rule_id in self._rules:
            # An explicit enable-list turns everything else off
            if enable_list and rule_id not in enable_list:
                disabled.add(rule_id)
            # Disable list always takes precedence
            if rule_id in disable_list:
                disabled.add(rule_id)
        self._disabled = disabled
        self._enabled_cache = None

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to load custom rules from {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            self.register(_rule_from_mapping(entry, path))
            count += 1
        return count


def _rule_from_mapping(entry: object, source: Path) -> Rule:
    if not isinstance(entry, dict) or "id" not in entry or "pattern" not in entry:
        raise ConfigError(f"{source}: every custom rule needs an 'id' and a 'pattern'")
    severity = str(entry.get("severity", "medium")).lower()
    if severity not in SEVERITIES:
        raise ConfigError(
            f"{source}: rule {entry['id']} has invalid severity {severity!r}"
        )
    try:
        return Rule(
            id=str(entry["id"]),
            name=str(entry.get("name", entry["id"])),
            description=str(entry.get("description", "")),
            category=str(entry.get("category", "custom")),
            severity=severity,  # type: ignore[arg-type]
            pattern=str(entry["pattern"]),
        )
    except re.error as exc:
        raise ConfigError(
            f"{source}: rule {entry['id']} has an invalid pattern: {exc}"
        ) from exc


def build_registry(config: SweepConfig, root: Optional[Path] = None) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from secretsweep.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)

    if root is not None:
        registry.load_custom_rules(root / CUSTOM_RULES_DIRNAME)

    registry.apply_config(config)
    return registry
