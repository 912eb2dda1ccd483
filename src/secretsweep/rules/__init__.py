"""Rule engine — models, registry, built-in rules."""

from secretsweep.rules.models import Rule
from secretsweep.rules.registry import RuleRegistry, build_registry

__all__ = ["Rule", "RuleRegistry", "build_registry"]
