"""Display-tier classification shared by every renderer.

A stored severity never changes; ``critical`` exists only at render time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable

from secretsweep.findings.models import Finding

if TYPE_CHECKING:
    from secretsweep.rules.models import Rule

CRITICAL_KINDS = frozenset({
    "AWS Access Key ID",
    "AWS Secret Access Key",
    "RSA Private Key",
    "SSH Private Key",
    "EC Private Key",
    "PGP Private Key",
    "GitHub Personal Access Token",
    "PostgreSQL Connection String",
    "MongoDB Connection String",
    "MySQL Connection String",
})

DISPLAY_TIERS = ("critical", "high", "medium", "low")


def is_critical_kind(kind: str) -> bool:
    return kind in CRITICAL_KINDS


def tier_for(severity: str, kind: str) -> str:
    if severity == "high" and is_critical_kind(kind):
        return "critical"
    return severity


def display_severity(finding: Finding) -> str:
    """Return the tier a finding is shown at: critical, high, medium, or low."""
    return tier_for(finding.severity, finding.kind)


def rule_display_severity(rule: Rule) -> str:
    """Tier the findings of *rule* are shown at; a rule's name is its kind."""
    return tier_for(rule.severity, rule.name)


def count_by_tier(findings: Iterable[Finding]) -> Dict[str, int]:
    counts = {tier: 0 for tier in DISPLAY_TIERS}
    for f in findings:
        counts[display_severity(f)] += 1
    return counts


def overall_tier(findings: Iterable[Finding]) -> str:
    """Worst display tier present, or ``clean`` when there are no findings."""
    counts = count_by_tier(findings)
    for tier in DISPLAY_TIERS:
        if counts[tier]:
            return tier
    return "clean"
