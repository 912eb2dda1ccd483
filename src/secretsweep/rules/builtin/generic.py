"""Generic assignment rules — lower confidence, medium severity."""

from secretsweep.rules.models import Rule

GENERIC_API_KEY = Rule(
    id="GENERIC_API_KEY",
    name="Generic API Key",
    description="api_key / apikey assigned a quoted 16+ character value.",
    category="generic",
    severity="medium",
    pattern=r"(?i)(api[_-]?key|apikey)['\"]?\s*[:=]\s*['\"][0-9a-zA-Z]{16,}['\"]",
)

GENERIC_SECRET = Rule(
    id="GENERIC_SECRET",
    name="Generic Secret",
    description="secret / password assigned a quoted 8+ character value.",
    category="generic",
    severity="medium",
    pattern=r"(?i)(secret|password|passwd|pwd)['\"]?\s*[:=]\s*['\"][^'\"]{8,}['\"]",
)

BEARER_TOKEN = Rule(
    id="BEARER_TOKEN",
    name="Bearer Token",
    description="Authorization: Bearer <token> values.",
    category="generic",
    severity="medium",
    pattern=r"(?i)bearer\s+[a-zA-Z0-9\-_\.]+",
)

ALL_GENERIC_RULES = [GENERIC_API_KEY, GENERIC_SECRET, BEARER_TOKEN]
