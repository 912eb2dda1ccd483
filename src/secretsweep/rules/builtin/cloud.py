"""Cloud-provider credential rules — AWS, Google Cloud, Heroku."""

from secretsweep.rules.models import Rule

AWS_ACCESS_KEY_ID = Rule(
    id="AWS_ACCESS_KEY_ID",
    name="AWS Access Key ID",
    description="AWS access key IDs (AKIA prefix, 20 characters).",
    category="cloud",
    severity="high",
    pattern=r"AKIA[0-9A-Z]{16}",
)

AWS_SECRET_ACCESS_KEY = Rule(
    id="AWS_SECRET_ACCESS_KEY",
    name="AWS Secret Access Key",
    description="Quoted 40-character secret near an 'aws' identifier.",
    category="cloud",
    severity="high",
    pattern=r"(?i)aws(.{0,20})?['\"][0-9a-zA-Z/+]{40}['\"]",
)

GOOGLE_API_KEY = Rule(
    id="GOOGLE_API_KEY",
    name="Google API Key",
    description="Google Cloud / Maps / Firebase API keys (AIza prefix).",
    category="cloud",
    severity="high",
    pattern=r"AIza[0-9A-Za-z\-_]{35}",
)

GOOGLE_OAUTH_TOKEN = Rule(
    id="GOOGLE_OAUTH_TOKEN",
    name="Google OAuth Token",
    description="Google OAuth 2.0 access tokens (ya29. prefix).",
    category="cloud",
    severity="high",
    pattern=r"ya29\.[0-9A-Za-z\-_]+",
)

HEROKU_API_KEY = Rule(
    id="HEROKU_API_KEY",
    name="Heroku API Key",
    description="Quoted UUID-shaped key near a 'heroku' identifier.",
    category="cloud",
    severity="high",
    pattern=(
        r"(?i)heroku(.{0,20})?['\"][0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}"
        r"-[0-9a-f]{4}-[0-9a-f]{12}['\"]"
    ),
)

ALL_CLOUD_RULES = [
    AWS_ACCESS_KEY_ID,
    AWS_SECRET_ACCESS_KEY,
    GOOGLE_API_KEY,
    GOOGLE_OAUTH_TOKEN,
    HEROKU_API_KEY,
]
