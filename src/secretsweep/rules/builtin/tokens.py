"""Token rules — source control, package registries, chat, messaging SaaS."""

from secretsweep.rules.models import Rule

GITHUB_PAT = Rule(
    id="GITHUB_PAT",
    name="GitHub Personal Access Token",
    description="GitHub classic personal access tokens (ghp_ prefix).",
    category="token",
    severity="high",
    pattern=r"ghp_[0-9a-zA-Z]{36}",
)

GITHUB_OAUTH_TOKEN = Rule(
    id="GITHUB_OAUTH_TOKEN",
    name="GitHub OAuth Access Token",
    description="GitHub OAuth access tokens (gho_ prefix).",
    category="token",
    severity="high",
    pattern=r"gho_[0-9a-zA-Z]{36}",
)

GITHUB_APP_TOKEN = Rule(
    id="GITHUB_APP_TOKEN",
    name="GitHub App Token",
    description="GitHub App user-to-server and server-to-server tokens.",
    category="token",
    severity="high",
    pattern=r"(?:ghu|ghs)_[0-9a-zA-Z]{36}",
)

GITLAB_PAT = Rule(
    id="GITLAB_PAT",
    name="GitLab Personal Access Token",
    description="GitLab personal access tokens (glpat- prefix).",
    category="token",
    severity="high",
    pattern=r"glpat-[0-9A-Za-z\-_]{20}",
)

NPM_TOKEN = Rule(
    id="NPM_TOKEN",
    name="NPM Token",
    description="npm registry automation / publish tokens.",
    category="token",
    severity="high",
    pattern=r"npm_[0-9a-zA-Z]{36}",
)

SLACK_BOT_TOKEN = Rule(
    id="SLACK_BOT_TOKEN",
    name="Slack Bot Token",
    description="Slack bot tokens (xoxb-).",
    category="token",
    severity="high",
    pattern=r"xoxb-[0-9]{11}-[0-9]{11}-[0-9a-zA-Z]{24}",
)

SLACK_USER_TOKEN = Rule(
    id="SLACK_USER_TOKEN",
    name="Slack User Token",
    description="Slack user tokens (xoxp-).",
    category="token",
    severity="high",
    pattern=r"xoxp-[0-9]{11}-[0-9]{11}-[0-9a-zA-Z]{24}",
)

SLACK_WEBHOOK = Rule(
    id="SLACK_WEBHOOK",
    name="Slack Webhook URL",
    description="Slack incoming webhook URLs.",
    category="token",
    severity="high",
    pattern=r"https://hooks\.slack\.com/services/T[0-9A-Z]{8}/B[0-9A-Z]{8}/[0-9a-zA-Z]{24}",
)

DISCORD_BOT_TOKEN = Rule(
    id="DISCORD_BOT_TOKEN",
    name="Discord Bot Token",
    description="Discord bot tokens (three dot-separated segments).",
    category="token",
    severity="high",
    pattern=r"[MN][A-Za-z\d]{23,}\.[\w-]{6}\.[\w-]{27}",
)

TWILIO_API_KEY = Rule(
    id="TWILIO_API_KEY",
    name="Twilio API Key",
    description="Twilio API key SIDs (SK + 32 hex).",
    category="token",
    severity="high",
    pattern=r"SK[0-9a-fA-F]{32}",
)

SENDGRID_API_KEY = Rule(
    id="SENDGRID_API_KEY",
    name="SendGrid API Key",
    description="SendGrid API keys (SG. prefix).",
    category="token",
    severity="high",
    pattern=r"SG\.[0-9A-Za-z\-_]{22}\.[0-9A-Za-z\-_]{43}",
)

MAILCHIMP_API_KEY = Rule(
    id="MAILCHIMP_API_KEY",
    name="Mailchimp API Key",
    description="Mailchimp API keys (32 hex + datacenter suffix).",
    category="token",
    severity="high",
    pattern=r"[0-9a-f]{32}-us[0-9]{1,2}",
)

ALL_TOKEN_RULES = [
    GITHUB_PAT,
    GITHUB_OAUTH_TOKEN,
    GITHUB_APP_TOKEN,
    GITLAB_PAT,
    NPM_TOKEN,
    SLACK_BOT_TOKEN,
    SLACK_USER_TOKEN,
    SLACK_WEBHOOK,
    DISCORD_BOT_TOKEN,
    TWILIO_API_KEY,
    SENDGRID_API_KEY,
    MAILCHIMP_API_KEY,
]
