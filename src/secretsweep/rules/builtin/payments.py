"""Payment-provider key rules."""

from secretsweep.rules.models import Rule

STRIPE_SECRET_KEY = Rule(
    id="STRIPE_SECRET_KEY",
    name="Stripe Secret Key",
    description="Stripe live secret API keys (sk_live_ prefix).",
    category="payment",
    severity="high",
    pattern=r"sk_live_[0-9a-zA-Z]{24,}",
)

STRIPE_PUBLISHABLE_KEY = Rule(
    id="STRIPE_PUBLISHABLE_KEY",
    name="Stripe Publishable Key",
    description="Stripe live publishable keys. Semi-public, hence medium.",
    category="payment",
    severity="medium",
    pattern=r"pk_live_[0-9a-zA-Z]{24,}",
)

ALL_PAYMENT_RULES = [STRIPE_SECRET_KEY, STRIPE_PUBLISHABLE_KEY]
