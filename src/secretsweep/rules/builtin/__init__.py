"""Built-in rules — aggregate all categories."""

from secretsweep.rules.builtin.cloud import ALL_CLOUD_RULES
from secretsweep.rules.builtin.databases import ALL_DATABASE_RULES
from secretsweep.rules.builtin.generic import ALL_GENERIC_RULES
from secretsweep.rules.builtin.keys import ALL_KEY_RULES
from secretsweep.rules.builtin.payments import ALL_PAYMENT_RULES
from secretsweep.rules.builtin.tokens import ALL_TOKEN_RULES
from secretsweep.rules.models import Rule

ALL_BUILTIN_RULES: list[Rule] = [
    *ALL_CLOUD_RULES,
    *ALL_PAYMENT_RULES,
    *ALL_TOKEN_RULES,
    *ALL_DATABASE_RULES,
    *ALL_KEY_RULES,
    *ALL_GENERIC_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
