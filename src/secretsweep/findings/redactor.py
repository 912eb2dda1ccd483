"""Masking of matched secret values before they reach any output."""

from __future__ import annotations

REDACTED = "[REDACTED]"

# Values shorter than this are masked completely.
_MIN_REVEAL_LENGTH = 7


def redact_partial(value: str, head: int = 4, tail: int = 2) -> str:
    """Keep *head* leading and *tail* trailing characters.

    Example: ``ghp_Abc123xyz9`` → ``ghp_...z9``
    """
    if len(value) < max(_MIN_REVEAL_LENGTH, head + tail + 1):
        return REDACTED
    return f"{value[:head]}...{value[len(value) - tail:]}"


def redact(value: str, *, full: bool = False) -> str:
    """Mask *value*; ``full`` hides every character."""
    return REDACTED if full else redact_partial(value)
