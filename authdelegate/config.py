"""Configuration helpers for authdelegate."""

from __future__ import annotations

import os

STALE_ACCEPT = "accept"
STALE_IGNORE = "ignore"
STALE_POLICIES = (STALE_ACCEPT, STALE_IGNORE)

# "accept" applies completions in arrival order (last writer wins).
# "ignore" drops completions from attempts superseded by a newer one.
DEFAULT_STALE_COMPLETIONS = os.environ.get("AUTHDELEGATE_STALE_COMPLETIONS", STALE_ACCEPT)


def sanitize_stale_policy(policy: str | None) -> str:
    """Normalize a stale-completion policy, falling back to the default."""

    if policy is None:
        policy = DEFAULT_STALE_COMPLETIONS
    policy = policy.strip().lower()
    if policy not in STALE_POLICIES:
        raise ValueError(f"Unsupported stale completion policy: {policy!r} (expected one of {STALE_POLICIES})")
    return policy
