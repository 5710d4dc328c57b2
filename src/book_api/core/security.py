"""Function key utilities."""

import base64
import hmac
import secrets

from src.book_api.runtime.config.config_data import AuthConfig


def generate_function_key(length: int = 32) -> str:
    """Generate a cryptographically secure function key.

    Args:
        length: Number of random bytes to generate (default 32)

    Returns:
        URL-safe base64 encoded key
    """
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def is_valid_function_key(candidate: str | None, auth_config: AuthConfig) -> bool:
    """Check a presented key against the configured function keys.

    Every configured key is compared in constant time so the response time
    does not reveal which key, if any, partially matched.
    """
    if not candidate:
        return False

    presented = candidate.encode("utf-8")
    matched = False
    for key in auth_config.function_keys:
        if hmac.compare_digest(presented, key.encode("utf-8")):
            matched = True
    return matched


def mask_secret(value: str, visible: int = 4) -> str:
    """Mask all but the first few characters of a secret for display."""
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - visible)
